"""Draft menus written by Claude.

A draft is only returned, never stored. The dashboard creates the menu and
then its items once the owner accepts it, so a failed or abandoned
generation leaves nothing behind.
"""
import json
import logging
import re
from functools import lru_cache
from typing import Any, Dict, Optional
import anthropic
from dinehub.core.config import settings
from dinehub.core.exceptions import ConfigurationError, UpstreamServiceError, ValidationError
from dinehub.schemas.generate import MenuDraft
from dinehub.schemas.validation import validate_payload

logger = logging.getLogger(__name__)

GENERATION_FAILED = "Failed to generate menu"

_SYSTEM_PROMPT = "You are a helpful assistant that generates restaurant menus in JSON format."

_USER_PROMPT_TEMPLATE = """\
Generate a menu for a {cuisine} restaurant with about 15 items spread across categories (Appetizer, Main, Dessert, Drink).
The tone should be {tone}.
Return a JSON object with the following structure:
{{
  "name": "Menu Name",
  "description": "Menu Description",
  "items": [
    {{
      "name": "Item Name",
      "description": "Brief 1-line description",
      "price": "10.00",
      "category": "Appetizer" | "Main" | "Dessert" | "Drink",
      "isBestseller": true/false,
      "isChefsPick": true/false,
      "isTodaysSpecial": true/false
    }}
  ]
}}
Rules: Mark 2-3 items as bestseller, 2 as chef's pick, 1-2 as today's special. Generate around 15 items total. Keep descriptions short (one line).
Do not include any markdown formatting. Output only the JSON object."""

_FENCE_OPEN = re.compile(r"^```(?:json)?\s*\n?")
_FENCE_CLOSE = re.compile(r"\n?```\s*$")


def build_prompt(cuisine: str, tone: Optional[str] = None) -> str:
    return _USER_PROMPT_TEMPLATE.format(
        cuisine=cuisine.strip(),
        tone=(tone or "").strip() or settings.DEFAULT_TONE,
    )

def _normalize_item(item: Any) -> Any:
    if not isinstance(item, dict):
        return item
    item = dict(item)
    price = item.get("price")
    # Models sometimes answer 12.5 instead of "12.50"
    if isinstance(price, (int, float)) and not isinstance(price, bool):
        item["price"] = f"{price:.2f}"
    for flag in ("isBestseller", "isChefsPick", "isTodaysSpecial"):
        if item.get(flag) is None:
            item[flag] = False
    if item.get("isAvailable") is None:
        item["isAvailable"] = True
    if item.get("description") is None:
        item["description"] = ""
    return item

def parse_draft(text: str) -> MenuDraft:
    """Parse the model's reply into a MenuDraft or raise UpstreamServiceError."""
    raw = (text or "").strip()
    if not raw:
        raise UpstreamServiceError(GENERATION_FAILED)
    if raw.startswith("```"):
        raw = _FENCE_CLOSE.sub("", _FENCE_OPEN.sub("", raw))

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.warning("Menu draft reply is not JSON: %s", exc)
        raise UpstreamServiceError(GENERATION_FAILED) from exc
    if not isinstance(data, dict) or not isinstance(data.get("items"), list):
        logger.warning("Menu draft reply has no items list")
        raise UpstreamServiceError(GENERATION_FAILED)

    payload: Dict[str, Any] = dict(data)
    payload["items"] = [_normalize_item(it) for it in data["items"]]
    try:
        return validate_payload("menu_draft", payload)
    except ValidationError as exc:
        logger.warning("Menu draft reply failed validation: %s", exc.message)
        raise UpstreamServiceError(GENERATION_FAILED) from exc


class MenuDraftService:
    def __init__(
        self,
        client: Optional[anthropic.AsyncAnthropic] = None,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ):
        if client is None:
            key = api_key or settings.ANTHROPIC_API_KEY
            if not key:
                raise ConfigurationError("No Anthropic API key configured. Set ANTHROPIC_API_KEY.")
            client = anthropic.AsyncAnthropic(
                api_key=key,
                timeout=settings.AI_TIMEOUT_SECONDS,
                max_retries=0,
            )
        self.client = client
        self.model = model or settings.AI_MODEL
        self.max_tokens = max_tokens or settings.AI_MAX_TOKENS

    async def generate(self, cuisine: str, tone: Optional[str] = None) -> MenuDraft:
        prompt = build_prompt(cuisine, tone)
        try:
            message = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                system=_SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.AnthropicError as exc:
            logger.error("Menu draft request failed: %s", exc)
            raise UpstreamServiceError(GENERATION_FAILED) from exc

        text = "".join(
            block.text for block in message.content if getattr(block, "type", None) == "text"
        )
        draft = parse_draft(text)
        logger.info("Generated %s draft with %d items", cuisine, len(draft.items))
        return draft


@lru_cache(maxsize=1)
def get_menu_draft_service() -> MenuDraftService:
    return MenuDraftService()
