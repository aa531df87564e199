"""Payload validation by operation name.

Endpoints get their bodies checked by FastAPI; this module is the same check
for raw mappings that arrive some other way (LLM replies, seed fixtures).
"""
from typing import Any, Dict, Mapping, Type, TypeVar
from pydantic import BaseModel, ValidationError as PydanticValidationError
from dinehub.core.exceptions import ValidationError, first_error
from dinehub.schemas.generate import MenuDraft, MenuGenerate, MenuItemDraft
from dinehub.schemas.menu import MenuCreate, MenuItemCreate, MenuItemUpdate
from dinehub.schemas.restaurant import RestaurantCreate
from dinehub.schemas.user import UserCreate, UserLogin

M = TypeVar("M", bound=BaseModel)

OPERATION_SCHEMAS: Dict[str, Type[BaseModel]] = {
    "register": UserCreate,
    "login": UserLogin,
    "create_restaurant": RestaurantCreate,
    "create_menu": MenuCreate,
    "create_menu_item": MenuItemCreate,
    "update_menu_item": MenuItemUpdate,
    "generate_menu": MenuGenerate,
    "menu_draft": MenuDraft,
    "menu_item_draft": MenuItemDraft,
}

def validate_model(schema: Type[M], payload: Any) -> M:
    if not isinstance(payload, Mapping):
        raise ValidationError(None, "Expected an object")
    try:
        return schema.model_validate(dict(payload))
    except PydanticValidationError as exc:
        raise first_error(exc.errors()) from exc

def validate_payload(operation: str, payload: Any) -> BaseModel:
    """Validate ``payload`` for ``operation``; raises on the first bad field."""
    try:
        schema = OPERATION_SCHEMAS[operation]
    except KeyError:
        raise ValueError(f"Unknown operation: {operation}") from None
    return validate_model(schema, payload)
