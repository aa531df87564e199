import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from dinehub.api.v1.deps import owned_restaurant
from dinehub.core.database import get_db
from dinehub.core.exceptions import ConfigurationError, NotFoundError, UpstreamServiceError
from dinehub.core.security import get_current_user
from dinehub.models.user import User
from dinehub.schemas.generate import MenuDraft, MenuGenerate
from dinehub.schemas.menu import MenuCreate, MenuOut, MenuWithItems
from dinehub.services.menu_draft_service import GENERATION_FAILED, MenuDraftService, get_menu_draft_service
from dinehub.services.store import store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/menus", tags=["Menus"])

def draft_service() -> MenuDraftService:
    try:
        return get_menu_draft_service()
    except ConfigurationError as exc:
        logger.error("Menu generation unavailable: %s", exc.message)
        raise UpstreamServiceError(GENERATION_FAILED) from exc

@router.post("", response_model=MenuOut, status_code=status.HTTP_201_CREATED)
async def create_menu(
    menu_in: MenuCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await owned_restaurant(db, current_user, menu_in.restaurant_id)
    return await store.create_menu(db, menu_in.model_dump())

@router.post("/generate", response_model=MenuDraft)
async def generate_menu(
    request_in: MenuGenerate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    drafter: MenuDraftService = Depends(draft_service),
):
    """Ask the model for a draft menu. Nothing is saved here."""
    await owned_restaurant(db, current_user, request_in.restaurant_id)
    return await drafter.generate(request_in.cuisine, request_in.tone)

@router.get("/{menu_id}", response_model=MenuWithItems)
async def get_menu(menu_id: int, db: AsyncSession = Depends(get_db)):
    menu = await store.get_menu(db, menu_id)
    if menu is None:
        raise NotFoundError("Menu not found")
    return menu
