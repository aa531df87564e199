from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from dinehub.core.database import get_db
from dinehub.schemas.public import CategoryGroupOut, DisplayItemOut, PublicMenuOut, ThemeOut
from dinehub.schemas.restaurant import RestaurantOut
from dinehub.schemas.menu import MenuItemOut, MenuWithItems
from dinehub.services.menu_service import badges, display_price
from dinehub.services.public_menu_service import PublicMenuView, public_menu_service

router = APIRouter(prefix="/public", tags=["Public Menu"])

def display_item(item) -> DisplayItemOut:
    base = MenuItemOut.model_validate(item)
    return DisplayItemOut(
        **base.model_dump(),
        display_price=display_price(item.price),
        badges=badges(item),
    )

def to_public_menu(view: PublicMenuView) -> PublicMenuOut:
    return PublicMenuOut(
        restaurant=RestaurantOut.model_validate(view.restaurant),
        table=view.table,
        theme=ThemeOut.model_validate(view.theme),
        menus=[MenuWithItems.model_validate(m) for m in view.menus],
        default_menu_id=view.default_menu.id if view.default_menu else None,
        categories=[
            CategoryGroupOut(category=label, items=[display_item(i) for i in items])
            for label, items in view.categories.items()
        ],
    )

@router.get("/menu/{slug}", response_model=PublicMenuOut)
async def get_public_menu(
    slug: str,
    table: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    view = await public_menu_service.resolve(db, slug, table)
    return to_public_menu(view)
