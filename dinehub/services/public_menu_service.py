from dataclasses import dataclass, field
from typing import Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from dinehub.core.exceptions import NotFoundError
from dinehub.models.menu import Menu, MenuItem
from dinehub.models.restaurant import Restaurant
from dinehub.services.menu_service import default_selection, group_by_category
from dinehub.services.store import store
from dinehub.services.theme_service import Theme, resolve_theme

@dataclass
class PublicMenuView:
    restaurant: Restaurant
    theme: Theme
    menus: List[Menu]
    table: Optional[str] = None
    default_menu: Optional[Menu] = None
    categories: Dict[str, List[MenuItem]] = field(default_factory=dict)

    @property
    def has_menus(self) -> bool:
        return bool(self.menus)


class PublicMenuService:
    @staticmethod
    async def resolve(db: AsyncSession, slug: str, table: Optional[str] = None) -> PublicMenuView:
        """Read-only view of a restaurant's menus for the diner-facing page.

        ``table`` is whatever the QR code on the table carried; it is shown,
        never checked.
        """
        restaurant = await store.get_restaurant_by_slug(db, slug)
        if restaurant is None:
            raise NotFoundError("Menu not found")

        menus = await store.list_menus(db, restaurant.id)
        default_menu = default_selection(menus)
        return PublicMenuView(
            restaurant=restaurant,
            theme=resolve_theme(restaurant.cuisine_type),
            menus=menus,
            table=(table or "").strip() or None,
            default_menu=default_menu,
            categories=group_by_category(default_menu.items) if default_menu else {},
        )

public_menu_service = PublicMenuService()
