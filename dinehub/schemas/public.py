from typing import List, Optional
from dinehub.schemas.base import CamelModel
from dinehub.schemas.menu import MenuItemOut, MenuWithItems
from dinehub.schemas.restaurant import RestaurantOut

class ThemeOut(CamelModel):
    key: str
    accent: str
    background: str
    header_from: str
    header_to: str
    badge_bg: str
    badge_text: str
    pattern: str

class DisplayItemOut(MenuItemOut):
    display_price: str
    badges: List[str] = []

class CategoryGroupOut(CamelModel):
    category: str
    items: List[DisplayItemOut]

class PublicMenuOut(CamelModel):
    restaurant: RestaurantOut
    table: Optional[str] = None
    theme: ThemeOut
    menus: List[MenuWithItems]
    default_menu_id: Optional[int] = None
    categories: List[CategoryGroupOut] = []
