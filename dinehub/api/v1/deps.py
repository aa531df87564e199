from sqlalchemy.ext.asyncio import AsyncSession
from dinehub.core.exceptions import NotFoundError
from dinehub.models.menu import Menu, MenuItem
from dinehub.models.restaurant import Restaurant
from dinehub.models.user import User
from dinehub.services.store import store

# Records owned by someone else are reported exactly like missing ones.

async def owned_restaurant(db: AsyncSession, user: User, restaurant_id: int) -> Restaurant:
    restaurant = await store.get_restaurant(db, restaurant_id)
    if restaurant is None or restaurant.user_id != user.id:
        raise NotFoundError("Restaurant not found")
    return restaurant

async def owned_menu(db: AsyncSession, user: User, menu_id: int) -> Menu:
    menu = await store.get_menu(db, menu_id)
    if menu is None:
        raise NotFoundError("Menu not found")
    restaurant = await store.get_restaurant(db, menu.restaurant_id)
    if restaurant is None or restaurant.user_id != user.id:
        raise NotFoundError("Menu not found")
    return menu

async def owned_menu_item(db: AsyncSession, user: User, item_id: int) -> MenuItem:
    item = await store.get_menu_item(db, item_id)
    if item is None:
        raise NotFoundError("Menu item not found")
    await owned_menu(db, user, item.menu_id)
    return item
