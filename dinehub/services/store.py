import logging
from typing import Any, Dict, List, Optional
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from dinehub.core.exceptions import ConflictError
from dinehub.core.security import get_password_hash
from dinehub.models.menu import Menu, MenuItem
from dinehub.models.restaurant import Restaurant
from dinehub.models.user import User

logger = logging.getLogger(__name__)

class Store:
    """Table access for users, restaurants, menus and menu items.

    Identifiers come from the database's autoincrement keys, so allocation
    stays atomic under concurrent requests. Uniqueness of usernames and
    slugs is checked before insert for a friendly error, and the UNIQUE
    constraints catch whatever slips through between check and insert.
    """

    # Users
    @staticmethod
    async def get_user(db: AsyncSession, user_id: int) -> Optional[User]:
        return await db.get(User, user_id)

    @staticmethod
    async def get_user_by_username(db: AsyncSession, username: str) -> Optional[User]:
        return await db.scalar(select(User).where(User.username == username))

    @staticmethod
    async def create_user(db: AsyncSession, username: str, password: str) -> User:
        if await Store.get_user_by_username(db, username):
            raise ConflictError("Username already exists")
        user = User(username=username, hashed_password=get_password_hash(password))
        db.add(user)
        await Store._commit_unique(db, "Username already exists")
        return user

    # Restaurants
    @staticmethod
    async def get_restaurant(db: AsyncSession, restaurant_id: int) -> Optional[Restaurant]:
        return await db.get(Restaurant, restaurant_id)

    @staticmethod
    async def get_restaurant_by_slug(db: AsyncSession, slug: str) -> Optional[Restaurant]:
        return await db.scalar(select(Restaurant).where(Restaurant.slug == slug))

    @staticmethod
    async def list_restaurants(db: AsyncSession, user_id: int) -> List[Restaurant]:
        result = await db.scalars(
            select(Restaurant).where(Restaurant.user_id == user_id).order_by(Restaurant.id)
        )
        return list(result)

    @staticmethod
    async def create_restaurant(db: AsyncSession, user_id: int, fields: Dict[str, Any]) -> Restaurant:
        if await Store.get_restaurant_by_slug(db, fields["slug"]):
            raise ConflictError("Restaurant slug already exists")
        restaurant = Restaurant(user_id=user_id, **fields)
        db.add(restaurant)
        await Store._commit_unique(db, "Restaurant slug already exists")
        return restaurant

    # Menus
    @staticmethod
    async def get_menu(db: AsyncSession, menu_id: int) -> Optional[Menu]:
        return await db.scalar(
            select(Menu).where(Menu.id == menu_id).options(selectinload(Menu.items))
        )

    @staticmethod
    async def list_menus(db: AsyncSession, restaurant_id: int) -> List[Menu]:
        result = await db.scalars(
            select(Menu)
            .where(Menu.restaurant_id == restaurant_id)
            .options(selectinload(Menu.items))
            .order_by(Menu.id)
        )
        return list(result)

    @staticmethod
    async def create_menu(db: AsyncSession, fields: Dict[str, Any]) -> Menu:
        menu = Menu(**fields)
        db.add(menu)
        await db.commit()
        return menu

    # Menu items
    @staticmethod
    async def get_menu_item(db: AsyncSession, item_id: int) -> Optional[MenuItem]:
        return await db.get(MenuItem, item_id)

    @staticmethod
    async def list_menu_items(db: AsyncSession, menu_id: int) -> List[MenuItem]:
        result = await db.scalars(
            select(MenuItem).where(MenuItem.menu_id == menu_id).order_by(MenuItem.id)
        )
        return list(result)

    @staticmethod
    async def create_menu_item(db: AsyncSession, fields: Dict[str, Any]) -> MenuItem:
        item = MenuItem(**fields)
        db.add(item)
        await db.commit()
        return item

    @staticmethod
    async def update_menu_item(db: AsyncSession, item_id: int, changes: Dict[str, Any]) -> Optional[MenuItem]:
        """Merge ``changes`` into the item; fields not present stay as they are."""
        item = await db.get(MenuItem, item_id)
        if item is None:
            return None
        for key, value in changes.items():
            setattr(item, key, value)
        await db.commit()
        return item

    @staticmethod
    async def delete_menu_item(db: AsyncSession, item_id: int) -> bool:
        item = await db.get(MenuItem, item_id)
        if item is None:
            return False
        await db.delete(item)
        await db.commit()
        return True

    @staticmethod
    async def _commit_unique(db: AsyncSession, conflict_message: str) -> None:
        try:
            await db.commit()
        except IntegrityError as exc:
            await db.rollback()
            logger.warning("Unique constraint rejected insert: %s", exc.orig)
            raise ConflictError(conflict_message) from exc

store = Store()
