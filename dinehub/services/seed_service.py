import logging
from sqlalchemy.ext.asyncio import AsyncSession
from dinehub.schemas.validation import validate_payload
from dinehub.services.store import store

logger = logging.getLogger(__name__)

DEMO_USERNAME = "admin"
DEMO_PASSWORD = "password"

DEMO_RESTAURANT = {
    "name": "The Tasty Spoon",
    "slug": "tasty-spoon",
    "address": "123 Main St",
    "cuisineType": "Italian",
    "description": "Authentic Italian cuisine",
}

DEMO_MENU = {"name": "Dinner Menu", "description": "Our classic dinner selection"}

DEMO_ITEMS = [
    {
        "name": "Spaghetti Carbonara",
        "description": "Classic Roman pasta with egg, hard cheese, cured pork, and black pepper.",
        "price": "18.00",
        "category": "Main",
        "isAvailable": True,
    },
    {
        "name": "Tiramisu",
        "description": "Coffee-flavoured Italian dessert.",
        "price": "8.00",
        "category": "Dessert",
        "isAvailable": True,
    },
]

async def seed_demo_data(db: AsyncSession) -> bool:
    """Create the demo account and its menu unless the account exists."""
    if await store.get_user_by_username(db, DEMO_USERNAME):
        return False

    user = await store.create_user(db, DEMO_USERNAME, DEMO_PASSWORD)
    restaurant_in = validate_payload("create_restaurant", DEMO_RESTAURANT)
    restaurant = await store.create_restaurant(db, user.id, restaurant_in.model_dump())
    menu_in = validate_payload("create_menu", {**DEMO_MENU, "restaurantId": restaurant.id})
    menu = await store.create_menu(db, menu_in.model_dump())
    for item in DEMO_ITEMS:
        item_in = validate_payload("create_menu_item", {**item, "menuId": menu.id})
        await store.create_menu_item(db, item_in.model_dump())

    logger.info("Seeded demo restaurant '%s' for user '%s'", restaurant.slug, DEMO_USERNAME)
    return True
