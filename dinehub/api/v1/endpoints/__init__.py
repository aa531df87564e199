from fastapi import APIRouter
from .auth import router as auth_router
from .restaurants import router as restaurants_router
from .menus import router as menus_router
from .menu_items import router as menu_items_router
from .public import router as public_router
from .menu_page import router as menu_page_router

router = APIRouter()
router.include_router(auth_router)
router.include_router(restaurants_router)
router.include_router(menus_router)
router.include_router(menu_items_router)
router.include_router(public_router)

# Served at the site root, outside the API prefix
page_router = menu_page_router
