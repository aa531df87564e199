import logging
from typing import List
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession
from dinehub.core.database import get_db
from dinehub.core.exceptions import NotFoundError
from dinehub.core.security import get_current_user
from dinehub.models.user import User
from dinehub.schemas.menu import MenuWithItems
from dinehub.schemas.qr import QRCodeOut
from dinehub.schemas.restaurant import RestaurantCreate, RestaurantOut
from dinehub.services.qr_service import qr_service
from dinehub.services.store import store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/restaurants", tags=["Restaurants"])

@router.post("", response_model=RestaurantOut, status_code=status.HTTP_201_CREATED)
async def create_restaurant(
    restaurant_in: RestaurantCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    restaurant = await store.create_restaurant(db, current_user.id, restaurant_in.model_dump())
    logger.info("User %s created restaurant '%s'", current_user.id, restaurant.slug)
    return restaurant

@router.get("", response_model=List[RestaurantOut])
async def list_restaurants(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await store.list_restaurants(db, current_user.id)

@router.get("/slug/{slug}", response_model=RestaurantOut)
async def get_restaurant_by_slug(slug: str, db: AsyncSession = Depends(get_db)):
    restaurant = await store.get_restaurant_by_slug(db, slug)
    if restaurant is None:
        raise NotFoundError("Restaurant not found")
    return restaurant

@router.get("/{restaurant_id}", response_model=RestaurantOut)
async def get_restaurant(restaurant_id: int, db: AsyncSession = Depends(get_db)):
    restaurant = await store.get_restaurant(db, restaurant_id)
    if restaurant is None:
        raise NotFoundError("Restaurant not found")
    return restaurant

@router.get("/{restaurant_id}/menus", response_model=List[MenuWithItems])
async def list_menus(restaurant_id: int, db: AsyncSession = Depends(get_db)):
    return await store.list_menus(db, restaurant_id)

@router.get("/{restaurant_id}/qr", response_model=QRCodeOut)
async def get_qr_code(restaurant_id: int, request: Request, db: AsyncSession = Depends(get_db)):
    restaurant = await store.get_restaurant(db, restaurant_id)
    if restaurant is None:
        raise NotFoundError("Restaurant not found")

    protocol = request.headers.get("x-forwarded-proto") or request.url.scheme
    host = request.headers.get("x-forwarded-host") or request.headers.get("host") or request.url.netloc
    return QRCodeOut(qr_code_url=qr_service.menu_qr_data_uri(protocol, host, restaurant.slug))
