from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from dinehub.api.v1.deps import owned_menu, owned_menu_item
from dinehub.core.database import get_db
from dinehub.core.exceptions import NotFoundError
from dinehub.core.security import get_current_user
from dinehub.models.user import User
from dinehub.schemas.menu import MenuItemCreate, MenuItemOut, MenuItemUpdate
from dinehub.services.store import store

router = APIRouter(prefix="/menu-items", tags=["Menu Items"])

@router.post("", response_model=MenuItemOut, status_code=status.HTTP_201_CREATED)
async def create_menu_item(
    item_in: MenuItemCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await owned_menu(db, current_user, item_in.menu_id)
    return await store.create_menu_item(db, item_in.model_dump())

@router.patch("/{item_id}", response_model=MenuItemOut)
async def update_menu_item(
    item_id: int,
    changes: MenuItemUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await owned_menu_item(db, current_user, item_id)
    item = await store.update_menu_item(db, item_id, changes.changes())
    if item is None:
        raise NotFoundError("Menu item not found")
    return item

@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_menu_item(
    item_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    # Deleting something already gone is still a success
    if await store.get_menu_item(db, item_id) is not None:
        await owned_menu_item(db, current_user, item_id)
        await store.delete_menu_item(db, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
