from typing import List, Optional
from pydantic import Field, PositiveInt, field_validator
from dinehub.schemas.base import CamelModel, NonEmptyStr

class MenuCreate(CamelModel):
    restaurant_id: PositiveInt
    name: NonEmptyStr
    description: Optional[str] = None
    is_active: bool = True

class MenuOut(CamelModel):
    id: int
    restaurant_id: int
    name: str
    description: Optional[str] = None
    is_active: bool


class MenuItemFields(CamelModel):
    """Item shape shared by manual creation and AI drafts."""

    name: NonEmptyStr
    description: str
    price: str = Field(..., min_length=1)
    category: str
    image_url: Optional[str] = None
    is_available: bool = True
    is_bestseller: bool = False
    is_chefs_pick: bool = False
    is_todays_special: bool = False

class MenuItemCreate(MenuItemFields):
    menu_id: PositiveInt

class MenuItemUpdate(CamelModel):
    name: Optional[NonEmptyStr] = None
    description: Optional[str] = None
    price: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None
    image_url: Optional[str] = None
    is_available: Optional[bool] = None
    is_bestseller: Optional[bool] = None
    is_chefs_pick: Optional[bool] = None
    is_todays_special: Optional[bool] = None

    @field_validator(
        "name", "description", "price", "category",
        "is_available", "is_bestseller", "is_chefs_pick", "is_todays_special",
        mode="before",
    )
    @classmethod
    def reject_null(cls, value):
        # Omit a field to leave it alone; only imageUrl may be cleared
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)

class MenuItemOut(MenuItemFields):
    id: int
    menu_id: int
    category: Optional[str] = None

class MenuWithItems(MenuOut):
    items: List[MenuItemOut] = []
