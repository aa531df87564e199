from typing import List, Optional
from pydantic import PositiveInt
from dinehub.schemas.base import CamelModel, NonEmptyStr
from dinehub.schemas.menu import MenuItemFields

class MenuGenerate(CamelModel):
    restaurant_id: PositiveInt
    cuisine: NonEmptyStr
    tone: Optional[str] = None

class MenuItemDraft(MenuItemFields):
    pass

class MenuDraft(CamelModel):
    name: NonEmptyStr
    description: str = ""
    items: List[MenuItemDraft]
