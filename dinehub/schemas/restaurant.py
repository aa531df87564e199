from typing import Optional
from dinehub.schemas.base import CamelModel, NonEmptyStr, Slug

class RestaurantCreate(CamelModel):
    name: NonEmptyStr
    slug: Slug
    address: Optional[str] = None
    cuisine_type: Optional[str] = None
    description: Optional[str] = None
    cover_image: Optional[str] = None

class RestaurantOut(CamelModel):
    id: int
    user_id: int
    name: str
    slug: str
    address: Optional[str] = None
    cuisine_type: Optional[str] = None
    description: Optional[str] = None
    cover_image: Optional[str] = None
