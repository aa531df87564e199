from pydantic import Field
from dinehub.schemas.base import CamelModel, NonEmptyStr

class UserCreate(CamelModel):
    username: NonEmptyStr
    password: str = Field(..., min_length=1)

class UserLogin(UserCreate):
    pass

class UserOut(CamelModel):
    id: int
    username: str
