import logging
from typing import Optional
from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from dinehub.core.config import settings
from dinehub.core.database import get_db
from dinehub.core.exceptions import AuthError
from dinehub.core.security import (
    clear_session_cookie,
    create_session,
    get_optional_user,
    revoke_session,
    set_session_cookie,
    verify_password,
)
from dinehub.models.user import User
from dinehub.schemas.user import UserCreate, UserLogin, UserOut
from dinehub.services.store import store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])

@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def register(user_in: UserCreate, response: Response, db: AsyncSession = Depends(get_db)):
    user = await store.create_user(db, user_in.username, user_in.password)
    session = await create_session(db, user.id)
    set_session_cookie(response, session)
    logger.info("Registered user %s", user.username)
    return user

@router.post("/login", response_model=UserOut)
async def login(credentials: UserLogin, response: Response, db: AsyncSession = Depends(get_db)):
    user = await store.get_user_by_username(db, credentials.username)
    if not user or not verify_password(credentials.password, user.hashed_password):
        raise AuthError("Invalid credentials")

    session = await create_session(db, user.id)
    set_session_cookie(response, session)
    return user

@router.post("/logout")
async def logout(request: Request, response: Response, db: AsyncSession = Depends(get_db)):
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if token:
        await revoke_session(db, token)
    clear_session_cookie(response)
    return {"message": "Logged out"}

@router.get("/me", response_model=Optional[UserOut])
async def me(user: Optional[User] = Depends(get_optional_user)):
    return user
