import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends, Request, Response
from passlib.context import CryptContext
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from dinehub.core.config import settings
from dinehub.core.database import get_db
from dinehub.core.exceptions import AuthError
from dinehub.models.session import UserSession
from dinehub.models.user import User

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

def utcnow() -> datetime:
    # Session timestamps are stored as naive UTC.
    return datetime.now(timezone.utc).replace(tzinfo=None)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


async def create_session(db: AsyncSession, user_id: int, now: Optional[datetime] = None) -> UserSession:
    """Issue a session that expires SESSION_TTL_HOURS after ``now``.

    Expiry is absolute: requests made with the session never extend it.
    """
    issued = now or utcnow()
    session = UserSession(
        token=secrets.token_urlsafe(32),
        user_id=user_id,
        created_at=issued,
        expires_at=issued + timedelta(hours=settings.SESSION_TTL_HOURS),
    )
    db.add(session)
    await db.commit()
    logger.info("Issued session for user %s", user_id)
    return session

async def revoke_session(db: AsyncSession, token: str) -> None:
    await db.execute(delete(UserSession).where(UserSession.token == token))
    await db.commit()

async def resolve_session(db: AsyncSession, token: Optional[str]) -> Optional[User]:
    if not token:
        return None
    session = await db.get(UserSession, token)
    if session is None:
        return None
    if session.expires_at <= utcnow():
        logger.info("Session for user %s expired", session.user_id)
        await db.delete(session)
        await db.commit()
        return None
    return await db.get(User, session.user_id)


def set_session_cookie(response: Response, session: UserSession) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session.token,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )

def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(key=settings.SESSION_COOKIE_NAME, httponly=True, samesite="lax")


async def get_optional_user(request: Request, db: AsyncSession = Depends(get_db)) -> Optional[User]:
    return await resolve_session(db, request.cookies.get(settings.SESSION_COOKIE_NAME))

async def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise AuthError()
    return user
