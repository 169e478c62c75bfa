# jobboard/security/sessions.py

import logging
import secrets
from datetime import timedelta, timezone
from typing import Optional

from fastapi import Response
from jose import jwt, JWTError
from sqlalchemy.orm import Session

from jobboard.core.config import Settings
from jobboard.db.models import Admin, AdminSession, utcnow

logger = logging.getLogger(__name__)


def create_session(db: Session, admin: Admin, settings: Settings) -> AdminSession:
    """
    Stores a new server-side session for the admin.
    The lifetime is absolute: it is only renewed by logging in again.
    """
    now = utcnow()
    # Drop sessions that already expired so the table does not grow forever
    purged = db.query(AdminSession).filter(AdminSession.expires_at <= now).delete(synchronize_session=False)
    if purged:
        logger.info(f"SESSIONS: Purged {purged} expired session(s).")

    record = AdminSession(
        id=secrets.token_urlsafe(32),
        admin_id=admin.id,
        expires_at=now + timedelta(seconds=settings.SESSION_TTL_SECONDS),
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def encode_session_cookie(record: AdminSession, settings: Settings) -> str:
    """Signs the session id so a forged cookie is rejected before any DB lookup."""
    to_encode = {
        "sid": record.id,
        "exp": record.expires_at.replace(tzinfo=timezone.utc),
    }
    return jwt.encode(to_encode, settings.SESSION_SECRET, algorithm=settings.SESSION_ALGORITHM)


def decode_session_cookie(token: str, settings: Settings) -> Optional[str]:
    """Returns the session id inside a cookie value, or None if invalid/expired."""
    try:
        payload = jwt.decode(token, settings.SESSION_SECRET, algorithms=[settings.SESSION_ALGORITHM])
    except JWTError:
        return None
    sid = payload.get("sid")
    return sid if isinstance(sid, str) else None


def resolve_session(db: Session, token: Optional[str], settings: Settings) -> Optional[str]:
    """Maps a cookie value to the admin id it authenticates, or None."""
    if not token:
        return None
    sid = decode_session_cookie(token, settings)
    if sid is None:
        return None
    record = db.query(AdminSession).filter(AdminSession.id == sid).first()
    if record is None or record.expires_at <= utcnow():
        return None
    return record.admin_id


def destroy_session(db: Session, token: Optional[str], settings: Settings) -> bool:
    """Deletes the session behind the cookie. Missing or invalid cookies are a no-op."""
    if not token:
        return False
    sid = decode_session_cookie(token, settings)
    if sid is None:
        return False
    deleted = db.query(AdminSession).filter(AdminSession.id == sid).delete(synchronize_session=False)
    db.commit()
    return deleted > 0


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_TTL_SECONDS,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
        path="/",
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
