# jobboard/services/credentials.py

import logging
from typing import Optional

from sqlalchemy.orm import Session

from jobboard.db.models import Admin
from jobboard.security.passwords import hash_password, verify_password, DEFAULT_ROUNDS

logger = logging.getLogger(__name__)


class DuplicateUsernameError(ValueError):
    """Raised when signing up with a username that is already taken."""


def get_admin(db: Session, admin_id: str) -> Optional[Admin]:
    return db.query(Admin).filter(Admin.id == admin_id).first()


def get_admin_by_username(db: Session, username: str) -> Optional[Admin]:
    """Exact, case-sensitive username lookup."""
    return db.query(Admin).filter(Admin.username == username).first()


def create_admin(
    db: Session,
    username: str,
    email: str,
    raw_password: str,
    rounds: int = DEFAULT_ROUNDS,
) -> Admin:
    """
    Creates an admin account with a bcrypt-hashed password.

    Raises:
        DuplicateUsernameError: if the username already exists.
    """
    if get_admin_by_username(db, username) is not None:
        raise DuplicateUsernameError("Username already exists")

    admin = Admin(
        username=username,
        email=email,
        password_hash=hash_password(raw_password, rounds=rounds),
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info(f"CREDENTIALS: Created admin '{admin.username}' ({admin.id}).")
    return admin


def authenticate_admin(db: Session, username: str, raw_password: str) -> Optional[Admin]:
    """
    Returns the admin when the password matches, None otherwise.
    An unknown username and a wrong password look exactly the same to callers.
    """
    admin = get_admin_by_username(db, username)
    if admin is None:
        return None
    if not verify_password(raw_password, admin.password_hash):
        return None
    return admin
