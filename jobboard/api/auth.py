# jobboard/api/auth.py

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.core.config import Settings
from jobboard.db.database import get_db
from jobboard.db.models import Admin
from jobboard.schemas.common import MessageResponse
from jobboard.schemas.user import SignupRequest, LoginRequest, AdminResponse, AuthResponse
from jobboard.security.dependencies import get_current_admin, get_settings
from jobboard.security.sessions import (
    create_session, encode_session_cookie, destroy_session,
    set_session_cookie, clear_session_cookie,
)
from jobboard.services import credentials

logger = logging.getLogger(__name__)

# Admin authentication endpoints, mounted under /api
router = APIRouter(
    prefix="/auth",
    tags=["auth"],
)


def _start_session(db: Session, admin: Admin, response: Response, settings: Settings) -> None:
    """Creates the server-side session and hands its signed id to the client."""
    record = create_session(db, admin, settings)
    set_session_cookie(response, encode_session_cookie(record, settings), settings)


@router.post("/signup", response_model=AuthResponse)
def signup(
    payload: SignupRequest,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Register an admin account and log it in.
    Fails with 400 if the username is taken.
    """
    try:
        admin = credentials.create_admin(
            db,
            username=payload.username,
            email=payload.email,
            raw_password=payload.password,
            rounds=settings.BCRYPT_ROUNDS,
        )
        _start_session(db, admin, response, settings)
    except credentials.DuplicateUsernameError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except IntegrityError:
        # Lost a race against a concurrent signup for the same username
        db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username already exists")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("AUTH: Signup failed.")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create admin")

    return {"message": "Admin created successfully", "admin": admin}


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Authenticate with username and password and establish a session."""
    try:
        admin = credentials.authenticate_admin(db, payload.username, payload.password)
        if admin is None:
            logger.warning(f"AUTH: Failed login for username '{payload.username}'.")
            # Same message whether the username or the password was wrong
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid credentials",
            )
        _start_session(db, admin, response, settings)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("AUTH: Login failed.")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Login failed")

    logger.info(f"AUTH: Admin '{admin.username}' logged in.")
    return {"message": "Login successful", "admin": admin}


@router.post("/logout", response_model=MessageResponse)
def logout(
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Destroy the session, if any, and clear the cookie. Always succeeds."""
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    try:
        if destroy_session(db, token, settings):
            logger.info("AUTH: Session destroyed.")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("AUTH: Logout failed.")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Logout failed")

    clear_session_cookie(response, settings)
    return {"message": "Logout successful"}


@router.get("/me", response_model=AdminResponse)
def read_current_admin(current_admin: Admin = Depends(get_current_admin)):
    """Return the admin behind the session cookie."""
    return current_admin
