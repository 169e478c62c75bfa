# jobboard/security/dependencies.py

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from jobboard.core.config import Settings
from jobboard.db.database import get_db
from jobboard.db.models import Admin
from jobboard.security.sessions import resolve_session

AUTH_REQUIRED = "Authentication required"


def get_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


# Dependency to get the current authenticated admin.
# Every admin-only endpoint declares Depends(get_current_admin).
def get_current_admin(
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> Admin:
    """Resolves the session cookie to an Admin or fails with a uniform 401."""
    # No distinction between "never logged in", "expired" and "unknown admin"
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=AUTH_REQUIRED,
    )

    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    admin_id = resolve_session(db, token, settings)
    if admin_id is None:
        raise credentials_exception

    admin = db.query(Admin).filter(Admin.id == admin_id).first()
    if admin is None:
        # Session outlived its admin row
        raise credentials_exception
    return admin
