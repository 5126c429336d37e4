import logging
from dataclasses import dataclass

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from jobboard.config import settings
from jobboard.database import get_db
from jobboard.core.security import decode_access_token
from jobboard.repos.user_repo import get_by_id

logger = logging.getLogger(__name__)
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthContext:
    """Identity of the caller, resolved from a verified token."""

    id: str
    email: str
    name: str | None
    is_admin: bool


def get_request_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str | None:
    """Session cookie first, then an Authorization: Bearer header."""
    token = request.cookies.get(settings.auth_cookie_name)
    if token:
        return token
    if credentials and credentials.credentials:
        return credentials.credentials
    return None


def get_current_user(
    db: Session = Depends(get_db),
    token: str | None = Depends(get_request_token),
) -> AuthContext:
    if not token:
        logger.info("Auth failed: no token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied. No token provided.",
        )
    user_id = decode_access_token(token)
    if not user_id:
        logger.info("Auth failed: invalid or expired token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token.",
        )
    user = get_by_id(db, user_id)
    if not user:
        logger.info("Auth failed: user from token not found")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found.",
        )
    return AuthContext(
        id=user.id,
        email=user.email,
        name=user.name,
        is_admin=bool(user.is_admin),
    )


def get_current_admin(
    user: AuthContext = Depends(get_current_user),
) -> AuthContext:
    """Require an authenticated user with is_admin=True."""
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied. Admin privileges required.",
        )
    return user
