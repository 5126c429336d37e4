import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from jobboard.config import settings
from jobboard.core.security import create_access_token, verify_password
from jobboard.database import get_db
from jobboard.dependencies import AuthContext, get_current_user
from jobboard.models.user import AuthProvider, User
from jobboard.repos.user_repo import (
    get_by_email,
    get_by_id,
    create as create_user,
    update as update_user,
)
from jobboard.schemas.auth import (
    GoogleAuthRequest,
    Token,
    UserLogin,
    UserProfileUpdate,
    UserRegister,
    UserResponse,
)
from jobboard.services.google_auth import GoogleAuthError, verify_id_token

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth", tags=["auth"])


def _user_to_response(user) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        name=user.name,
        is_admin=bool(getattr(user, "is_admin", False)),
        avatar=getattr(user, "avatar", None),
    )


def _issue_session(response: Response, user: User) -> Token:
    """Sign a token for the user, set it as the session cookie, and return it in the body."""
    token = create_access_token(user.id)
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        httponly=True,
        secure=settings.app_env.lower() in {"production", "prod"},
        samesite="strict",
        max_age=settings.access_token_expire_minutes * 60,
    )
    return Token(access_token=token, user=_user_to_response(user))


@router.post("/register", response_model=Token)
def register(data: UserRegister, response: Response, db: Session = Depends(get_db)):
    try:
        if get_by_email(db, data.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already registered",
            )
        user = create_user(db, data.email, data.password, name=data.name, auth_provider=AuthProvider.EMAIL)
        logger.info("User registered: %s", user.email)
        return _issue_session(response, user)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Register failed for email=%s: %s", data.email, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to register user") from e


@router.post("/login", response_model=Token)
def login(data: UserLogin, response: Response, db: Session = Depends(get_db)):
    try:
        user = get_by_email(db, data.email.strip())
        if not user or not verify_password(data.password, user.password_hash):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid email or password",
            )
        logger.info("User logged in: %s", user.email)
        return _issue_session(response, user)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Login failed for email=%s: %s", data.email, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to log in") from e


@router.post("/google", response_model=Token)
def google_login(data: GoogleAuthRequest, response: Response, db: Session = Depends(get_db)):
    """Sign in with a Google ID token; the account is created on first use."""
    try:
        identity = verify_id_token(data.token)
    except GoogleAuthError as e:
        logger.info("Google sign-in rejected: %s", e)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Failed to authenticate with Google") from e

    try:
        user = get_by_email(db, identity.email)
        if not user:
            user = create_user(
                db,
                identity.email,
                name=identity.name,
                auth_provider=AuthProvider.GOOGLE,
                avatar=identity.picture,
            )
            logger.info("User created from Google sign-in: %s", user.email)
        return _issue_session(response, user)
    except Exception as e:
        logger.exception("Google sign-in failed for email=%s: %s", identity.email, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to authenticate with Google") from e


@router.post("/apple")
def apple_login():
    raise HTTPException(status_code=status.HTTP_501_NOT_IMPLEMENTED, detail="Apple Sign In not implemented yet")


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(settings.auth_cookie_name)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserResponse)
def get_me(
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_user),
):
    record = get_by_id(db, user.id)
    if not record:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return _user_to_response(record)


@router.patch("/me", response_model=UserResponse)
def update_profile(
    data: UserProfileUpdate,
    db: Session = Depends(get_db),
    user: AuthContext = Depends(get_current_user),
):
    try:
        updated = update_user(db, user.id, name=data.name, avatar=data.avatar)
        if not updated:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return _user_to_response(updated)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Profile update failed for user=%s: %s", user.id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update profile") from e
