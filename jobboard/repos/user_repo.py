from sqlalchemy.orm import Session

from jobboard.models.user import AuthProvider, User
from jobboard.core.security import hash_password, generate_id


def get_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def get_by_id(db: Session, user_id: str) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def create(
    db: Session,
    email: str,
    password: str | None = None,
    *,
    name: str | None = None,
    auth_provider: AuthProvider = AuthProvider.EMAIL,
    avatar: str | None = None,
) -> User:
    user = User(
        id=generate_id(),
        email=email,
        password_hash=hash_password(password) if password else None,
        name=name,
        auth_provider=auth_provider,
        avatar=avatar,
        is_admin=False,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def update(
    db: Session,
    user_id: str,
    *,
    name: str | None = None,
    avatar: str | None = None,
    is_admin: bool | None = None,
) -> User | None:
    user = get_by_id(db, user_id)
    if not user:
        return None
    if name is not None:
        user.name = name
    if avatar is not None:
        user.avatar = avatar
    if is_admin is not None:
        user.is_admin = is_admin
    db.commit()
    db.refresh(user)
    return user
