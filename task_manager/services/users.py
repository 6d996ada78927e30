"""Credential store: user records, password hashing and account removal."""
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..exceptions import AuthenticationError, ConflictError, NotFoundError
from ..models import Task, User, UserToken
from ..schemas.user import UserCreate, UserUpdate
from ..security import get_password_hash, verify_password

logger = logging.getLogger(__name__)


def _commit_unique(db: Session) -> None:
    """Commit, turning a unique-index violation into a ConflictError."""
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Email is already registered")


def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def create_user(db: Session, data: UserCreate) -> User:
    """Persist a new user. The plaintext password is hashed before insert."""
    user = User(
        name=data.name,
        email=data.email,
        hashed_password=get_password_hash(data.password),
        age=data.age,
    )
    db.add(user)
    _commit_unique(db)
    db.refresh(user)
    logger.info("Registered user %s", user.id)
    return user


def find_by_credentials(db: Session, email: str, password: str) -> User:
    """Return the user owning ``email`` if ``password`` matches.

    Unknown email and wrong password raise the same error.
    """
    email = (email or "").strip().lower()
    user = db.query(User).filter(User.email == email).first()
    if not user:
        raise AuthenticationError("Unable to login")
    if not verify_password(password or "", user.hashed_password):
        raise AuthenticationError("Unable to login")
    return user


def update_user(db: Session, user: User, changes: UserUpdate) -> User:
    """Apply the fields explicitly set on ``changes``.

    The password is re-hashed only when it is part of the change set.
    """
    for field, value in changes.model_dump(exclude_unset=True).items():
        if field == "password":
            user.hashed_password = get_password_hash(value)
        else:
            setattr(user, field, value)
    user.updated_at = datetime.utcnow()
    _commit_unique(db)
    db.refresh(user)
    return user


def delete_user(db: Session, user: User) -> None:
    """Delete the user together with their tasks and session tokens."""
    user_id = user.id
    db.query(Task).filter(Task.owner_id == user_id).delete(synchronize_session=False)
    db.query(UserToken).filter(UserToken.user_id == user_id).delete(synchronize_session=False)
    db.delete(user)
    db.commit()
    logger.info("Deleted user %s", user_id)


def set_avatar(db: Session, user: User, data: bytes) -> None:
    user.avatar = data
    user.updated_at = datetime.utcnow()
    db.commit()


def clear_avatar(db: Session, user: User) -> None:
    user.avatar = None
    user.updated_at = datetime.utcnow()
    db.commit()


def get_avatar(db: Session, user_id: str) -> bytes:
    user = get_user(db, user_id)
    if not user or not user.avatar:
        raise NotFoundError()
    return user.avatar
