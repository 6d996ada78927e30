"""Session token issuer.

A token is valid when its signature and expiry check out *and* it is still
listed in the owner's ``user_tokens`` rows. Deleting the row revokes it.
"""
import logging

from sqlalchemy.orm import Session

from ..exceptions import AuthenticationError
from ..models import User, UserToken
from ..security import create_access_token, decode_access_token

logger = logging.getLogger(__name__)


def issue_token(db: Session, user: User) -> str:
    token = create_access_token(user.id)
    db.add(UserToken(token=token, user_id=user.id))
    db.commit()
    return token


def list_tokens(db: Session, user_id: str) -> list:
    """The user's current tokens, oldest first."""
    rows = db.query(UserToken).filter(UserToken.user_id == user_id).order_by(UserToken.id).all()
    return [row.token for row in rows]


def validate_token(db: Session, token: str) -> User:
    user_id = decode_access_token(token)
    if not user_id:
        raise AuthenticationError()

    user = (
        db.query(User)
        .join(UserToken, UserToken.user_id == User.id)
        .filter(User.id == user_id, UserToken.token == token)
        .first()
    )
    if user is None:
        logger.debug("Token for user %s is no longer active", user_id)
        raise AuthenticationError()
    return user


def revoke_token(db: Session, user: User, token: str) -> None:
    db.query(UserToken).filter(
        UserToken.user_id == user.id, UserToken.token == token
    ).delete(synchronize_session=False)
    db.commit()


def revoke_all_tokens(db: Session, user: User) -> None:
    db.query(UserToken).filter(UserToken.user_id == user.id).delete(synchronize_session=False)
    db.commit()
