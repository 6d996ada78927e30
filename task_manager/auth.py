from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from .database import get_db
from .exceptions import AuthenticationError
from .models import User
from .services.tokens import validate_token

BEARER_PREFIX = "Bearer "


@dataclass
class AuthContext:
    """The authenticated caller of a request."""
    user: User
    token: str


def _get_token_from_request(request: Request) -> Optional[str]:
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith(BEARER_PREFIX):
        return None
    return auth_header[len(BEARER_PREFIX):].strip() or None


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Please authenticate.",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_auth_context(
    request: Request,
    db: Session = Depends(get_db),
) -> AuthContext:
    """Resolve the bearer token to a user, or reject with a generic 401."""
    token = _get_token_from_request(request)
    if not token:
        raise _unauthorized()

    try:
        user = validate_token(db, token)
    except AuthenticationError:
        raise _unauthorized()

    context = AuthContext(user=user, token=token)
    request.state.auth = context
    return context


def get_current_user(context: AuthContext = Depends(get_auth_context)) -> User:
    """Get current user from the bearer token."""
    return context.user
