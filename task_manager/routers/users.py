from fastapi import APIRouter, BackgroundTasks, Body, Depends, File, HTTPException, Response, UploadFile, status
from sqlalchemy.orm import Session

from ..auth import AuthContext, get_auth_context, get_current_user
from ..database import get_db
from ..exceptions import AuthenticationError
from ..images import MAX_AVATAR_BYTES, check_avatar_upload, normalize_avatar
from ..models import User
from ..notifications import send_cancellation_email, send_welcome_email
from ..schemas.updates import parse_partial_update
from ..schemas.user import ALLOWED_USER_UPDATES, AuthResponse, UserCreate, UserLogin, UserPublic, UserUpdate
from ..services import tokens, users

router = APIRouter()


@router.post("/users", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user: UserCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    """Create a new account and open a first session for it."""
    db_user = users.create_user(db, user)
    token = tokens.issue_token(db, db_user)
    background_tasks.add_task(send_welcome_email, db_user.email, db_user.name)
    return AuthResponse(user=UserPublic.model_validate(db_user), token=token)


@router.post("/users/login", response_model=AuthResponse)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Sign in and get a new session token."""
    try:
        db_user = users.find_by_credentials(db, credentials.email, credentials.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    token = tokens.issue_token(db, db_user)
    return AuthResponse(user=UserPublic.model_validate(db_user), token=token)


@router.post("/users/logout")
def logout(context: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)):
    """End the session the request was made with."""
    tokens.revoke_token(db, context.user, context.token)
    return Response(status_code=status.HTTP_200_OK)


@router.post("/users/logoutAll")
def logout_all(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """End every session of the current user."""
    tokens.revoke_all_tokens(db, current_user)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/users/me", response_model=UserPublic)
def read_users_me(current_user: User = Depends(get_current_user)):
    return UserPublic.model_validate(current_user)


@router.patch("/users/me", response_model=UserPublic)
def update_users_me(
    updates: dict = Body(...),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    changes = parse_partial_update(updates, ALLOWED_USER_UPDATES, UserUpdate)
    db_user = users.update_user(db, current_user, changes)
    return UserPublic.model_validate(db_user)


@router.delete("/users/me", response_model=UserPublic)
def delete_users_me(
    background_tasks: BackgroundTasks,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete the account, its tasks and its sessions."""
    deleted = UserPublic.model_validate(current_user)
    users.delete_user(db, current_user)
    background_tasks.add_task(send_cancellation_email, deleted.email, deleted.name)
    return deleted


@router.post("/users/me/avatar")
def upload_avatar(
    avatar: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    # One byte past the ceiling is enough to know the file is too large
    data = avatar.file.read(MAX_AVATAR_BYTES + 1)
    check_avatar_upload(avatar.filename, len(data))
    users.set_avatar(db, current_user, normalize_avatar(data))
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/users/me/avatar")
def delete_avatar(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    users.clear_avatar(db, current_user)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/users/{user_id}/avatar")
def read_avatar(user_id: str, db: Session = Depends(get_db)):
    """Public avatar image, always served as PNG."""
    return Response(content=users.get_avatar(db, user_id), media_type="image/png")
