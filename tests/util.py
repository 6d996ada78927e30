"""Helpers shared by the test modules."""
import io

from PIL import Image

from task_manager.database import get_session
from task_manager.models import Task, User
from task_manager.schemas.user import UserCreate
from task_manager.services import tokens, users


def make_user(name, email, password):
    with get_session() as db:
        user = users.create_user(db, UserCreate(name=name, email=email, password=password))
        token = tokens.issue_token(db, user)
        return {"id": user.id, "name": name, "email": email, "password": password, "token": token}


def auth_headers(user):
    return {"Authorization": f"Bearer {user['token']}"}


def fetch_user(user_id):
    """Read a user through a fresh session, bypassing any cached state."""
    with get_session() as db:
        return db.query(User).filter(User.id == user_id).first()


def fetch_tasks(owner_id):
    with get_session() as db:
        return db.query(Task).filter(Task.owner_id == owner_id).all()


def fetch_tokens(user_id):
    with get_session() as db:
        return tokens.list_tokens(db, user_id)


def make_image(size=(100, 100), fmt="PNG", mode="RGB"):
    buffer = io.BytesIO()
    color = (200, 30, 30) if mode == "RGB" else 0
    Image.new(mode, size, color=color).save(buffer, format=fmt)
    return buffer.getvalue()
