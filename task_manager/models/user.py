from sqlmodel import SQLModel, Field
from sqlalchemy import Column, LargeBinary
from datetime import datetime
from typing import Optional
from uuid import uuid4

class User(SQLModel, table=True):
    """User model for authentication and profile management.

    Session tokens live in ``user_tokens`` and tasks in ``tasks``; both are
    removed explicitly when the user is deleted.
    """
    __tablename__ = "users"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    name: str
    email: str = Field(unique=True, index=True)
    hashed_password: str
    age: Optional[int] = None
    avatar: Optional[bytes] = Field(default=None, sa_column=Column(LargeBinary, nullable=True))
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
