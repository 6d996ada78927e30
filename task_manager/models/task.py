from sqlmodel import SQLModel, Field
from datetime import datetime
from uuid import uuid4

class Task(SQLModel, table=True):
    """Task model for todo items, owned by exactly one user."""
    __tablename__ = "tasks"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    description: str
    completed: bool = Field(default=False)
    owner_id: str = Field(foreign_key="users.id", index=True)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
