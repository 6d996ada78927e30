from sqlmodel import SQLModel, Field
from datetime import datetime
from typing import Optional

class UserToken(SQLModel, table=True):
    """A currently valid session token of a user.

    Rows are ordered by ``id``; deleting a row revokes the token.
    """
    __tablename__ = "user_tokens"

    id: Optional[int] = Field(default=None, primary_key=True)
    token: str = Field(index=True)
    user_id: str = Field(foreign_key="users.id", index=True)
    created_at: datetime = Field(default_factory=datetime.utcnow)
