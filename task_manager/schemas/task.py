from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional

# Fields an owner may change on a task
ALLOWED_TASK_UPDATES = {"description", "completed"}


def _clean_description(value):
    if value is None or not value.strip():
        raise ValueError("Description is required")
    return value.strip()


class TaskCreate(BaseModel):
    """Schema for creating new tasks. The owner always comes from the session."""
    description: str
    completed: bool = False

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        return _clean_description(v)


class TaskUpdate(BaseModel):
    """Schema for updating existing tasks."""
    description: Optional[str] = None
    completed: Optional[bool] = None

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        return _clean_description(v)

    @field_validator("completed")
    @classmethod
    def completed_not_null(cls, v):
        if v is None:
            raise ValueError("Completed must be true or false")
        return v


class Task(BaseModel):
    """Complete task schema with all fields."""
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    description: str
    completed: bool
    owner_id: str
    created_at: datetime
    updated_at: datetime
