from pydantic import BaseModel, ConfigDict, EmailStr, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime

# Fields a user may change on their own profile
ALLOWED_USER_UPDATES = {"name", "email", "password", "age"}

PASSWORD_MIN_LENGTH = 7


def _clean_name(value):
    if value is None or not value.strip():
        raise ValueError("Name is required")
    return value.strip()


def _clean_email(value):
    if isinstance(value, str):
        return value.strip().lower()
    return value


def _clean_password(value):
    if value is None:
        raise ValueError("Password is required")
    value = value.strip()
    if len(value) < PASSWORD_MIN_LENGTH:
        raise ValueError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long")
    if "password" in value.lower():
        raise ValueError('Password can not contain "password"!')
    return value


def _check_age(value):
    if value is not None and value < 0:
        raise ValueError("Please provide a valid age (>= 0 years)!")
    return value


class UserCreate(BaseModel):
    """Registration payload."""
    name: str
    email: EmailStr
    password: str
    age: Optional[int] = None

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return _clean_email(v)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _clean_name(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        return _clean_password(v)

    @field_validator("age")
    @classmethod
    def validate_age(cls, v):
        return _check_age(v)


class UserUpdate(BaseModel):
    """Partial profile update. Only keys present in the request are applied.

    ``None`` is rejected for everything except ``age``, which it clears.
    """
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    age: Optional[int] = None

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        if v is None:
            raise ValueError("Email is required")
        return _clean_email(v)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _clean_name(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        return _clean_password(v)

    @field_validator("age")
    @classmethod
    def validate_age(cls, v):
        return _check_age(v)


class UserLogin(BaseModel):
    email: str
    password: str


class UserPublic(BaseModel):
    """User as seen by API callers: no password, tokens or avatar."""
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    email: str
    age: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class AuthResponse(BaseModel):
    user: UserPublic
    token: str
