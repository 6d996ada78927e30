from .task import Task
from .token import UserToken
from .user import User

# Export all models for easy importing
__all__ = ["Task", "User", "UserToken"]
