from datetime import datetime, UTC
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel

class UserRole(str, Enum):
    user = "user"
    admin = "admin"


class User(SQLModel, table=True):
    """User model represents an account that owns tasks."""
    __tablename__ = "users"
    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(unique=True, index=True)
    email: str = Field(unique=True, index=True)
    password: str = Field(exclude=True)  # bcrypt hash
    role: UserRole = Field(default=UserRole.user)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
