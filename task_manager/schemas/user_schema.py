from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from task_manager.models import UserRole, User


class RegisterRequest(BaseModel):
    username: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        # Emails are stored and matched lower-cased
        return value.lower()


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        # Emails are stored and matched lower-cased
        return value.lower()


class UserResponse(BaseModel):
    id: int
    username: str
    email: Optional[str] = None
    role: UserRole

    @staticmethod
    def from_user(user: User) -> 'UserResponse':
        return UserResponse.model_validate(user.model_dump())


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserResponse
