"""HTTP errors raised by services and dependencies.

Every error is an ``HTTPException`` with a fixed status and message, so
FastAPI renders it without extra plumbing; ``main`` reshapes the body to
``{"message": ...}``.
"""
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status


class ValidationError(HTTPException):
    def __init__(self, message: str = "Validation failed", errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
        self.errors = errors or []


class DuplicateUser(HTTPException):
    def __init__(self):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists")


class InvalidCredentials(HTTPException):
    # Same message whether the email is unknown or the password is wrong
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )


class Unauthorized(HTTPException):
    def __init__(self, message: str = "No token, authorization denied"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=message,
            headers={"WWW-Authenticate": "Bearer"},
        )


class InvalidToken(Unauthorized):
    def __init__(self):
        super().__init__("Token is not valid")


class AccessDenied(HTTPException):
    def __init__(self, message: str = "Access denied"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=message)


class NotFound(HTTPException):
    def __init__(self, message: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=message)
