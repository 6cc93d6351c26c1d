import logging
from datetime import datetime, timedelta, UTC
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError as PydanticValidationError

from task_manager.configs.settings import Settings, get_settings
from task_manager.errors import InvalidToken, Unauthorized
from task_manager.models import User
from task_manager.schemas.token import Claims

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_HOURS = 24

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

bearer_scheme = HTTPBearer(auto_error=False)

def verify_password(plain_password, hashed_password):
    if not plain_password or not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password):
    return pwd_context.hash(password)

def create_access_token(user: User, secret: str, expires_delta: timedelta | None = None) -> str:
    to_encode = {
        "sub": user.username,
        "id": user.id,
        "role": user.role.value if hasattr(user.role, "value") else user.role,
    }
    expire = datetime.now(UTC) + (expires_delta or timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, secret, algorithm=ALGORITHM)

def decode_access_token(token: str, secret: str) -> Claims:
    """Verify signature and expiry, then map the payload onto ``Claims``."""
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
        return Claims.model_validate({
            "id": payload.get("id"),
            "username": payload.get("sub"),
            "role": payload.get("role"),
            "exp": payload.get("exp"),
        })
    except (JWTError, PydanticValidationError) as e:
        logger.info("Rejected access token: %s", e)
        raise InvalidToken()

def issue_token(user: User, settings: Settings) -> str:
    return create_access_token(user, settings.JWT_SECRET, timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS))

def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Claims:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise Unauthorized()
    return decode_access_token(credentials.credentials, settings.JWT_SECRET)
