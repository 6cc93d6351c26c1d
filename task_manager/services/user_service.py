import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select, or_

from task_manager.auth.auth_handler import get_password_hash, verify_password
from task_manager.errors import DuplicateUser, InvalidCredentials
from task_manager.models import User, UserRole

logger = logging.getLogger(__name__)


def create_user(db: Session, username: str, email: str, password: str, role: UserRole = UserRole.user) -> User:
    email = email.lower()
    statement = select(User).where(or_(User.email == email, User.username == username))
    if db.exec(statement).first():
        raise DuplicateUser()

    user = User(username=username, email=email, password=get_password_hash(password), role=role)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same name/email
        db.rollback()
        raise DuplicateUser()
    db.refresh(user)
    logger.info("Registered user %s (id=%s, role=%s)", user.username, user.id, user.role.value)
    return user


def get_user_by_email(email: str, db: Session) -> Optional[User]:
    statement = select(User).where(User.email == email.lower())
    return db.exec(statement).first()


def authenticate_user(db: Session, email: str, password: str) -> User:
    user = get_user_by_email(email, db)
    if not user or not verify_password(password, user.password):
        logger.info("Failed login attempt for %s", email)
        raise InvalidCredentials()
    return user
