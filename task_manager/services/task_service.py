import logging
from datetime import datetime, UTC
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import delete
from sqlalchemy.orm.exc import StaleDataError
from sqlmodel import Session, select, col

from task_manager.auth.access_control import Action, ensure_authorized
from task_manager.errors import NotFound, ValidationError
from task_manager.models import Task, TaskStatus, User
from task_manager.schemas.token import Claims

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "status")


def _task_not_found() -> NotFound:
    return NotFound("Task not found")


def list_tasks(db: Session, claims: Claims) -> List[Tuple[Task, str]]:
    """Tasks visible to ``claims`` with their owner's username, newest first."""
    statement = select(Task, User.username).join(User, Task.user_id == User.id)
    if not claims.is_admin:
        statement = statement.where(Task.user_id == claims.id)
    statement = statement.order_by(col(Task.created_at).desc(), col(Task.id).desc())
    return list(db.exec(statement).all())


def _load_task(db: Session, task_id: int) -> Task:
    task = db.get(Task, task_id)
    if not task:
        raise _task_not_found()
    return task


def _owner_username(db: Session, task: Task) -> Optional[str]:
    owner = db.get(User, task.user_id)
    return owner.username if owner else None


def get_task(db: Session, claims: Claims, task_id: int) -> Tuple[Task, Optional[str]]:
    task = _load_task(db, task_id)
    ensure_authorized(claims, Action.read, task)
    return task, _owner_username(db, task)


def create_task(db: Session, claims: Claims, title: str, description: str | None = None,
                status: TaskStatus | None = None) -> Task:
    if not title:
        raise ValidationError("Title is required", [{"field": "title", "message": "Title is required"}])
    now = datetime.now(UTC)
    task = Task(title=title, description=description, status=status or TaskStatus.pending,
                user_id=claims.id, created_at=now, updated_at=now)
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.info("User %s created task %s", claims.id, task.id)
    return task


def _validate_update_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    unknown = set(fields) - set(UPDATABLE_FIELDS)
    if unknown:
        raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}")
    if not fields:
        raise ValidationError("No fields to update")
    errors = []
    if "title" in fields and not fields["title"]:
        errors.append({"field": "title", "message": "Title cannot be empty"})
    if "status" in fields:
        try:
            fields["status"] = TaskStatus(fields["status"])
        except ValueError:
            errors.append({"field": "status", "message": "Invalid status"})
    if errors:
        raise ValidationError("Validation failed", errors)
    return fields


def update_task(db: Session, claims: Claims, task_id: int, fields: Dict[str, Any]) -> Task:
    task = _load_task(db, task_id)
    ensure_authorized(claims, Action.update, task)
    fields = _validate_update_fields(dict(fields))

    for key, value in fields.items():
        setattr(task, key, value)
    task.updated_at = datetime.now(UTC)
    db.add(task)
    try:
        db.commit()
    except StaleDataError:
        # Deleted by another request between the lookup and the UPDATE
        db.rollback()
        raise _task_not_found()
    db.refresh(task)
    logger.info("User %s updated task %s (%s)", claims.id, task.id, ", ".join(sorted(fields)))
    return task


def delete_task(db: Session, claims: Claims, task_id: int) -> None:
    task = _load_task(db, task_id)
    ensure_authorized(claims, Action.delete, task)
    # Bulk DELETE so a row removed by another request shows up as rowcount 0
    result = db.connection().execute(delete(Task).where(Task.id == task.id))
    if result.rowcount == 0:
        db.rollback()
        raise _task_not_found()
    db.expunge(task)
    db.commit()
    logger.info("User %s deleted task %s", claims.id, task_id)
