"""Ownership/role checks for task resources.

Admins may act on any task; everyone else only on tasks they own. Listing
is not gated here, ``task_service.list_tasks`` filters by owner instead.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from task_manager.errors import AccessDenied
from task_manager.models import Task, UserRole
from task_manager.schemas.token import Claims

logger = logging.getLogger(__name__)


class Action(str, Enum):
    read = "read"
    update = "update"
    delete = "delete"


@dataclass(frozen=True)
class Decision:
    allowed: bool
    reason: Optional[str] = None


ALLOW = Decision(allowed=True)


def authorize(claims: Claims, action: Action, task: Task) -> Decision:
    if claims.role == UserRole.admin:
        return ALLOW
    if task.user_id == claims.id:
        return ALLOW
    return Decision(allowed=False, reason="Access denied")


def ensure_authorized(claims: Claims, action: Action, task: Task) -> None:
    decision = authorize(claims, action, task)
    if not decision.allowed:
        logger.warning("User %s denied %s on task %s", claims.id, action.value, task.id)
        raise AccessDenied(decision.reason)
