from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from task_manager.models import Task, TaskStatus


class TaskCreateRequest(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.pending


class TaskUpdateRequest(BaseModel):
    """Partial update; only fields present in the body are applied."""
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None


class TaskResponse(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    status: TaskStatus
    user_id: int
    username: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @staticmethod
    def from_task(task: Task, username: Optional[str] = None) -> 'TaskResponse':
        return TaskResponse.model_validate({**task.model_dump(), "username": username})


class TaskEnvelope(BaseModel):
    message: str
    task: TaskResponse


class MessageResponse(BaseModel):
    message: str
