from datetime import datetime, UTC
from enum import Enum
from typing import Optional

from sqlalchemy import Column, Enum as SAEnum
from sqlmodel import SQLModel, Field


class TaskStatus(str, Enum):
    pending = "pending"
    in_progress = "in-progress"
    completed = "completed"


class Task(SQLModel, table=True):
    __tablename__ = "tasks"
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: str | None = None
    # Persist the wire values ("in-progress"), not the member names
    status: TaskStatus = Field(
        default=TaskStatus.pending,
        sa_column=Column(
            SAEnum(TaskStatus, name="task_status", values_callable=lambda e: [m.value for m in e]),
            nullable=False,
            default=TaskStatus.pending,
        ),
    )
    user_id: int = Field(foreign_key="users.id", index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC), index=True)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
