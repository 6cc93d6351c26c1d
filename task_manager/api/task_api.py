from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from task_manager.auth.auth_handler import get_current_user
from task_manager.configs.database import get_db
from task_manager.errors import NotFound
from task_manager.schemas.task_schema import (
    MessageResponse, TaskCreateRequest, TaskEnvelope, TaskResponse, TaskUpdateRequest,
)
from task_manager.schemas.token import Claims
from task_manager.services import task_service

router = APIRouter(prefix="/tasks", tags=["Tasks"])


def task_path_id(task_id: str) -> int:
    """Path id as an int; an id that cannot name a task is simply not found."""
    try:
        return int(task_id)
    except ValueError:
        raise NotFound("Task not found")


@router.get("", response_model=List[TaskResponse])
def list_tasks(claims: Claims = Depends(get_current_user), db: Session = Depends(get_db)):
    return [TaskResponse.from_task(task, username) for task, username in task_service.list_tasks(db, claims)]

@router.get("/{task_id}", response_model=TaskResponse)
def get_task(claims: Claims = Depends(get_current_user), task_id: int = Depends(task_path_id),
             db: Session = Depends(get_db)):
    task, username = task_service.get_task(db, claims, task_id)
    return TaskResponse.from_task(task, username)

@router.post("", response_model=TaskEnvelope, status_code=status.HTTP_201_CREATED)
def create_task(body: TaskCreateRequest, claims: Claims = Depends(get_current_user), db: Session = Depends(get_db)):
    task = task_service.create_task(db, claims, body.title, body.description, body.status)
    return {"message": "Task created successfully", "task": TaskResponse.from_task(task, claims.username)}

@router.put("/{task_id}", response_model=TaskEnvelope)
def update_task(body: TaskUpdateRequest, claims: Claims = Depends(get_current_user),
                task_id: int = Depends(task_path_id), db: Session = Depends(get_db)):
    task = task_service.update_task(db, claims, task_id, body.model_dump(exclude_unset=True))
    return {"message": "Task updated successfully", "task": TaskResponse.from_task(task)}

@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(claims: Claims = Depends(get_current_user), task_id: int = Depends(task_path_id),
                db: Session = Depends(get_db)):
    task_service.delete_task(db, claims, task_id)
    return {"message": "Task deleted successfully"}
