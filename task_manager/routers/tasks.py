from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session

from ..auth import get_current_user
from ..database import get_db
from ..models import User
from ..schemas.task import ALLOWED_TASK_UPDATES, Task as TaskSchema, TaskCreate, TaskUpdate
from ..schemas.updates import parse_partial_update
from ..services import tasks as task_store

router = APIRouter()


@router.post("/tasks", response_model=TaskSchema, status_code=status.HTTP_201_CREATED)
def create_task(
    task: TaskCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create a new task owned by the caller."""
    return TaskSchema.model_validate(task_store.create_task(db, current_user.id, task))


@router.get("/tasks", response_model=List[TaskSchema])
def get_tasks(
    completed: Optional[str] = None,
    limit: Optional[str] = None,
    skip: Optional[str] = None,
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """List the caller's tasks.

    GET /tasks?completed=true
    GET /tasks?limit=10&skip=20
    GET /tasks?sortBy=createdAt:desc
    """
    query = task_store.parse_task_query(completed=completed, limit=limit, skip=skip, sort_by=sort_by)
    return [TaskSchema.model_validate(t) for t in task_store.list_tasks(db, current_user.id, query)]


@router.get("/tasks/{task_id}", response_model=TaskSchema)
def get_task(
    task_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return TaskSchema.model_validate(task_store.get_task(db, current_user.id, task_id))


@router.patch("/tasks/{task_id}", response_model=TaskSchema)
def update_task(
    task_id: str,
    updates: dict = Body(...),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    changes = parse_partial_update(updates, ALLOWED_TASK_UPDATES, TaskUpdate)
    return TaskSchema.model_validate(task_store.update_task(db, current_user.id, task_id, changes))


@router.delete("/tasks/{task_id}", response_model=TaskSchema)
def delete_task(
    task_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return TaskSchema.model_validate(task_store.delete_task(db, current_user.id, task_id))
