"""Task store. Every lookup is scoped to the owning user."""
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from ..exceptions import NotFoundError
from ..models import Task
from ..schemas.task import TaskCreate, TaskUpdate

# Public (camelCase) field name -> column
SORTABLE_FIELDS = {
    "createdAt": Task.created_at,
    "updatedAt": Task.updated_at,
    "description": Task.description,
    "completed": Task.completed,
}


# Largest value a database INTEGER bind accepts
MAX_QUERY_INT = 2**63 - 1


@dataclass
class TaskQuery:
    completed: Optional[bool] = None
    limit: Optional[int] = None
    skip: Optional[int] = None
    sort_field: Optional[str] = None
    descending: bool = False


def _parse_positive_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        number = int(value.strip())
    except ValueError:
        return None
    if number <= 0 or number > MAX_QUERY_INT:
        return None
    return number


def parse_task_query(
    completed: Optional[str] = None,
    limit: Optional[str] = None,
    skip: Optional[str] = None,
    sort_by: Optional[str] = None,
) -> TaskQuery:
    """Build a TaskQuery from raw query-string values.

    Nothing here raises: unparseable ``limit``/``skip`` and unknown sort
    fields are dropped.
    """
    query = TaskQuery()
    if completed:
        query.completed = completed == "true"
    query.limit = _parse_positive_int(limit)
    query.skip = _parse_positive_int(skip)
    if sort_by:
        field, _, direction = sort_by.partition(":")
        if field in SORTABLE_FIELDS:
            query.sort_field = field
            query.descending = direction == "desc"
    return query


def list_tasks(db: Session, owner_id: str, query: TaskQuery) -> List[Task]:
    q = db.query(Task).filter(Task.owner_id == owner_id)
    if query.completed is not None:
        q = q.filter(Task.completed.is_(query.completed))
    if query.sort_field:
        column = SORTABLE_FIELDS[query.sort_field]
        q = q.order_by(column.desc() if query.descending else column.asc())
    # Insertion order, also the tie-breaker for the requested sort
    q = q.order_by(Task.created_at, Task.id)
    if query.skip:
        q = q.offset(query.skip)
    if query.limit:
        q = q.limit(query.limit)
    return q.all()


def create_task(db: Session, owner_id: str, data: TaskCreate) -> Task:
    task = Task(description=data.description, completed=data.completed, owner_id=owner_id)
    db.add(task)
    db.commit()
    db.refresh(task)
    return task


def get_task(db: Session, owner_id: str, task_id: str) -> Task:
    task = db.query(Task).filter(Task.id == task_id, Task.owner_id == owner_id).first()
    if not task:
        raise NotFoundError("Task not found")
    return task


def update_task(db: Session, owner_id: str, task_id: str, changes: TaskUpdate) -> Task:
    task = get_task(db, owner_id, task_id)
    for field, value in changes.model_dump(exclude_unset=True).items():
        setattr(task, field, value)
    task.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(task)
    return task


def delete_task(db: Session, owner_id: str, task_id: str) -> Task:
    task = get_task(db, owner_id, task_id)
    db.delete(task)
    db.commit()
    return task