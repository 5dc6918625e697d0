from sqlmodel import SQLModel, Field, Column
from sqlalchemy import JSON
from enum import Enum
from typing import List
from datetime import datetime
from .helper import id_generator, utcnow


class TaskStatus(str, Enum):
    """Workflow stages; each one is also the id of its board column."""
    BACKLOG = "backlog"
    IN_PROGRESS = "in-progress"
    REVIEW = "review"
    DONE = "done"


class TaskPriority(str, Enum):
    """Task urgency."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Board(SQLModel, table=True):
    """Kanban-style board for a project."""
    id: str = Field(default_factory=id_generator('board', 10), primary_key=True)
    project_id: str = Field(index=True)


class BoardColumn(SQLModel, table=True):
    """Workflow stage on a board holding an ordered list of task ids."""
    __tablename__ = "board_column"

    board_id: str = Field(foreign_key="board.id", primary_key=True)
    id: str = Field(primary_key=True)
    title: str
    position: int = Field(default=0)
    task_ids: List[str] = Field(default_factory=list, sa_column=Column(JSON))


class Task(SQLModel, table=True):
    """Work unit placed on exactly one board column."""
    id: str = Field(default_factory=id_generator('task', 10), primary_key=True)
    title: str
    description: str = Field(default="")
    labels: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    status: TaskStatus = Field(default=TaskStatus.BACKLOG, index=True)
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM)
    due: datetime
    assignees: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    created_at: datetime = Field(default_factory=utcnow, index=True)


class Comment(SQLModel, table=True):
    """Immutable comment owned by a single task."""
    id: str = Field(default_factory=id_generator('comment', 10), primary_key=True)
    task_id: str = Field(foreign_key="task.id", index=True)
    author_id: str
    message: str
    created_at: datetime = Field(default_factory=utcnow, index=True)
