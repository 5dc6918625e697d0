from sqlmodel import SQLModel, Field
from enum import Enum
from typing import Optional
from datetime import datetime
from .helper import id_generator, utcnow


class ActivityKind(str, Enum):
    """Category of an activity entry."""
    TASK = "task"
    COMMENT = "comment"
    ASSIGN = "assign"
    STATUS = "status"
    MILESTONE = "milestone"


class Activity(SQLModel, table=True):
    """Append-only feed entry; global when task_id is None, per-task otherwise."""
    id: str = Field(default_factory=id_generator('activity', 10), primary_key=True)
    task_id: Optional[str] = Field(default=None, foreign_key="task.id", index=True)
    message: str
    kind: ActivityKind
    created_at: datetime = Field(default_factory=utcnow, index=True)
