from sqlmodel import SQLModel, Field, Column
from sqlalchemy import JSON
from enum import Enum
from typing import List
from datetime import datetime
from .helper import id_generator, utcnow


class ProjectStatus(str, Enum):
    """Delivery health of a project."""
    ON_TRACK = "on-track"
    AT_RISK = "at-risk"
    BLOCKED = "blocked"


class Project(SQLModel, table=True):
    """Project; the most recently created one is the current project."""
    id: str = Field(default_factory=id_generator('project', 10), primary_key=True)
    name: str
    description: str = Field(default="")
    due: datetime
    status: ProjectStatus = Field(default=ProjectStatus.ON_TRACK)
    team: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    created_at: datetime = Field(default_factory=utcnow, index=True)
