from pydantic import Field
from typing import Dict, List
from .base import ApiModel
from .projects import ProjectResponse
from .tasks import TaskResponse, ActivityResponse


class ColumnResponse(ApiModel):
    """Schema for a board column."""
    id: str = Field(..., description="Column ID, equal to the status it holds")
    title: str = Field(..., description="Column title")
    task_ids: List[str] = Field(..., description="Task IDs, top of the column first")


class BoardResponse(ApiModel):
    """Schema for board responses."""
    id: str = Field(..., description="Board ID")
    project_id: str = Field(..., description="Owning project ID")
    columns: List[ColumnResponse] = Field(..., description="Columns in display order")


class UserResponse(ApiModel):
    """Schema for team members."""
    id: str = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    role: str = Field(..., description="Role in the team")
    avatar: str = Field(..., description="Avatar image URL")
    capacity: int = Field(..., description="Weekly capacity in hours")


class WorkloadDayResponse(ApiModel):
    """Schema for hours booked on one day."""
    day: str = Field(..., description="Day label")
    load: int = Field(..., description="Booked hours")


class BoardSnapshotResponse(ApiModel):
    """Everything the board page renders, in one payload."""
    board: BoardResponse
    tasks: List[TaskResponse] = Field(..., description="All tasks, newest first")
    project: ProjectResponse = Field(..., description="Current project")
    users: List[UserResponse]
    workload: Dict[str, List[WorkloadDayResponse]] = Field(..., description="Booked hours per user ID")
    activity: List[ActivityResponse] = Field(..., description="Global feed, newest first")


class TaskBoardResponse(ApiModel):
    """Schema for mutations that can move a task between columns."""
    task: TaskResponse
    board: BoardResponse
