from pydantic import BeforeValidator, Field
from typing import Annotated, List, Optional
from models.activity import ActivityKind
from models.boards import TaskStatus, TaskPriority
from .base import ApiModel, UtcDatetime


def _list_or_empty(value):
    """Anything but a list counts as no labels."""
    return value if isinstance(value, list) else []


Labels = Annotated[List[str], BeforeValidator(_list_or_empty)]


class CreateTaskRequest(ApiModel):
    """Schema for creating a new task."""
    title: str = Field(..., min_length=1, description="Task title")
    description: Optional[str] = Field(default=None, description="Task description")
    labels: Labels = Field(default_factory=list, description="Free-form labels; non-list values are ignored")
    priority: Optional[TaskPriority] = Field(default=None, description="Task priority (defaults to medium)")
    due: Optional[UtcDatetime] = Field(default=None, description="Due date (defaults to 72 hours from now)")


class AssignTaskRequest(ApiModel):
    """Schema for assigning a user to a task."""
    assignee_id: str = Field(..., min_length=1, description="User ID to assign")


class UpdateTaskStatusRequest(ApiModel):
    """Schema for moving a task to another workflow stage."""
    status: TaskStatus = Field(..., description="New status")


class CreateCommentRequest(ApiModel):
    """Schema for commenting on a task."""
    task_id: str = Field(..., min_length=1, description="Task being commented on")
    author_id: str = Field(..., min_length=1, description="User writing the comment")
    message: str = Field(..., min_length=1, description="Comment text")


# Response Schemas
class CommentResponse(ApiModel):
    """Schema for comment responses."""
    id: str = Field(..., description="Comment ID")
    author_id: str = Field(..., description="Author user ID")
    message: str = Field(..., description="Comment text")
    created_at: UtcDatetime = Field(..., description="Creation timestamp")


class ActivityResponse(ApiModel):
    """Schema for activity feed entries."""
    id: str = Field(..., description="Activity ID")
    message: str = Field(..., description="Human readable event")
    created_at: UtcDatetime = Field(..., description="When the event happened")
    kind: ActivityKind = Field(..., description="Event category")


class TaskResponse(ApiModel):
    """Schema for task responses including comments and task activity."""
    id: str = Field(..., description="Task ID")
    title: str = Field(..., description="Task title")
    description: str = Field(..., description="Task description")
    labels: List[str] = Field(default_factory=list, description="Labels")
    status: TaskStatus = Field(..., description="Workflow stage")
    priority: TaskPriority = Field(..., description="Task priority")
    due: UtcDatetime = Field(..., description="Due date")
    assignees: List[str] = Field(default_factory=list, description="Assigned user IDs in assignment order")
    comments: List[CommentResponse] = Field(default_factory=list, description="Comments, newest first")
    activity: List[ActivityResponse] = Field(default_factory=list, description="Task activity, newest first")


class TaskEnvelope(ApiModel):
    task: TaskResponse


class CommentEnvelope(ApiModel):
    comment: CommentResponse
