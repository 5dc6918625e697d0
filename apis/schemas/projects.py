from pydantic import Field
from typing import List, Optional
from models.projects import ProjectStatus
from .base import ApiModel, UtcDatetime


class CreateProjectRequest(ApiModel):
    """Schema for starting a new project."""
    name: str = Field(..., min_length=1, description="Project name")
    description: Optional[str] = Field(default=None, description="Project description")
    due: Optional[UtcDatetime] = Field(default=None, description="Due date (defaults to 14 days from now)")


class ProjectResponse(ApiModel):
    """Schema for project responses."""
    id: str = Field(..., description="Project ID")
    name: str = Field(..., description="Project name")
    description: str = Field(..., description="Project description")
    due: UtcDatetime = Field(..., description="Due date")
    status: ProjectStatus = Field(..., description="Delivery health")
    team: List[str] = Field(..., description="Team member user IDs")


class ProjectEnvelope(ApiModel):
    project: ProjectResponse
