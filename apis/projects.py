from fastapi import APIRouter, Depends
from sqlmodel import Session, select
from datetime import timedelta
from database import get_session
from settings import logger
from models.helper import utcnow
from models.user import User
from models.projects import Project, ProjectStatus
from models.activity import ActivityKind
from helpers.boards import record_activity
from .schemas.projects import CreateProjectRequest, ProjectResponse, ProjectEnvelope
from .schemas.base import ERROR_RESPONSES

router = APIRouter(prefix="/projects", tags=["projects"], responses=ERROR_RESPONSES)

DEFAULT_PROJECT_DURATION = timedelta(days=14)


@router.post("")
async def create_project(
    project_data: CreateProjectRequest,
    db_session: Session = Depends(get_session)
) -> ProjectEnvelope:
    """Start a new project; it becomes the current one and older projects are kept."""

    # Whole team joins the new project
    user_ids = [user.id for user in db_session.exec(select(User)).all()]

    project = Project(
        name=project_data.name,
        description=project_data.description or "",
        due=project_data.due or utcnow() + DEFAULT_PROJECT_DURATION,
        status=ProjectStatus.ON_TRACK,
        team=user_ids
    )
    db_session.add(project)

    record_activity(db_session, f"Started project {project.name}", ActivityKind.MILESTONE)

    db_session.commit()
    db_session.refresh(project)

    logger.info("Project created", extra={"project_id": project.id, "team_size": len(user_ids)})

    return ProjectEnvelope(project=ProjectResponse.model_validate(project))
