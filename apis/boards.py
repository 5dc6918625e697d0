from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session, select
from database import get_session
from models.user import User, WorkloadDay
from models.boards import Task
from helpers.boards import (
    get_board_or_404, get_current_project, list_global_activity,
    build_board_response, build_task_response, newest_first
)
from .schemas.boards import BoardSnapshotResponse, UserResponse, WorkloadDayResponse
from .schemas.projects import ProjectResponse
from .schemas.tasks import ActivityResponse
from typing import Dict, List
from .schemas.base import ERROR_RESPONSES

router = APIRouter(prefix="/board", tags=["board"], responses=ERROR_RESPONSES)


@router.get("")
async def get_board(
    db_session: Session = Depends(get_session)
) -> BoardSnapshotResponse:
    """Get the board with every task, the current project, users, workload and activity."""

    board = get_board_or_404(db_session)

    project = get_current_project(db_session)
    if not project:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found"
        )

    tasks = db_session.exec(select(Task).order_by(*newest_first(Task))).all()
    users = db_session.exec(select(User)).all()

    # Group booked hours per user, keeping day order
    workload: Dict[str, List[WorkloadDayResponse]] = {user.id: [] for user in users}
    workload_statement = select(WorkloadDay).order_by(WorkloadDay.user_id, WorkloadDay.position)
    for entry in db_session.exec(workload_statement).all():
        workload.setdefault(entry.user_id, []).append(WorkloadDayResponse.model_validate(entry))

    return BoardSnapshotResponse(
        board=build_board_response(db_session, board),
        tasks=[build_task_response(db_session, task) for task in tasks],
        project=ProjectResponse.model_validate(project),
        users=[UserResponse.model_validate(user) for user in users],
        workload=workload,
        activity=[ActivityResponse.model_validate(entry) for entry in list_global_activity(db_session)]
    )
