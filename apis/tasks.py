from fastapi import APIRouter, Depends
from sqlmodel import Session, select
from datetime import timedelta
from database import get_session
from settings import logger
from models.helper import utcnow
from models.boards import Task, Comment, TaskStatus, TaskPriority
from models.activity import Activity, ActivityKind
from helpers.boards import (
    get_task_or_404, get_user_or_404, get_board_or_404, place_task,
    remove_task_from_columns, record_activity, build_board_response, build_task_response
)
from .schemas.tasks import CreateTaskRequest, AssignTaskRequest, UpdateTaskStatusRequest, TaskEnvelope
from .schemas.boards import TaskBoardResponse
from .schemas.base import OkResponse, ERROR_RESPONSES

router = APIRouter(prefix="/tasks", tags=["tasks"], responses=ERROR_RESPONSES)

DEFAULT_TASK_DURATION = timedelta(hours=72)


@router.post("")
async def create_task(
    task_data: CreateTaskRequest,
    db_session: Session = Depends(get_session)
) -> TaskBoardResponse:
    """Create a task at the top of the backlog."""
    board = get_board_or_404(db_session)

    task = Task(
        title=task_data.title,
        description=task_data.description or "",
        labels=task_data.labels or [],
        priority=task_data.priority or TaskPriority.MEDIUM,
        due=task_data.due or utcnow() + DEFAULT_TASK_DURATION,
        assignees=[]
    )
    place_task(db_session, board, task, TaskStatus.BACKLOG)

    record_activity(db_session, f"Created task {task.title}", ActivityKind.TASK)

    db_session.commit()
    db_session.refresh(task)

    logger.info("Task created", extra={"task_id": task.id, "priority": task.priority.value})

    return TaskBoardResponse(
        task=build_task_response(db_session, task),
        board=build_board_response(db_session, board)
    )


@router.patch("/{task_id}/assign")
async def assign_task(
    task_id: str,
    assign_data: AssignTaskRequest,
    db_session: Session = Depends(get_session)
) -> TaskEnvelope:
    """Assign a user to a task; assigning someone twice changes nothing."""
    task = get_task_or_404(db_session, task_id)
    user = get_user_or_404(db_session, assign_data.assignee_id)

    if user.id in task.assignees:
        logger.debug("User already assigned", extra={"task_id": task.id, "user_id": user.id})
        return TaskEnvelope(task=build_task_response(db_session, task))

    task.assignees = task.assignees + [user.id]
    db_session.add(task)

    record_activity(db_session, f"{user.name} was assigned", ActivityKind.ASSIGN, task_id=task.id)

    db_session.commit()
    db_session.refresh(task)

    logger.info("User assigned to task", extra={"task_id": task.id, "user_id": user.id})

    return TaskEnvelope(task=build_task_response(db_session, task))


@router.patch("/{task_id}/status")
async def update_task_status(
    task_id: str,
    status_data: UpdateTaskStatusRequest,
    db_session: Session = Depends(get_session)
) -> TaskBoardResponse:
    """Move a task to the column of its new status."""
    task = get_task_or_404(db_session, task_id)
    board = get_board_or_404(db_session)

    place_task(db_session, board, task, status_data.status)

    record_activity(
        db_session,
        f"Marked {task.title} as {status_data.status.value}",
        ActivityKind.STATUS,
        task_id=task.id
    )

    db_session.commit()
    db_session.refresh(task)

    logger.info("Task status changed", extra={"task_id": task.id, "status": task.status.value})

    return TaskBoardResponse(
        task=build_task_response(db_session, task),
        board=build_board_response(db_session, board)
    )


@router.delete("/{task_id}")
async def delete_task(
    task_id: str,
    db_session: Session = Depends(get_session)
) -> OkResponse:
    """Delete a task together with its comments and task activity."""
    task = get_task_or_404(db_session, task_id)
    board = get_board_or_404(db_session)

    remove_task_from_columns(db_session, board, task.id)

    # Remove owned rows first, then the task itself
    for comment in db_session.exec(select(Comment).where(Comment.task_id == task.id)).all():
        db_session.delete(comment)

    for activity in db_session.exec(select(Activity).where(Activity.task_id == task.id)).all():
        db_session.delete(activity)

    db_session.delete(task)

    record_activity(db_session, f"Deleted task {task.title}", ActivityKind.TASK)

    db_session.commit()

    logger.info("Task deleted", extra={"task_id": task_id})

    return OkResponse(ok=True)
