"""
Shared lookups and board bookkeeping used by the API routers.

Nothing in here commits; callers commit once per request after every
change has been staged.
"""

from fastapi import HTTPException, status
from sqlalchemy import literal_column
from sqlmodel import Session, select
from typing import List, Optional
from settings import logger
from models.user import User
from models.projects import Project
from models.boards import Board, BoardColumn, Task, Comment, TaskStatus
from models.activity import Activity, ActivityKind
from apis.schemas.boards import BoardResponse, ColumnResponse
from apis.schemas.tasks import TaskResponse, CommentResponse, ActivityResponse


def newest_first(model):
    """Order by creation time, insertion order breaking ties."""
    return model.created_at.desc(), literal_column("rowid").desc()


def _not_found(entity: str, entity_id: str) -> HTTPException:
    logger.warning(f"{entity} not found", extra={"entity_id": entity_id})
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{entity} not found"
    )


def get_task_or_404(db_session: Session, task_id: str) -> Task:
    task = db_session.exec(select(Task).where(Task.id == task_id)).first()
    if not task:
        raise _not_found("Task", task_id)
    return task


def get_user_or_404(db_session: Session, user_id: str) -> User:
    user = db_session.exec(select(User).where(User.id == user_id)).first()
    if not user:
        raise _not_found("User", user_id)
    return user


def get_board_or_404(db_session: Session) -> Board:
    """The single board of the service."""
    board = db_session.exec(select(Board)).first()
    if not board:
        raise _not_found("Board", "")
    return board


def get_current_project(db_session: Session) -> Optional[Project]:
    """Most recently created project; older ones are history."""
    statement = select(Project).order_by(*newest_first(Project))
    return db_session.exec(statement).first()


def get_columns(db_session: Session, board: Board) -> List[BoardColumn]:
    statement = (
        select(BoardColumn)
        .where(BoardColumn.board_id == board.id)
        .order_by(BoardColumn.position)
    )
    return list(db_session.exec(statement).all())


def remove_task_from_columns(db_session: Session, board: Board, task_id: str) -> None:
    for column in get_columns(db_session, board):
        if task_id in column.task_ids:
            # JSON columns only notice reassignment, not in-place edits
            column.task_ids = [tid for tid in column.task_ids if tid != task_id]
            db_session.add(column)


def place_task(db_session: Session, board: Board, task: Task, task_status: TaskStatus) -> None:
    """Set the task status and move its id to the top of the matching column.

    The id is removed from every column first, so it ends up in exactly one.
    """
    task.status = task_status
    db_session.add(task)

    remove_task_from_columns(db_session, board, task.id)

    target = next(
        (column for column in get_columns(db_session, board) if column.id == task_status.value),
        None
    )
    if target is None:
        raise _not_found("Column", task_status.value)

    target.task_ids = [task.id] + target.task_ids
    db_session.add(target)


def record_activity(
    db_session: Session,
    message: str,
    kind: ActivityKind,
    task_id: Optional[str] = None
) -> Activity:
    """Stage a feed entry; task_id=None puts it on the global feed."""
    activity = Activity(message=message, kind=kind, task_id=task_id)
    db_session.add(activity)
    return activity


def list_global_activity(db_session: Session) -> List[Activity]:
    statement = (
        select(Activity)
        .where(Activity.task_id == None)  # noqa: E711
        .order_by(*newest_first(Activity))
    )
    return list(db_session.exec(statement).all())


def build_board_response(db_session: Session, board: Board) -> BoardResponse:
    return BoardResponse(
        id=board.id,
        project_id=board.project_id,
        columns=[ColumnResponse.model_validate(column) for column in get_columns(db_session, board)]
    )


def build_task_response(db_session: Session, task: Task) -> TaskResponse:
    comments = db_session.exec(
        select(Comment).where(Comment.task_id == task.id).order_by(*newest_first(Comment))
    ).all()
    activity = db_session.exec(
        select(Activity).where(Activity.task_id == task.id).order_by(*newest_first(Activity))
    ).all()

    return TaskResponse(
        id=task.id,
        title=task.title,
        description=task.description,
        labels=task.labels,
        status=task.status,
        priority=task.priority,
        due=task.due,
        assignees=task.assignees,
        comments=[CommentResponse.model_validate(comment) for comment in comments],
        activity=[ActivityResponse.model_validate(entry) for entry in activity]
    )
