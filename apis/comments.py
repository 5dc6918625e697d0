from fastapi import APIRouter, Depends
from sqlmodel import Session
from database import get_session
from settings import logger
from models.boards import Comment
from models.activity import ActivityKind
from helpers.boards import get_task_or_404, get_user_or_404, record_activity
from .schemas.tasks import CreateCommentRequest, CommentResponse, CommentEnvelope
from .schemas.base import ERROR_RESPONSES

router = APIRouter(prefix="/comments", tags=["comments"], responses=ERROR_RESPONSES)


@router.post("")
async def create_comment(
    comment_data: CreateCommentRequest,
    db_session: Session = Depends(get_session)
) -> CommentEnvelope:
    """Add a comment to a task."""
    task = get_task_or_404(db_session, comment_data.task_id)
    author = get_user_or_404(db_session, comment_data.author_id)

    comment = Comment(
        task_id=task.id,
        author_id=author.id,
        message=comment_data.message
    )
    db_session.add(comment)

    record_activity(
        db_session,
        f"{author.name} commented: {comment.message}",
        ActivityKind.COMMENT,
        task_id=task.id
    )

    db_session.commit()
    db_session.refresh(comment)

    logger.info("Comment added", extra={"task_id": task.id, "comment_id": comment.id})

    return CommentEnvelope(comment=CommentResponse.model_validate(comment))
