"""
Feature: Delete task
  As a team member
  I want to delete a task
  So that abandoned work leaves the board

Scenario: Successfully delete task
  Given a task exists with comments and task activity
  When they request DELETE /tasks/{task_id}
  Then the task is removed from the task list and from every column
  And its comments and task activity are removed with it
  And a task activity is recorded on the global feed

Scenario: Use a deleted task
  Given a task was deleted
  When they change its status or assign someone to it
  Then the system returns 404 Not Found error

Scenario: Delete non-existent task
  When they try to delete a non-existent task
  Then the system returns 404 Not Found error
"""

import pytest
from fastapi import HTTPException
from sqlmodel import Session, select
from database import Store
from models.boards import Task, Comment
from models.activity import Activity
from apis.boards import get_board
from apis.tasks import delete_task, update_task_status, assign_task
from apis.schemas.tasks import UpdateTaskStatusRequest, AssignTaskRequest


@pytest.fixture(name="session")
def session_fixture():
    store = Store()
    with Session(store.engine) as session:
        yield session


@pytest.mark.asyncio
async def test_delete_task(session):
    # When they delete t1
    result = await delete_task(task_id="t1", db_session=session)

    # Then the system confirms
    assert result.ok is True

    # And the task is gone from the list and every column
    snapshot = await get_board(db_session=session)
    assert "t1" not in [task.id for task in snapshot.tasks]
    for column in snapshot.board.columns:
        assert "t1" not in column.task_ids

    # And its owned rows are gone
    assert session.exec(select(Task).where(Task.id == "t1")).first() is None
    assert session.exec(select(Comment).where(Comment.task_id == "t1")).all() == []
    assert session.exec(select(Activity).where(Activity.task_id == "t1")).all() == []

    # And the global feed records the deletion
    assert snapshot.activity[0].message == "Deleted task Realtime presence"
    assert snapshot.activity[0].kind.value == "task"


@pytest.mark.asyncio
async def test_deleted_task_is_not_found(session):
    await delete_task(task_id="t3", db_session=session)

    with pytest.raises(HTTPException) as exc_info:
        await update_task_status(
            task_id="t3",
            status_data=UpdateTaskStatusRequest(status="done"),
            db_session=session
        )
    assert exc_info.value.status_code == 404

    with pytest.raises(HTTPException) as exc_info:
        await assign_task(
            task_id="t3",
            assign_data=AssignTaskRequest(assignee_id="u1"),
            db_session=session
        )
    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_delete_task_not_found(session):
    with pytest.raises(HTTPException) as exc_info:
        await delete_task(task_id="task_nonexistent", db_session=session)

    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == "Task not found"
