"""
Feature: Change task status
  As a team member
  I want to move a task through the workflow
  So that the board shows where work stands

Scenario Outline: Move a task to any status
  Given a seeded task
  When they PATCH /tasks/{task_id}/status with <status>
  Then the task id is in exactly one column, the <status> column
  And it is at the top of that column
  And a status activity is prepended to the task activity

Scenario: Move a task to its current status
  Then it still appears exactly once

Scenario: Move a missing task
  Then the system returns 404 Not Found error
"""

import pytest
from fastapi import HTTPException
from pydantic import ValidationError
from sqlmodel import Session
from database import Store
from models.boards import TaskStatus
from apis.tasks import update_task_status
from apis.schemas.tasks import UpdateTaskStatusRequest


@pytest.fixture(name="session")
def session_fixture():
    store = Store()
    with Session(store.engine) as session:
        yield session


def _holders(board, task_id):
    return [column.id for column in board.columns if task_id in column.task_ids]


@pytest.mark.asyncio
@pytest.mark.parametrize("task_id", ["t1", "t2", "t3", "t4", "t5"])
@pytest.mark.parametrize("new_status", list(TaskStatus))
async def test_update_task_status_moves_task(session, task_id, new_status):
    result = await update_task_status(
        task_id=task_id,
        status_data=UpdateTaskStatusRequest(status=new_status),
        db_session=session
    )

    assert result.task.status == new_status
    assert _holders(result.board, task_id) == [new_status.value]

    target = next(column for column in result.board.columns if column.id == new_status.value)
    assert target.task_ids[0] == task_id

    assert result.task.activity[0].kind.value == "status"


@pytest.mark.asyncio
async def test_update_task_status_to_done(session):
    result = await update_task_status(
        task_id="t1",
        status_data=UpdateTaskStatusRequest(status="done"),
        db_session=session
    )

    columns = {column.id: column.task_ids for column in result.board.columns}
    assert columns["done"] == ["t1"]
    assert columns["review"] == ["t5"]
    assert result.task.activity[0].message == "Marked Realtime presence as done"


@pytest.mark.asyncio
async def test_update_task_status_same_status(session):
    result = await update_task_status(
        task_id="t4",
        status_data=UpdateTaskStatusRequest(status="in-progress"),
        db_session=session
    )

    columns = {column.id: column.task_ids for column in result.board.columns}
    assert columns["in-progress"] == ["t4", "t2"]


@pytest.mark.asyncio
async def test_update_task_status_not_found(session):
    with pytest.raises(HTTPException) as exc_info:
        await update_task_status(
            task_id="task_nonexistent",
            status_data=UpdateTaskStatusRequest(status="review"),
            db_session=session
        )

    assert exc_info.value.status_code == 404


def test_update_task_status_rejects_unknown_status():
    with pytest.raises(ValidationError):
        UpdateTaskStatusRequest(status="archived")
