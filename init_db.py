#!/usr/bin/env python3
"""
Demo data for Nebula Boards.

Loaded into every new Store. Run directly to print what gets seeded:
    python init_db.py
"""

from datetime import timedelta
from sqlmodel import Session
from settings import logger
from models.helper import utcnow
from models.user import User, WorkloadDay
from models.projects import Project, ProjectStatus
from models.boards import Board, BoardColumn, Task, Comment, TaskStatus, TaskPriority
from models.activity import Activity, ActivityKind

AVATAR_URL = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w=200&q=60"

COLUMN_TITLES = {
    TaskStatus.BACKLOG: "Backlog",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.REVIEW: "Review",
    TaskStatus.DONE: "Done",
}

WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri"]


def _users():
    return [
        User(id="u1", name="Amara Patel", role="Product Lead",
             avatar=AVATAR_URL.format("1544723795-3fb6469f5b39"), capacity=32),
        User(id="u2", name="Leo Müller", role="Engineering",
             avatar=AVATAR_URL.format("1527980965255-d3b416303d12"), capacity=28),
        User(id="u3", name="Mina Solis", role="Design",
             avatar=AVATAR_URL.format("1524504388940-b1c1722653e1"), capacity=30),
        User(id="u4", name="Noah Idris", role="QA",
             avatar=AVATAR_URL.format("1463453091185-61582044d556"), capacity=24),
    ]


def _workload():
    hours = {
        "u1": [6, 5, 7, 6, 4],
        "u2": [7, 6, 5, 6, 5],
        "u3": [4, 5, 6, 4, 3],
        "u4": [3, 4, 4, 5, 6],
    }
    return [
        WorkloadDay(user_id=user_id, position=position, day=WEEKDAYS[position], load=load)
        for user_id, loads in hours.items()
        for position, load in enumerate(loads)
    ]


def _tasks(now):
    # (id, title, description, labels, status, priority, due in hours, assignees)
    rows = [
        ("t1", "Realtime presence", "Show active cursors + typing indicators on cards.",
         ["realtime", "platform"], TaskStatus.REVIEW, TaskPriority.HIGH, 48, ["u2", "u3"]),
        ("t2", "AI task assistant", "Summaries + next steps for each card.",
         ["ai", "ux"], TaskStatus.IN_PROGRESS, TaskPriority.HIGH, 72, ["u1"]),
        ("t3", "Notification inbox", "Threaded updates, filters, quiet hours.",
         ["communications"], TaskStatus.BACKLOG, TaskPriority.MEDIUM, 96, ["u4"]),
        ("t4", "Access model", "Role-based sharing for guests vs members.",
         ["security"], TaskStatus.IN_PROGRESS, TaskPriority.MEDIUM, 120, ["u2", "u1"]),
        ("t5", "Timeline + workload", "Visual capacity map with conflicts detection.",
         ["planning"], TaskStatus.REVIEW, TaskPriority.HIGH, 36, ["u3"]),
    ]
    return [
        Task(
            id=task_id,
            title=title,
            description=description,
            labels=labels,
            status=status,
            priority=priority,
            due=now + timedelta(hours=due_hours),
            assignees=assignees,
            # t1 is the newest so the task list keeps the seed order
            created_at=now - timedelta(minutes=index + 1),
        )
        for index, (task_id, title, description, labels, status, priority, due_hours, assignees)
        in enumerate(rows)
    ]


def _columns(board_id, tasks):
    columns = []
    for position, (status, title) in enumerate(COLUMN_TITLES.items()):
        columns.append(BoardColumn(
            board_id=board_id,
            id=status.value,
            title=title,
            position=position,
            task_ids=[task.id for task in tasks if task.status == status],
        ))
    return columns


def _comments(now):
    return [
        Comment(id="c1", task_id="t1", author_id="u1",
                message="Can we keep the dark mode toggle prominent on mobile?",
                created_at=now - timedelta(hours=18)),
        Comment(id="c2", task_id="t1", author_id="u3",
                message="Updated the handoff links; see Figma v7.2.",
                created_at=now - timedelta(hours=6)),
    ]


def _activity(now):
    # (id, message, kind, minutes ago)
    rows = [
        ("a1", "Leo moved \"Realtime presence\" to Review", ActivityKind.STATUS, 35),
        ("a2", "Mina uploaded new board cover illustrations", ActivityKind.TASK, 55),
        ("a3", "Amara added a milestone for the showcase demo", ActivityKind.MILESTONE, 120),
        ("a4", "Noah commented on QA scenarios", ActivityKind.COMMENT, 180),
    ]
    global_feed = [
        Activity(id=activity_id, message=message, kind=kind, created_at=now - timedelta(minutes=minutes))
        for activity_id, message, kind, minutes in rows
    ]
    # t1 carries the same entries in its own feed
    realtime_feed = [
        Activity(id=f"t1-{activity_id}", task_id="t1", message=message, kind=kind,
                 created_at=now - timedelta(minutes=minutes))
        for activity_id, message, kind, minutes in rows
    ]
    return global_feed + realtime_feed


def seed_database(session: Session) -> None:
    """Populate an empty store with the demo team, project and board."""
    now = utcnow()

    users = _users()
    project = Project(
        id="p1",
        name="Nebula Boards",
        description="A collaborative, AI-assisted project OS for product teams.",
        due=now + timedelta(days=14),
        status=ProjectStatus.ON_TRACK,
        team=[user.id for user in users],
        created_at=now - timedelta(days=30),
    )
    board = Board(id="b1", project_id=project.id)
    tasks = _tasks(now)

    session.add_all(users)
    session.add_all(_workload())
    session.add(project)
    session.add(board)
    session.add_all(tasks)
    session.add_all(_columns(board.id, tasks))
    session.add_all(_comments(now))
    session.add_all(_activity(now))
    session.commit()

    logger.info("Seed data loaded", extra={
        "users": len(users),
        "tasks": len(tasks),
        "project_id": project.id,
        "board_id": board.id,
    })


if __name__ == "__main__":
    from database import Store

    Store(seed=True)
