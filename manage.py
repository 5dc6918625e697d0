#!/usr/bin/env python3
"""
Management commands for Nebula Boards API.

Usage:
    python manage.py runserver [host] [port]
    python manage.py check_seed
"""

import sys
import uvicorn
from sqlmodel import select
from settings import logger, HOST, PORT
from database import Store
from models.boards import BoardColumn, Task


def runserver(host: str = HOST, port: int = PORT):
    """Serve the API with uvicorn. State lives only as long as the process."""
    logger.info("Starting API", extra={"host": host, "port": port})
    uvicorn.run("main:app", host=host, port=port)


def check_seed():
    """Build a seeded store and verify every task sits in the column of its status."""
    store = Store()
    with next(store.session()) as session:
        tasks = session.exec(select(Task)).all()
        columns = session.exec(select(BoardColumn)).all()

        misplaced = [
            task.id for task in tasks
            if [column.id for column in columns if task.id in column.task_ids] != [task.status.value]
        ]

    if misplaced:
        logger.error(f"Tasks out of place: {misplaced}")
        sys.exit(1)

    logger.info(f"Seed OK: {len(tasks)} tasks across {len(columns)} columns")


def main():
    if len(sys.argv) < 2:
        print("Usage: python manage.py <command> [args]")
        print("Commands:")
        print("  runserver [host] [port] - Serve the API (defaults from HOST/PORT)")
        print("  check_seed              - Verify the demo data is consistent")
        sys.exit(1)

    command = sys.argv[1]

    if command == "runserver":
        host = sys.argv[2] if len(sys.argv) > 2 else HOST
        port = int(sys.argv[3]) if len(sys.argv) > 3 else PORT
        runserver(host, port)
    elif command == "check_seed":
        check_seed()
    else:
        print(f"Unknown command: {command}")
        print("Run 'python manage.py' to see available commands")
        sys.exit(1)


if __name__ == "__main__":
    main()
