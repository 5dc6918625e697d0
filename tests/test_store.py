"""
Feature: In-memory store
  As the API
  I want each store to hold its own seeded state
  So that apps and tests never share data

Scenario: Stores are isolated
  Given two stores
  When a task is created through one app
  Then the other store does not see it

Scenario: Empty store
  Given a store built without seed data
  Then every table is empty
"""

from fastapi.testclient import TestClient
from sqlmodel import Session, select
from database import Store
from main import create_app
from models.boards import Task, BoardColumn
from models.user import User


def test_stores_are_isolated():
    first = TestClient(create_app(Store()))
    second = TestClient(create_app(Store()))

    created = first.post("/tasks", json={"title": "Only here"}).json()["task"]

    assert created["id"] in [task["id"] for task in first.get("/board").json()["tasks"]]
    assert created["id"] not in [task["id"] for task in second.get("/board").json()["tasks"]]


def test_empty_store():
    store = Store(seed=False)

    with Session(store.engine) as session:
        assert session.exec(select(User)).all() == []
        assert session.exec(select(Task)).all() == []


def test_seed_places_every_task_once():
    store = Store()

    with Session(store.engine) as session:
        tasks = session.exec(select(Task)).all()
        columns = session.exec(select(BoardColumn)).all()

        for task in tasks:
            holders = [column.id for column in columns if task.id in column.task_ids]
            assert holders == [task.status.value]


def test_board_missing_in_empty_store():
    client = TestClient(create_app(Store(seed=False)))

    response = client.post("/tasks", json={"title": "X"})

    assert response.status_code == 404
    assert response.json() == {"error": "Board not found"}
