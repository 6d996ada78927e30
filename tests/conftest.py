"""Shared pytest fixtures.

The environment is set before ``task_manager`` is imported so that the
engine binds to a private in-memory SQLite database.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "testing_secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SENDGRID_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient

from task_manager.database import create_tables, drop_tables
from task_manager.main import app

from util import make_user


@pytest.fixture(autouse=True)
def database():
    drop_tables()
    create_tables()
    yield
    drop_tables()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def user_one():
    return make_user("Mike", "mike@something.com", "mik12345")


@pytest.fixture
def user_two():
    return make_user("Jess", "jess@something.com", "myhouse099@@")
