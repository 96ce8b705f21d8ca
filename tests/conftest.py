"""Fixtures compartidas por los tests."""

import pytest

from estructuras_app.core.services import UserService
from estructuras_app.infrastructure.database import Database, init_database
from estructuras_app.infrastructure.repositories import UserRepository
from estructuras_app.models.user import User


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "UserData.db"


@pytest.fixture
def database(db_path):
    db = Database(db_path)
    yield db
    db.dispose()


@pytest.fixture
def empty_repository(database):
    init_database(database, seed=False)
    return UserRepository(database)


@pytest.fixture
def seeded_repository(database):
    init_database(database)
    return UserRepository(database)


@pytest.fixture
def service(seeded_repository):
    return UserService(seeded_repository)


@pytest.fixture
def sample_users():
    return [
        User(1, "John", "Doe", "john.doe@example.com", 30),
        User(2, "Jane", "Smith", "jane.smith@example.com", 25),
        User(3, "Robert", "Johnson", "robert.j@example.com", 35),
        User(4, "Emily", "Williams", "emily.w@example.com", 28),
        User(5, "Michael", "Brown", "michael.b@example.com", 42),
    ]
