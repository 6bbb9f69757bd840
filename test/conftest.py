import mongomock
import pytest
from fastapi.testclient import TestClient

from auth.routes import get_repository
from main import app
from repositories.user_repository import UserRepository


@pytest.fixture
def collection():
    return mongomock.MongoClient().test.users


@pytest.fixture
def repo(collection):
    repository = UserRepository(collection, "MediaMunch")
    repository.ensure_indexes()
    return repository


@pytest.fixture
def client(repo):
    """TestClient without the lifespan, so no real Mongo is contacted."""
    app.dependency_overrides[get_repository] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()
