import pytest
from fastapi.testclient import TestClient

from todos.api.main import create_app
from todos.db import models
from todos.db.database import create_db_engine
from todos.db.repositories import TodoRepository
from todos.services import TodoService


# Isolated in-memory database per test; StaticPool keeps the schema alive
# across the sessions the repository opens.
@pytest.fixture
def engine():
    eng = create_db_engine("sqlite+pysqlite:///:memory:")
    models.Base.metadata.create_all(bind=eng)
    try:
        yield eng
    finally:
        models.Base.metadata.drop_all(bind=eng)
        eng.dispose()


@pytest.fixture
def repo(engine):
    return TodoRepository(engine)


@pytest.fixture
def service(repo):
    return TodoService(repo)


@pytest.fixture
def client(engine):
    app = create_app(engine=engine, run_migrations_on_startup=False)
    with TestClient(app) as c:
        yield c
