from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool, create_engine, insert
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from inventory_api import models
from inventory_api.database import get_db
from inventory_api.main import app


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    models.Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine: Engine) -> Generator[Session, None, None]:
    with sessionmaker(bind=engine, autoflush=False)() as session:
        yield session


@pytest.fixture
def client(engine: Engine) -> Generator[TestClient, None, None]:
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # unhandled errors must come back as 500 envelopes, not be re-raised
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def seed(engine: Engine):
    """Insert rows straight into the store, bypassing the API checks."""

    def _seed(model, **values):
        with engine.begin() as conn:
            result = conn.execute(insert(model.__table__).values(**values))
            return result.inserted_primary_key[0]

    return _seed


@pytest.fixture
def beverage_id(seed) -> int:
    return seed(models.ProductType, productType="Beverage")
