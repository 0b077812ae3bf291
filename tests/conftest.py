import os

# Must be set before the app modules build their engine and settings.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["STORE_BACKEND"] = "sql"
os.environ.pop("HANDLER_STORE_BACKEND", None)
os.environ.pop("MEMORY_SERIALS", None)
for _name in ("AWS_REGION", "ASSETS_TABLE", "DYNAMODB_ENDPOINT_URL"):
    os.environ.pop(_name, None)

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from serial_validator.main import app
from serial_validator.db.base import Base
from serial_validator.db.session import get_session_factory

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture(scope="session", autouse=True)
def create_test_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session():
    """
    One outer transaction per test, rolled back at the end.

    The session joins the connection's transaction, so session.commit()
    in helpers does not commit the outer transaction.
    """
    connection = engine.connect()
    outer_tx = connection.begin()

    session = TestingSessionLocal(bind=connection)

    try:
        yield session
    finally:
        session.close()
        outer_tx.rollback()
        connection.close()


@pytest.fixture(autouse=True)
def override_session_factory(db_session):
    def _session_factory_override():
        return lambda: db_session

    app.dependency_overrides[get_session_factory] = _session_factory_override
    yield
    app.dependency_overrides.clear()
