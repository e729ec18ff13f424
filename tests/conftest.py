import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tasktracker import models  # noqa: F401
from tasktracker.database import Base, get_db
from tasktracker.main import app
from tasktracker.models import Person, Task, Tenant
from tasktracker.utils.security import get_password_hash

TENANT_PASSWORD = "secret-pass"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_password(monkeypatch):
    monkeypatch.setenv("ADMIN_PASSWORD", "admin-pass")
    return "admin-pass"


def _make_tenant(db_session, name):
    tenant = Tenant(name=name, hashed_password=get_password_hash(TENANT_PASSWORD))
    db_session.add(tenant)
    db_session.commit()
    return tenant


@pytest.fixture
def tenant(db_session):
    return _make_tenant(db_session, "Smith Family")


@pytest.fixture
def other_tenant(db_session):
    return _make_tenant(db_session, "Jones Family")


@pytest.fixture
def person(db_session, tenant):
    person = Person(name="Alice", color="#ff0000", tenant_id=tenant.id)
    db_session.add(person)
    db_session.commit()
    return person


@pytest.fixture
def make_task(db_session, tenant):
    """Factory for tasks owned by ``tenant`` unless told otherwise"""

    def _make_task(
        title="Feed the cat",
        active_days="1,3,5",
        points=10,
        money=None,
        is_recurring=True,
        assigned_to=None,
        tenant_id=None,
        display_order=0,
    ):
        task = Task(
            title=title,
            active_days=active_days,
            points=points,
            money=money,
            is_recurring=is_recurring,
            assigned_to_id=assigned_to.id if assigned_to is not None else None,
            tenant_id=tenant_id if tenant_id is not None else tenant.id,
            display_order=display_order,
        )
        db_session.add(task)
        db_session.commit()
        return task

    return _make_task
