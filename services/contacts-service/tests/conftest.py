"""
Test configuration and fixtures
"""

import os

# Keep the module-level engine off the on-disk default database
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from contacts_service.domain.entities import Contact  # noqa: E402
from contacts_service.models import Base  # noqa: E402
from contacts_service.repositories.memory_repository import (  # noqa: E402
    InMemoryContactRepository,
)
from contacts_service.repositories.sqlalchemy_repository import (  # noqa: E402
    SqlAlchemyContactRepository,
)
from contacts_service.services.contact_manager import ContactManager  # noqa: E402

# Create in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database session for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(params=["sqlalchemy", "memory"])
def repository(request, db_session):
    """Repository under test, run against both implementations"""
    if request.param == "sqlalchemy":
        return SqlAlchemyContactRepository(db_session)
    return InMemoryContactRepository()


@pytest.fixture
def manager(repository):
    """Contact manager over the parametrized repository"""
    return ContactManager(repository)


@pytest.fixture
def make_contact():
    """Factory for valid contacts with per-test overrides"""

    def _make(**overrides):
        data = {
            "ulid": "1ABC23456HH",
            "first_name": "TestFirstName",
            "last_name": "TestLastName",
            "address": "Anything for testing address",
            "email": "test@gmail.com",
            "gender": "Male",
            "phone": "0889933779",
        }
        data.update(overrides)
        return Contact(**data)

    return _make


@pytest.fixture
def peter(make_contact):
    """Sample contact Peter Petrov"""
    return make_contact(
        ulid="1234ABCD12",
        first_name="Peter",
        last_name="Petrov",
        address="Crimson Str.",
        phone="0999123123",
        email="test@email.com",
    )


@pytest.fixture
def vladko(make_contact):
    """Sample contact Vladko Vladkov"""
    return make_contact(
        ulid="9999UIOP12",
        first_name="Vladko",
        last_name="Vladkov",
        address="Vladkov Str.",
        phone="0888123123",
        email="vladko@email.com",
    )
