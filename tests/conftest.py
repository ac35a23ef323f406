import os

# Settings are read at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from surplus_sales.main import app
from surplus_sales.database import Base, get_db
from surplus_sales.core.jwt import create_user_token
from surplus_sales.models.accessories import Accessory
from surplus_sales.models.cabs import MultiCab
from surplus_sales.models.users import ROLE_ADMIN
from surplus_sales.repositories.users import UserRepository
from surplus_sales.core.stock import derive_status


engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db():
    """Fresh schema for every test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def staff_user(db):
    return UserRepository(db).create(
        full_name="Staff Member",
        email="staff@example.com",
        password="s3cure-staff-pass",
    )


@pytest.fixture
def admin_user(db):
    return UserRepository(db).create(
        full_name="Admin Person",
        email="admin@example.com",
        password="s3cure-admin-pass",
        role=ROLE_ADMIN,
    )


@pytest.fixture
def auth_headers(staff_user):
    return {"Authorization": f"Bearer {create_user_token(staff_user)}"}


@pytest.fixture
def admin_headers(admin_user):
    return {"Authorization": f"Bearer {create_user_token(admin_user)}"}


def _inventory(model, db, **overrides):
    values = {
        "name": "Scrum Wagon",
        "make": "Suzuki",
        "quantity": 10,
        "price": Decimal("1000.00"),
        "unit_color": "White",
    }
    values.update(overrides)
    values["status"] = derive_status(values["quantity"]).value

    record = model(**values)
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


@pytest.fixture
def make_cab(db):
    def factory(**overrides):
        return _inventory(MultiCab, db, **overrides)

    return factory


@pytest.fixture
def make_accessory(db):
    def factory(**overrides):
        overrides.setdefault("name", "Roof Rack")
        overrides.setdefault("make", "Generic")
        overrides.setdefault("price", Decimal("50.00"))
        return _inventory(Accessory, db, **overrides)

    return factory
