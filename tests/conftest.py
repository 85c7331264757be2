"""
Общие фикстуры тестов: SQLite в памяти вместо PostgreSQL.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from backoffice.db.database import get_db
from backoffice.db.models import Base
from backoffice.main import app
from backoffice.services.appointment_service import AppointmentService
from backoffice.services.product_service import ProductService
from backoffice.services.taxonomy_service import TaxonomyService


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def product_service(db):
    return ProductService(db)


@pytest.fixture
def taxonomy_service(db):
    return TaxonomyService(db)


@pytest.fixture
def appointment_service(db):
    return AppointmentService(db)


@pytest.fixture
def make_product(product_service):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        n = counter["n"]
        data = {
            "name": f"Product {n}",
            "slug": f"product-{n}",
            "code": f"SKU-{n:03d}",
            "price": 10.0 * n,
            "status": "active",
        }
        data.update(overrides)
        return product_service.create(data)

    return _make


@pytest.fixture
def make_category(taxonomy_service):
    def _make(name, slug=None, parent_id=None):
        return taxonomy_service.create(
            {"name": name, "slug": slug or name.lower().replace(" ", "-"), "parent_id": parent_id}
        )

    return _make


@pytest.fixture
def client(db):
    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as test_client:
        test_client.cookies.set("dev_token", "true")
        yield test_client
    app.dependency_overrides.clear()
