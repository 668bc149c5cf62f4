"""
Shared fixtures for storefront tests.

Every test gets a fresh in-memory SQLite schema, a customer and an admin
user, and a small catalog. Celery runs in eager mode so notification tasks
execute in-process without a broker.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_PRODUCTS"] = "false"
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "true"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.data.database import Base, SessionLocal, engine
from app.data.models.product import ProductModel
from app.data.models.user import UserModel
from app.main import app


@pytest.fixture(autouse=True)
def clean_database():
    """Recreate all tables before each test so tests never share state."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def customer(db) -> UserModel:
    user = UserModel(name="alice", role="customer")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def other_customer(db) -> UserModel:
    user = UserModel(name="bob", role="customer")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def admin(db) -> UserModel:
    user = UserModel(name="root", role="admin")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def products(db) -> dict[str, ProductModel]:
    """
    Small catalog keyed by a short alias:
    - lamp: 40.00, stock 10, home
    - mug: 40.00, stock 5, kitchen
    - speaker: 89.99, stock 3, electronics
    - tablet: 179.99, stock 0, electronics (out of stock)
    """
    catalog = {
        "lamp": ProductModel(
            name="Desk Lamp", description="Adjustable desk lamp", category="home",
            price=Decimal("40.00"), stock=10, rating=Decimal("4.2"),
        ),
        "mug": ProductModel(
            name="Coffee Mug", description="Ceramic mug", category="kitchen",
            price=Decimal("40.00"), stock=5, rating=Decimal("4.8"),
        ),
        "speaker": ProductModel(
            name="Bluetooth Speaker", description="Waterproof portable speaker", category="electronics",
            price=Decimal("89.99"), stock=3, rating=Decimal("4.1"),
        ),
        "tablet": ProductModel(
            name="Drawing Tablet", description="Pressure sensitive tablet", category="electronics",
            price=Decimal("179.99"), stock=0, rating=Decimal("4.6"),
        ),
    }
    db.add_all(catalog.values())
    db.commit()
    for product in catalog.values():
        db.refresh(product)
    return catalog


@pytest.fixture
def test_client():
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def auth():
    """Build headers identifying the caller."""
    def _headers(user: UserModel) -> dict[str, str]:
        return {"X-User-Id": str(user.id)}
    return _headers
