"""Shared pytest fixtures for the HAL test suite."""

import pytest
from sqlalchemy import Column, Integer, String, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from fastapi_hal.config import get_settings
from fastapi_hal.pagination import Pagination

Base = declarative_base()


class Item(Base):
    __tablename__ = "items"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    sku = Column(String, nullable=False)


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def db_session():
    """Synchronous in-memory SQLite session."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    Session = sessionmaker(bind=engine, expire_on_commit=False)
    session = Session()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def items(db_session):
    rows = [Item(id=index, name=f"Item {index}", sku=f"SKU-{index:03d}") for index in range(1, 26)]
    db_session.add_all(rows)
    db_session.commit()
    return rows


@pytest.fixture
def second_page():
    """Page 2 of 5 with 10 results per page."""
    return Pagination(current_page=2, results_per_page=10, total_results=50)
