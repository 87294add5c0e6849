"""Pytest configuration and fixtures for testing."""
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine, create_engine, func, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config.database import create_session_factory
from config.settings import Settings
from main import create_fastapi_app
from models.base_model import Base
from models.category import CategoryModel
from repositories.category_repository import CategoryRepository
from services.category_service import CategoryService

API_KEY = "RAHASIA"

# In-memory SQLite shared by every thread through a single connection.
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture(scope="function")
def engine() -> Generator[Engine, None, None]:
    """Create a fresh in-memory SQLite engine with the schema for each test."""
    test_engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},  # SQLite specific
        poolclass=StaticPool,
        echo=False,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture(scope="function")
def db_session_factory(engine: Engine) -> sessionmaker:
    return create_session_factory(engine)


@pytest.fixture
def repository() -> CategoryRepository:
    return CategoryRepository()


@pytest.fixture
def service(repository: CategoryRepository, db_session_factory: sessionmaker) -> CategoryService:
    return CategoryService(repository, db_session_factory)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, database_url=TEST_DATABASE_URL, api_key=API_KEY, log_level="DEBUG")


@pytest.fixture(scope="function")
def api_client(engine: Engine, test_settings: Settings) -> Generator[TestClient, None, None]:
    """Test client for the full app, authorized with the API key by default."""
    app = create_fastapi_app(settings=test_settings, engine=engine)
    with TestClient(app, headers={"X-API-Key": API_KEY}) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def anonymous_client(engine: Engine, test_settings: Settings) -> Generator[TestClient, None, None]:
    """Test client that sends no API key."""
    app = create_fastapi_app(settings=test_settings, engine=engine)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seed_category(db_session_factory: sessionmaker, repository: CategoryRepository):
    """Insert and commit a category directly through the repository."""

    def _seed(name: str = "Gadget") -> CategoryModel:
        session = db_session_factory()
        try:
            category = repository.save(session, CategoryModel(name=name))
            session.commit()
            return category
        finally:
            session.close()

    return _seed


@pytest.fixture
def count_categories(db_session_factory: sessionmaker):
    def _count() -> int:
        session = db_session_factory()
        try:
            return session.scalar(select(func.count()).select_from(CategoryModel))
        finally:
            session.close()

    return _count
