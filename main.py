"""FastAPI application factory for the category API."""
import logging
from typing import Optional

from fastapi import FastAPI
from sqlalchemy import Engine

from config.database import create_db_engine, create_session_factory
from config.logging_config import setup_logging
from config.settings import Settings
from controllers.category_controller import CategoryController
from controllers.error_handlers import register_error_handlers
from middleware.auth_middleware import ApiKeyMiddleware
from repositories.category_repository import CategoryRepository
from services.category_service import CategoryService

logger = logging.getLogger(__name__)


def create_fastapi_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """
    Build the application and wire its collaborators.

    engine -> session factory -> repository -> service -> controller. Both
    arguments default to values derived from the environment.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    engine = engine or create_db_engine(settings)
    service = CategoryService(CategoryRepository(), create_session_factory(engine))
    controller = CategoryController(service)

    app = FastAPI(title="Category API", version="1.0.0")
    app.state.settings = settings
    app.state.engine = engine

    app.include_router(controller.router, prefix=settings.api_prefix)
    register_error_handlers(app)
    app.add_middleware(ApiKeyMiddleware, api_key=settings.api_key)

    logger.info(f"Category API ready under {settings.api_prefix}")
    return app
