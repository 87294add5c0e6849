"""Category business logic.

Each public method runs in its own transaction: committed when the method
returns, rolled back when it raises. Persistence faults surface as
StorageError and are never retried.
"""
import logging
from contextlib import contextmanager
from typing import Any, Generator, List

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from config.database import transaction_scope
from exceptions import NotFoundError, StorageError, ValidationError
from models.category import CategoryModel
from repositories.category_repository import CategoryRepository
from schemas.category_schema import CategoryCreateRequest, CategoryResponse, CategoryUpdateRequest

logger = logging.getLogger(__name__)

CATEGORY_NOT_FOUND = "category is not found"


class CategoryService:

    def __init__(self, repository: CategoryRepository, session_factory: sessionmaker):
        self.repository = repository
        self.session_factory = session_factory

    @contextmanager
    def _transaction(self) -> Generator[Session, None, None]:
        try:
            with transaction_scope(self.session_factory) as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(f"Storage failure, transaction rolled back: {e}", exc_info=True)
            raise StorageError("storage failure") from e

    def create(self, payload: Any) -> CategoryResponse:
        with self._transaction() as session:
            request = self._validate(CategoryCreateRequest, payload)
            category = self.repository.save(session, CategoryModel(name=request.name))
            logger.info(f"Created category id={category.id}")
            return CategoryResponse.model_validate(category)

    def update(self, category_id: int, payload: Any) -> CategoryResponse:
        with self._transaction() as session:
            request = self._validate(CategoryUpdateRequest, payload)
            existing = self._get_or_raise(session, category_id)
            category = self.repository.update(session, CategoryModel(id=existing.id, name=request.name))
            logger.info(f"Updated category id={category.id}")
            return CategoryResponse.model_validate(category)

    def delete(self, category_id: int) -> None:
        with self._transaction() as session:
            category = self._get_or_raise(session, category_id)
            self.repository.delete(session, category.id)
            logger.info(f"Deleted category id={category.id}")

    def find_by_id(self, category_id: int) -> CategoryResponse:
        with self._transaction() as session:
            return CategoryResponse.model_validate(self._get_or_raise(session, category_id))

    def find_all(self) -> List[CategoryResponse]:
        with self._transaction() as session:
            return [CategoryResponse.model_validate(c) for c in self.repository.find_all(session)]

    def _get_or_raise(self, session: Session, category_id: int) -> CategoryModel:
        category = self.repository.find_by_id(session, category_id)
        if category is None:
            raise NotFoundError(CATEGORY_NOT_FOUND)
        return category

    @staticmethod
    def _validate(schema, payload: Any):
        try:
            return schema.model_validate(payload)
        except PydanticValidationError as e:
            messages = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc']) or 'body'}: {err['msg']}" for err in e.errors()
            )
            raise ValidationError(messages) from e
