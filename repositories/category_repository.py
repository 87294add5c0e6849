"""Data access for the ``category`` table.

Every method works inside the transaction of the session it is given and
never commits or rolls back on its own.
"""
import logging
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from models.category import CategoryModel

logger = logging.getLogger(__name__)


class CategoryRepository:

    def save(self, session: Session, category: CategoryModel) -> CategoryModel:
        """Insert a new category and return it with its generated id."""
        session.add(category)
        session.flush()
        logger.debug(f"Inserted category id={category.id}")
        return category

    def update(self, session: Session, category: CategoryModel) -> CategoryModel:
        # Silently affects no row when the id is absent; callers check existence first.
        session.execute(
            update(CategoryModel)
            .where(CategoryModel.id == category.id)
            .values(name=category.name)
        )
        return category

    def delete(self, session: Session, category_id: int) -> None:
        session.execute(delete(CategoryModel).where(CategoryModel.id == category_id))

    def find_by_id(self, session: Session, category_id: int) -> Optional[CategoryModel]:
        """Return the category or None when no row has this id."""
        return session.execute(
            select(CategoryModel).where(CategoryModel.id == category_id)
        ).scalar_one_or_none()

    def find_all(self, session: Session) -> List[CategoryModel]:
        return list(session.scalars(select(CategoryModel).order_by(CategoryModel.id)))
