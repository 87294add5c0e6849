"""Declarative base for the persisted entities."""
from sqlalchemy import Integer
from sqlalchemy.orm import declarative_base, mapped_column


Base = declarative_base()


class BaseModel(Base):
    """Abstract entity with a server-generated integer primary key."""

    __abstract__ = True

    # sort_order keeps the key as the first column of every table.
    id = mapped_column(Integer, primary_key=True, autoincrement=True, sort_order=-1)

    def __repr__(self) -> str:
        fields = ", ".join(f"{c.name}={getattr(self, c.name)!r}" for c in self.__table__.columns)
        return f"{type(self).__name__}({fields})"
