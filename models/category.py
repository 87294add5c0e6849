from sqlalchemy import Column, String

from models.base_model import BaseModel

NAME_MAX_LENGTH = 100


class CategoryModel(BaseModel):
    __tablename__ = "category"

    name = Column(String(NAME_MAX_LENGTH), nullable=False)
