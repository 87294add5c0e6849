"""Category request/response schemas with validation."""
from pydantic import BaseModel, ConfigDict, Field

from models.category import NAME_MAX_LENGTH
from schemas.base_schema import BaseSchema


class CategoryCreateRequest(BaseModel):
    """Payload accepted by the create endpoint."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Category name (required)")


class CategoryUpdateRequest(CategoryCreateRequest):
    """Payload accepted by the update endpoint. The id comes from the path."""


class CategoryResponse(BaseSchema):
    id: int
    name: str
