# app/schemas/common.py
from typing import Generic, List, TypeVar
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for everything that crosses the wire: camelCase JSON, snake_case Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    # Unknown body fields are a validation error
    model_config = ConfigDict(extra="forbid")


class PaginationMeta(CamelModel):
    total: int
    page: int
    limit: int
    total_pages: int


class Paginated(CamelModel, Generic[T]):
    data: List[T]
    pagination: PaginationMeta


class PageParams(BaseModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
