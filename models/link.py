from __future__ import annotations

from enum import Enum
from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class LinkRelation(str, Enum):
    FIRST = "first"
    PREV = "prev"
    NEXT = "next"
    LAST = "last"


# -----------------------------------------------------------------------------
# Link header inputs / outputs
# -----------------------------------------------------------------------------
class LinkRequestContext(BaseModel):
    page: int = Field(
        ...,
        ge=1,
        description="Page requested by the client"
    )
    limit: int = Field(
        ...,
        ge=1,
        description="Page size (per_page) requested by the client"
    )
    resource_url: str = Field(
        ...,
        description="Request path with the query string stripped"
    )
    total_docs: int = Field(
        ...,
        ge=0,
        description="Total number of documents reported by the handler"
    )


class LinkEntry(BaseModel):
    rel: LinkRelation     # "first", "prev", "next", "last"
    url: str              # resource url + ?page=&per_page=
    page: int
    per_page: int

    model_config = ConfigDict(use_enum_values=True)


# -----------------------------------------------------------------------------
# Paginated payload
# -----------------------------------------------------------------------------
class PaginatedResponse(BaseModel, Generic[T]):
    resource: List[T] = Field(
        default_factory=list,
        description="Items on the requested page"
    )
    totalDocs: int = Field(
        ...,
        ge=0,
        description="Total number of documents across all pages"
    )
