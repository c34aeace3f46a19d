"""
Pydantic schemas for API request/response validation.
"""

from api.schemas.catalog import (
    ArticleCreateRequest,
    ArticleCreateResponse,
    ArticleResponse,
    CategoryCreateRequest,
    CategoryResponse,
    SolutionCreateRequest,
    SolutionResponse,
)

__all__ = [
    "ArticleCreateRequest",
    "ArticleCreateResponse",
    "ArticleResponse",
    "CategoryCreateRequest",
    "CategoryResponse",
    "SolutionCreateRequest",
    "SolutionResponse",
]
