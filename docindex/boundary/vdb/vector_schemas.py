"""
Vector database schemas.

Pydantic models for vector index results.
Used for type-safe vector store interactions.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from typing import Any

from pydantic import BaseModel, Field


class IndexMatch(BaseModel):
    """Single match returned by a similarity index query."""

    id: str = Field(description="Stored entry identifier")
    payload: dict[str, Any] = Field(
        default_factory=dict,
        description="Metadata stored alongside the vector",
    )
    score: float | None = Field(
        default=None,
        description="Similarity score reported by the index (higher is closer)",
    )
