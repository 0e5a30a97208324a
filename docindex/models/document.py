"""
Document API models.

Request/response schemas for store, search and delete, plus the result
objects returned by DocumentIndexService.

Request fields are optional at the schema level so that a missing field and
an empty one are both rejected by the service with the same 400 response.

Dependencies: pydantic
System role: Document indexing API contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class StoreRequest(BaseModel):
    """Request to store a block of text."""

    text: str | None = Field(default=None, description="Text to store")


class SearchRequest(BaseModel):
    """Request for stored text similar to a query."""

    query: str | None = Field(default=None, description="Query text")
    limit: int | None = Field(default=None, description="Maximum number of results")


class DeleteRequest(BaseModel):
    """Request to delete a stored entry."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(default=None, description="Identifier returned by /store")
    confirm_token: str | None = Field(
        default=None,
        alias="confirmToken",
        description="Confirmation secret for destructive operations",
    )


class StoreResult(BaseModel):
    """Outcome of a store operation."""

    id: str
    mutation_id: str | None = None


class SearchResult(BaseModel):
    """Single search hit, most similar first."""

    id: str
    text: str
    score: float | None = None


class DeleteResult(BaseModel):
    """Outcome of a delete operation."""

    id: str
    mutation_id: str | None = None


class StoreResponse(BaseModel):
    """Response for POST /store."""

    success: bool = True
    id: str = Field(description="Content identifier of the stored text")
    message: str
    mutation_id: str | None = Field(
        default=None,
        serialization_alias="mutationId",
        description="Index acknowledgement token, if issued",
    )


class SearchResultItem(BaseModel):
    """Single result in a search response."""

    id: str
    text: str


class SearchResponse(BaseModel):
    """Response for POST /search."""

    success: bool = True
    results: list[SearchResultItem]


class DeleteResponse(BaseModel):
    """Response for POST /delete."""

    success: bool = True
    id: str
    message: str
    mutation_id: str | None = Field(
        default=None,
        serialization_alias="mutationId",
        description="Index acknowledgement token, if issued",
    )
