"""
Document API endpoints.

Routes:
- POST /store - Store text under its content identifier
- POST /search - Find stored text similar to a query
- POST /delete - Delete a stored entry (requires confirmToken)

Every route requires the Authorization header to carry the API secret.

Dependencies: docindex.application.services, docindex.models
System role: Document indexing HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from docindex.api.deps import get_document_service, require_api_token
from docindex.application.services import DocumentIndexService
from docindex.models.common import ErrorResponse
from docindex.models.document import (
    DeleteRequest,
    DeleteResponse,
    SearchRequest,
    SearchResponse,
    SearchResultItem,
    StoreRequest,
    StoreResponse,
)

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or empty field"},
    401: {"model": ErrorResponse, "description": "Missing or invalid Authorization header"},
    500: {"model": ErrorResponse, "description": "Embedding or vector index failure"},
}

router = APIRouter(
    tags=["documents"],
    dependencies=[Depends(require_api_token)],
    responses=ERROR_RESPONSES,
)


@router.post("/store", response_model=StoreResponse)
async def store_text(
    request: StoreRequest,
    service: DocumentIndexService = Depends(get_document_service),
) -> StoreResponse:
    """
    Store text. Storing identical text again overwrites the same entry.

    Raises:
        InvalidArgumentError(400): Empty text
        UpstreamError(500): Embedding or index failure
    """
    result = await service.store(request.text)
    return StoreResponse(
        id=result.id,
        message="Text stored successfully",
        mutation_id=result.mutation_id,
    )


@router.post("/search", response_model=SearchResponse)
async def search_text(
    request: SearchRequest,
    service: DocumentIndexService = Depends(get_document_service),
) -> SearchResponse:
    """
    Return stored text most similar to the query, best match first.

    Raises:
        InvalidArgumentError(400): Empty query or limit below 1
        UpstreamError(500): Embedding or index failure
    """
    results = await service.search(request.query, request.limit)
    return SearchResponse(
        results=[SearchResultItem(id=result.id, text=result.text) for result in results]
    )


@router.post(
    "/delete",
    response_model=DeleteResponse,
    responses={403: {"model": ErrorResponse, "description": "Invalid confirmToken"}},
)
async def delete_document(
    request: DeleteRequest,
    service: DocumentIndexService = Depends(get_document_service),
) -> DeleteResponse:
    """
    Delete a stored entry by identifier. Unknown identifiers succeed.

    Raises:
        InvalidArgumentError(400): Empty id
        ForbiddenError(403): confirmToken does not match
        UpstreamError(500): Index failure
    """
    result = await service.delete(request.id, request.confirm_token)
    return DeleteResponse(
        id=result.id,
        message="Document deleted successfully",
        mutation_id=result.mutation_id,
    )
