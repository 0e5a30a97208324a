"""Service orchestrators."""

from .document_index_service import MISSING_TEXT, DocumentIndexService

__all__ = ["DocumentIndexService", "MISSING_TEXT"]
