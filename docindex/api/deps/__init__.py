"""API-specific dependencies."""

from .dependencies import (
    get_access_gate,
    get_document_service,
    get_service_cache,
    get_settings_dependency,
    require_api_token,
)

__all__ = [
    "get_access_gate",
    "get_document_service",
    "get_service_cache",
    "get_settings_dependency",
    "require_api_token",
]
