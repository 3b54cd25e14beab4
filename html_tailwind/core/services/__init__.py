from __future__ import annotations

"""High-level orchestration services (document loading, hot reload).

Services wrap the pure conversion pipeline with file access and caching.
"""

from .document_service import DocumentService, DocumentHandle, FileResourceLoader, ResourceHandle  # noqa: F401

__all__: list[str] = [
    "DocumentService",
    "DocumentHandle",
    "FileResourceLoader",
    "ResourceHandle",
]
