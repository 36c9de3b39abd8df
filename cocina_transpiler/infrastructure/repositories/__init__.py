"""Repository implementations for data access.

This module provides concrete implementations of the repository ports: the
Cocina JSON reader, the in-memory object store and the object history loader.
"""

from .cocina_document_repository import CocinaDocumentRepository
from .in_memory_object_store import InMemoryRepositoryObjectStore
from .repository_object_loader import ObjectHistory, load_repository_object
from .static_workflow_state import StaticWorkflowState

__all__ = [
    "CocinaDocumentRepository",
    "InMemoryRepositoryObjectStore",
    "StaticWorkflowState",
    # History loading
    "ObjectHistory",
    "load_repository_object",
]
