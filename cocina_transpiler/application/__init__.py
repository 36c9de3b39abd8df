"""Application layer for Cocina Transpiler.

This layer contains use cases and application-level orchestration logic.
It defines ports (interfaces) for external dependencies.
"""

from .models import (
    TransformRequest,
    TransformResponse,
    UserVersionMode,
)

# Import the services directly from their modules to avoid import cycles:
#   from cocina_transpiler.application.version_service import VersionService

__all__ = [
    "TransformRequest",
    "TransformResponse",
    "UserVersionMode",
]
