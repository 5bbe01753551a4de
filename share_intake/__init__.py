"""share-intake - Ingestion of shared content URLs into typed feeds."""

from .application.intake_controller import IntakeController
from .application.query_surface import ShareQueryService
from .infrastructure.bootstrap import ShareIntakeRuntime, build_runtime

__all__ = ["IntakeController", "ShareIntakeRuntime", "ShareQueryService", "build_runtime"]
__version__ = "0.1.0"
