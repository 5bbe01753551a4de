"""Application layer - Intake, resolution, dispatch and queries."""

from .dispatch import DispatchChannel, DispatchHub
from .intake_controller import IntakeController
from .launch_handler import ShareIntentHost
from .query_surface import ShareQueryService
from .reference_resolver import ReferenceResolver

__all__ = [
    "DispatchChannel",
    "DispatchHub",
    "IntakeController",
    "ReferenceResolver",
    "ShareIntentHost",
    "ShareQueryService",
]
