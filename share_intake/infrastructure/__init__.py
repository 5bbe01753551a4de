"""Infrastructure layer - Concrete implementations of ports.

``bootstrap`` depends on the application layer and is imported from its
own module rather than re-exported here.
"""

from .config import LogContext, ShareIntakeConfig, bucket_for_app_group
from .directory_asset_store import DirectoryAssetStore
from .in_memory_handoff_store import InMemoryHandoffStore
from .nats_handoff_store import NATSHandoffStore
from .serialization import PayloadDecoder
from .simple_logger import SimpleLogger, component_logger

__all__ = [
    "DirectoryAssetStore",
    "InMemoryHandoffStore",
    "LogContext",
    "NATSHandoffStore",
    "PayloadDecoder",
    "ShareIntakeConfig",
    "SimpleLogger",
    "bucket_for_app_group",
    "component_logger",
]
