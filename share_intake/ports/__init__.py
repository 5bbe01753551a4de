"""Ports layer - Interfaces to the handoff store, asset library and logging."""

from .asset_store import AssetStorePort
from .handoff_store import HandoffStorePort
from .logger import LoggerPort

__all__ = [
    "AssetStorePort",
    "HandoffStorePort",
    "LoggerPort",
]
