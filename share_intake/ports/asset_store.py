"""Asset store interface - Port definition for the on-device asset library."""

from abc import ABC, abstractmethod

from ..domain.models import AssetHandle
from ..domain.types import ContentEditingCompletion


class AssetStorePort(ABC):
    """Abstract interface for looking up assets by opaque identifier.

    Lookups are split in two: finding the asset, then requesting its
    backing file. The second call does not return the result; it hands it
    to a completion at some later point, possibly on another thread.
    """

    @abstractmethod
    async def fetch_asset(self, identifier: str) -> AssetHandle | None:
        """Find the asset with the given local identifier.

        Args:
            identifier: The asset library identifier

        Returns:
            The asset handle, or None if no asset matches
        """
        ...

    @abstractmethod
    def request_content_editing_input(
        self,
        asset: AssetHandle,
        completion: ContentEditingCompletion,
        allow_network_access: bool = True,
    ) -> None:
        """Request the full-resolution backing file of an asset.

        The completion is called exactly once, with None when the backing
        file cannot be produced.

        Args:
            asset: The asset to look up
            completion: Receives the backing file information
            allow_network_access: Whether the store may download the asset
        """
        ...
