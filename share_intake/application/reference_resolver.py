"""Resolution of content references to absolute file paths.

A reference is either path-like (``file://`` URLs and known on-device
absolute paths) or an opaque asset library identifier. Path-like
references resolve by string transform alone; identifiers go through the
asset store, whose completion-based lookup is awaited here so that items
of one batch resolve strictly in order.
"""

import asyncio
from collections.abc import Iterable

from ..domain.models import AssetHandle, ContentEditingInput
from ..ports.asset_store import AssetStorePort
from ..ports.logger import LoggerPort

FILE_SCHEME = "file://"


class ReferenceResolver:
    """Maps content references to absolute paths, or None when unresolvable."""

    def __init__(
        self,
        asset_store: AssetStorePort | None,
        local_path_prefixes: Iterable[str],
        logger: LoggerPort,
        timeout: float | None = None,
    ):
        """Initialize the resolver.

        Args:
            asset_store: Asset library for identifiers; None disables lookups
            local_path_prefixes: Absolute prefixes treated as local paths
            logger: Logger port
            timeout: Seconds to wait for an asset lookup; None waits indefinitely
        """
        self._asset_store = asset_store
        self._prefixes = (FILE_SCHEME, *local_path_prefixes)
        self._logger = logger
        self._timeout = timeout

    def is_local(self, reference: str) -> bool:
        """Whether a reference resolves without the asset store."""
        return reference.startswith(self._prefixes)

    async def resolve(self, reference: str) -> str | None:
        """Resolve a reference to an absolute path.

        Args:
            reference: Path-like string or asset identifier

        Returns:
            The absolute path, or None when the reference, the asset or its
            backing file path is missing or empty
        """
        if not reference:
            return None

        if self.is_local(reference):
            return reference.replace(FILE_SCHEME, "") or None

        if self._asset_store is None:
            self._logger.debug("No asset store configured", reference=reference)
            return None

        asset = await self._asset_store.fetch_asset(reference)
        if asset is None:
            return None

        editing_input = await self._request_backing_file(asset)
        if editing_input is None:
            return None
        # Orientation is not needed to address the file
        return editing_input.full_size_image_path or None

    async def _request_backing_file(self, asset: AssetHandle) -> ContentEditingInput | None:
        loop = asyncio.get_running_loop()
        future: asyncio.Future[ContentEditingInput | None] = loop.create_future()

        def _fulfil(result: ContentEditingInput | None) -> None:
            if not future.done():
                future.set_result(result)

        def _completion(result: ContentEditingInput | None) -> None:
            # The store may complete on any thread, possibly after a timeout
            if not loop.is_closed():
                loop.call_soon_threadsafe(_fulfil, result)

        self._asset_store.request_content_editing_input(  # type: ignore[union-attr]
            asset, _completion, allow_network_access=True
        )

        if self._timeout is None:
            return await future
        try:
            return await asyncio.wait_for(future, self._timeout)
        except TimeoutError:
            self._logger.warning(
                f"Asset lookup timed out after {self._timeout}s",
                reference=asset.local_identifier,
            )
            return None
