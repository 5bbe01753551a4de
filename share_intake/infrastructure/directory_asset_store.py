"""Directory-backed implementation of the AssetStorePort.

Assets are files in a root directory. An asset identifier such as
``ED7AC36B-A150-4C38-BB8C-B6D696F4F2ED/L0/001`` names the file whose stem
is the part before the first slash. Backing-file requests complete on a
worker thread, the way an asset library delivers them off the caller's
call path.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ..domain.models import AssetHandle, ContentEditingInput
from ..domain.types import ContentEditingCompletion
from ..ports.asset_store import AssetStorePort
from ..ports.logger import LoggerPort
from .simple_logger import component_logger

# EXIF orientation for an unrotated image
ORIENTATION_UP = 1


class DirectoryAssetStore(AssetStorePort):
    """Asset library over a local directory."""

    def __init__(self, root: Path | str, logger: LoggerPort | None = None, max_workers: int = 2):
        """Initialize the store.

        Args:
            root: Directory holding the asset files
            logger: Optional logger port. If not provided, uses simple logger.
            max_workers: Worker threads used to complete requests
        """
        self._root = Path(root)
        self._logger = logger or component_logger("directory_asset_store")
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="asset-store"
        )

    @property
    def root(self) -> Path:
        return self._root

    def _locate(self, identifier: str) -> Path | None:
        stem = identifier.split("/", 1)[0]
        if not stem or not self._root.is_dir():
            return None
        for candidate in sorted(self._root.iterdir()):
            if candidate.is_file() and candidate.stem == stem:
                return candidate
        return None

    async def fetch_asset(self, identifier: str) -> AssetHandle | None:
        """Find the asset file for an identifier off the event loop."""
        try:
            path = await asyncio.to_thread(self._locate, identifier)
        except OSError as e:
            self._logger.exception(
                f"Failed to read asset directory for '{identifier}'",
                exc_info=e,
                reference=identifier,
            )
            return None
        if path is None:
            self._logger.debug(f"No asset for identifier '{identifier}'", reference=identifier)
            return None
        return AssetHandle(local_identifier=identifier)

    def request_content_editing_input(
        self,
        asset: AssetHandle,
        completion: ContentEditingCompletion,
        allow_network_access: bool = True,
    ) -> None:
        """Complete with the absolute path of the asset file on a worker thread."""

        def _complete() -> None:
            try:
                path = self._locate(asset.local_identifier)
            except OSError as e:
                self._logger.exception(
                    f"Failed to read asset '{asset.local_identifier}'",
                    exc_info=e,
                    reference=asset.local_identifier,
                )
                path = None
            if path is None:
                completion(None)
                return
            completion(
                ContentEditingInput(
                    full_size_image_path=str(path.resolve()),
                    orientation=ORIENTATION_UP,
                )
            )

        self._executor.submit(_complete)

    def close(self) -> None:
        """Stop the worker threads, waiting for pending completions."""
        self._executor.shutdown(wait=True)
