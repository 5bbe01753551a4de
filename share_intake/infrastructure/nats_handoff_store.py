"""NATS handoff store adapter - Read-only HandoffStorePort over JetStream KV."""

import re

import nats
from nats.aio.client import Client as NATSClient
from nats.js.errors import KeyNotFoundError
from nats.js.kv import KeyValue

from ..domain.exceptions import HandoffStoreError, HandoffStoreNotConnectedError
from ..ports.handoff_store import HandoffStorePort
from ..ports.logger import LoggerPort
from .config import LogContext, ShareIntakeConfig
from .serialization import PayloadDecoder
from .simple_logger import component_logger

# Keys NATS KV accepts; anything else cannot have been written
_VALID_KEY = re.compile(r"^[-/_=.a-zA-Z0-9]+$")


class NATSHandoffStore(HandoffStorePort):
    """NATS implementation of the handoff store port.

    Reads the JetStream KV bucket named by the configuration. Blobs are
    returned as stored; string sequences are stored as JSON or
    MessagePack arrays and decoded on read. This adapter never writes.
    """

    def __init__(
        self,
        config: ShareIntakeConfig | None = None,
        logger: LoggerPort | None = None,
        decoder: PayloadDecoder | None = None,
    ):
        """Initialize the adapter.

        Args:
            config: Optional configuration. If not provided, uses defaults.
            logger: Optional logger port. If not provided, uses simple logger.
            decoder: Optional decoder for string sequences.
        """
        self._config = config or ShareIntakeConfig()
        self._logger = logger or component_logger("nats_handoff_store", self._config.log_level)
        self._decoder = decoder or PayloadDecoder()
        self._nc: NATSClient | None = None
        self._kv: KeyValue | None = None

    @property
    def bucket(self) -> str:
        """Name of the KV bucket read by this store."""
        return str(self._config.bucket)

    async def connect(self) -> None:
        """Connect to NATS and bind to the configured bucket.

        Raises:
            HandoffStoreError: If the servers or the bucket are unavailable
        """
        log_ctx = LogContext(operation="connect", component="NATSHandoffStore")
        try:
            self._nc = await nats.connect(servers=self._config.nats_servers)
            self._kv = await self._nc.jetstream().key_value(self.bucket)
        except Exception as e:
            self._logger.exception(
                f"Failed to connect to handoff bucket '{self.bucket}'",
                exc_info=e,
                **log_ctx.with_error(e).to_dict(),
            )
            await self.disconnect()
            raise HandoffStoreError(
                f"Failed to connect to handoff bucket '{self.bucket}': {e}",
                operation="connect",
            ) from e
        self._logger.info(f"Connected to handoff bucket: {self.bucket}", **log_ctx.to_dict())

    async def disconnect(self) -> None:
        """Disconnect from NATS."""
        self._kv = None
        if self._nc is not None and self._nc.is_connected:
            await self._nc.close()
        self._nc = None

    async def is_connected(self) -> bool:
        """Check if bound to the bucket."""
        return self._kv is not None

    async def get_data(self, key: str) -> bytes | None:
        """Get a blob by key."""
        if self._kv is None:
            raise HandoffStoreNotConnectedError("get_data")

        if not _VALID_KEY.match(key):
            self._logger.debug(f"Key '{key}' is not a valid KV key", lookup_key=key)
            return None
        try:
            entry = await self._kv.get(key)
        except KeyNotFoundError:
            return None
        return entry.value or None

    async def get_strings(self, key: str) -> list[str] | None:
        """Get a string sequence by key."""
        data = await self.get_data(key)
        if data is None:
            return None
        strings = self._decoder.decode_strings(data)
        if strings is None:
            self._logger.debug(f"Value under '{key}' is not a string sequence", lookup_key=key)
        return strings
