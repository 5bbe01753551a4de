"""Intake controller - the share URL state machine.

Turns an incoming URL into retained state and a feed update:
classify the URL, read and decode the handoff payload, resolve each
item's reference, record latest (and initial) state, then push the
encoded latest value to the matching feed.
"""

from ..domain.enums import ContentClass
from ..domain.exceptions import PayloadDecodeError
from ..domain.models import SharedItem, ShareState
from ..domain.value_objects import ShareUrl
from ..infrastructure.config import LogContext
from ..infrastructure.serialization import PayloadDecoder
from ..ports.handoff_store import HandoffStorePort
from ..ports.logger import LoggerPort
from .dispatch import DispatchHub
from .reference_resolver import ReferenceResolver


class IntakeController:
    """Application service owning the retained share state.

    URL events are delivered one at a time by the host; ``handle`` is
    not re-entrant with itself. Queries and reset may run concurrently
    from other contexts and are serialized by ``ShareState``.
    """

    def __init__(
        self,
        state: ShareState,
        handoff_store: HandoffStorePort,
        resolver: ReferenceResolver,
        dispatch: DispatchHub,
        logger: LoggerPort,
        decoder: PayloadDecoder | None = None,
    ):
        """Initialize the controller with its collaborators."""
        self._state = state
        self._store = handoff_store
        self._resolver = resolver
        self._dispatch = dispatch
        self._logger = logger
        self._decoder = decoder or PayloadDecoder()

    @property
    def state(self) -> ShareState:
        return self._state

    @property
    def dispatch(self) -> DispatchHub:
        return self._dispatch

    @property
    def decoder(self) -> PayloadDecoder:
        return self._decoder

    async def handle(self, url: str | None, is_initial_event: bool) -> bool:
        """Process one URL event.

        Args:
            url: The URL received, or None when no URL came with the event
            is_initial_event: Whether this event is part of the launch

        Returns:
            True if a URL was present, whatever its content

        Raises:
            PayloadDecodeError: If a media or file payload cannot be decoded;
                no state has been changed in that case
        """
        if url is None:
            self._state.clear_latest()
            self._logger.debug("No URL received, latest state cleared")
            return False

        share_url = ShareUrl.parse(url)
        log_ctx = LogContext(
            operation="handle",
            component="IntakeController",
            content_class=share_url.content_class.value,
            lookup_key=share_url.lookup_key,
            initial=is_initial_event,
        )
        self._logger.debug("Handling share URL", **log_ctx.to_dict())

        if share_url.is_item_set:
            items = await self._load_items(share_url)
            if items is not None:
                self._publish_media(items, is_initial_event)
                self._logger.info(f"Received {len(items)} shared item(s)", **log_ctx.to_dict())
        elif share_url.content_class is ContentClass.TEXT:
            text = await self._load_text(share_url)
            if text is not None:
                self._publish_text(text, is_initial_event)
                self._logger.info("Received shared text", **log_ctx.to_dict())
        else:
            self._publish_text(share_url.raw, is_initial_event)
            self._logger.info("Received URL as shared text", **log_ctx.to_dict())

        return True

    def reset(self) -> None:
        """Clear all retained state."""
        self._state.reset()
        self._logger.debug("Share state reset")

    async def _load_items(self, share_url: ShareUrl) -> list[SharedItem] | None:
        if share_url.lookup_key is None:
            return None
        blob = await self._store.get_data(share_url.lookup_key)
        if blob is None:
            self._logger.debug(
                f"No payload under '{share_url.lookup_key}'", lookup_key=share_url.lookup_key
            )
            return None

        try:
            decoded = self._decoder.decode(blob)
        except PayloadDecodeError as e:
            if e.lookup_key is None:
                e.lookup_key = share_url.lookup_key
                e.details["lookup_key"] = share_url.lookup_key
            raise

        resolved: list[SharedItem] = []
        for item in decoded:
            path = await self._resolver.resolve(item.path)
            if not path:
                self._logger.debug("Dropping item with unresolved reference", reference=item.path)
                continue
            if share_url.content_class is ContentClass.FILE:
                resolved.append(item.as_file(path))
                continue
            thumbnail = None
            if item.is_video and item.thumbnail_path is not None:
                thumbnail = await self._resolver.resolve(item.thumbnail_path)
            resolved.append(item.with_paths(path, thumbnail))
        return resolved

    async def _load_text(self, share_url: ShareUrl) -> str | None:
        if share_url.lookup_key is None:
            return None
        strings = await self._store.get_strings(share_url.lookup_key)
        if strings is None:
            self._logger.debug(
                f"No text under '{share_url.lookup_key}'", lookup_key=share_url.lookup_key
            )
            return None
        return ",".join(strings)

    def _publish_media(self, items: list[SharedItem], initial: bool) -> None:
        latest = self._state.record_media(items, initial)
        self._dispatch.media.push(self._decoder.encode(latest))

    def _publish_text(self, text: str, initial: bool) -> None:
        latest = self._state.record_text(text, initial)
        self._dispatch.text.push(latest)
