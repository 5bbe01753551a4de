"""Query surface over the retained share state."""

from typing import Any

from ..domain.enums import QueryMethod
from ..domain.exceptions import MethodNotImplementedError
from .intake_controller import IntakeController


class ShareQueryService:
    """Exposes the initial capture and reset to an external caller.

    Media is returned in the same JSON encoding the media feed delivers.
    """

    def __init__(self, controller: IntakeController):
        self._controller = controller

    def get_initial_media(self) -> str | None:
        """Return the JSON-encoded initial media, or None if none was captured."""
        return self._controller.decoder.encode(self._controller.state.initial_media)

    def get_initial_text(self) -> str | None:
        """Return the initial text, or None if none was captured."""
        return self._controller.state.initial_text

    def reset(self) -> None:
        """Clear initial and latest state."""
        self._controller.reset()

    def handle_method_call(self, method: str) -> Any:
        """Dispatch a call by method name.

        Args:
            method: One of ``getInitialMedia``, ``getInitialText``, ``reset``

        Returns:
            The method's result; ``reset`` returns None

        Raises:
            MethodNotImplementedError: If the method name is unknown
        """
        try:
            query = QueryMethod(method)
        except ValueError as e:
            raise MethodNotImplementedError(method) from e

        if query is QueryMethod.GET_INITIAL_MEDIA:
            return self.get_initial_media()
        if query is QueryMethod.GET_INITIAL_TEXT:
            return self.get_initial_text()
        self.reset()
        return None
