"""Host adapter translating launch and open events into intake calls.

Launch events, and continued user activities such as universal links,
are initial events; URLs opened while running are not.
"""

from ..domain.exceptions import PayloadDecodeError
from ..domain.models import LaunchOptions, UserActivity
from ..infrastructure.config import LogContext
from ..ports.logger import LoggerPort
from .intake_controller import IntakeController


class ShareIntentHost:
    """Receives URL events from the host process.

    A payload that fails to decode ends the current event only: the
    failure is logged and the event still counts as handled.
    """

    def __init__(self, controller: IntakeController, logger: LoggerPort):
        self._controller = controller
        self._logger = logger

    async def did_finish_launching(self, options: LaunchOptions | None = None) -> bool:
        """Handle the URL or universal link the process was launched with.

        Returns:
            Whether a URL was handled; False when the launch carried none
        """
        if options is None:
            return False
        if options.url is not None:
            return await self._handle(options.url, is_initial_event=True)
        for activity in options.user_activities.values():
            if activity.webpage_url is not None:
                return await self._handle(activity.webpage_url, is_initial_event=True)
        return False

    async def open_url(self, url: str) -> bool:
        """Handle a URL opened while the process is running."""
        return await self._handle(url, is_initial_event=False)

    async def continue_user_activity(self, activity: UserActivity) -> bool:
        """Handle a continued user activity.

        An activity without a web page URL clears the latest state.
        """
        return await self._handle(activity.webpage_url, is_initial_event=True)

    async def _handle(self, url: str | None, is_initial_event: bool) -> bool:
        try:
            return await self._controller.handle(url, is_initial_event)
        except PayloadDecodeError as e:
            log_ctx = LogContext(
                operation="handle",
                component="ShareIntentHost",
                lookup_key=e.lookup_key,
                initial=is_initial_event,
            ).with_error(e)
            self._logger.exception(
                "Discarding undecodable share payload", exc_info=e, **log_ctx.to_dict()
            )
            return True
