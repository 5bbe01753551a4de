"""Bootstrap module wiring a share intake runtime.

The retained state, feeds and controller are created once here and
handed to each other explicitly; nothing is kept in module globals.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..application.dispatch import DispatchHub
from ..application.intake_controller import IntakeController
from ..application.launch_handler import ShareIntentHost
from ..application.query_surface import ShareQueryService
from ..application.reference_resolver import ReferenceResolver
from ..domain.models import ShareState
from ..ports.asset_store import AssetStorePort
from ..ports.handoff_store import HandoffStorePort
from ..ports.logger import LoggerPort
from .config import ShareIntakeConfig
from .serialization import PayloadDecoder
from .simple_logger import component_logger


@dataclass(frozen=True)
class ShareIntakeRuntime:
    """The wired components of one share intake process."""

    config: ShareIntakeConfig
    state: ShareState
    dispatch: DispatchHub
    controller: IntakeController
    host: ShareIntentHost
    queries: ShareQueryService


def build_runtime(
    handoff_store: HandoffStorePort,
    asset_store: AssetStorePort | None = None,
    config: ShareIntakeConfig | None = None,
    logger: LoggerPort | None = None,
) -> ShareIntakeRuntime:
    """Create and wire every component around the given stores.

    Args:
        handoff_store: Store the share producer writes to
        asset_store: Asset library for identifier references; None drops them
        config: Optional configuration. If not provided, read from the environment.
        logger: Optional logger shared by all components

    Returns:
        The wired runtime
    """
    config = config or ShareIntakeConfig.from_env()
    logger = logger or component_logger("intake", config.log_level)

    state = ShareState()
    dispatch = DispatchHub()
    resolver = ReferenceResolver(
        asset_store,
        config.local_path_prefixes,
        logger,
        timeout=config.resolve_timeout,
    )
    controller = IntakeController(
        state=state,
        handoff_store=handoff_store,
        resolver=resolver,
        dispatch=dispatch,
        logger=logger,
        decoder=PayloadDecoder(),
    )
    return ShareIntakeRuntime(
        config=config,
        state=state,
        dispatch=dispatch,
        controller=controller,
        host=ShareIntentHost(controller, logger),
        queries=ShareQueryService(controller),
    )
