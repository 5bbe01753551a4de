"""Tests for runtime wiring."""

import pytest

from share_intake.infrastructure.bootstrap import build_runtime
from share_intake.infrastructure.config import ShareIntakeConfig
from share_intake.infrastructure.in_memory_handoff_store import InMemoryHandoffStore
from share_intake.infrastructure.simple_logger import SimpleLogger


class TestBuildRuntime:
    """Test cases for build_runtime."""

    def test_components_share_state_and_feeds(self, runtime):
        """Test that every component sees the same state and feeds."""
        assert runtime.controller.state is runtime.state
        assert runtime.controller.dispatch is runtime.dispatch

    def test_separate_runtimes_are_isolated(self, handoff_store, config, mock_logger):
        """Test that no state is shared between runtimes."""
        first = build_runtime(handoff_store, config=config, logger=mock_logger)
        second = build_runtime(handoff_store, config=config, logger=mock_logger)

        assert first.state is not second.state
        assert first.dispatch is not second.dispatch

    def test_config_from_environment(self, monkeypatch):
        """Test that configuration defaults to the environment."""
        monkeypatch.setenv("SHARE_INTAKE_APP_GROUP", "group.env.app")
        monkeypatch.setenv("SHARE_INTAKE_LOG_LEVEL", "debug")

        runtime = build_runtime(InMemoryHandoffStore())

        assert runtime.config.bucket == "group_env_app"
        assert runtime.config.log_level == "DEBUG"

    @pytest.mark.asyncio
    async def test_without_asset_store(self, mock_logger):
        """Test that identifier references are dropped without an asset store."""
        store = InMemoryHandoffStore.from_mapping(
            {
                "k": [
                    {"path": "ASSET-1/L0/001", "realname": "a", "type": 0},
                    {"path": "file:///tmp/b.jpg", "realname": "b", "type": 0},
                ]
            }
        )
        runtime = build_runtime(store, config=ShareIntakeConfig(), logger=mock_logger)

        await runtime.controller.handle("app://dataUrl=k#media", is_initial_event=True)

        assert [i.path for i in runtime.state.latest_media] == ["/tmp/b.jpg"]

    def test_default_logger(self, handoff_store, config):
        """Test that a component logger is created when none is given."""
        runtime = build_runtime(handoff_store, config=config)

        assert isinstance(runtime.controller._logger, SimpleLogger)
