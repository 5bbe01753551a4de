"""Pytest configuration and shared fixtures."""

import os
import time
from unittest.mock import MagicMock

import pytest

from fakes import FakeAssetStore
from share_intake.infrastructure.bootstrap import ShareIntakeRuntime, build_runtime
from share_intake.infrastructure.config import ShareIntakeConfig
from share_intake.infrastructure.in_memory_handoff_store import InMemoryHandoffStore


@pytest.fixture
def handoff_store():
    """Create an empty in-memory handoff store."""
    return InMemoryHandoffStore()


@pytest.fixture
def asset_store():
    """Create a fake asset store with two known assets."""
    return FakeAssetStore(
        {
            "ASSET-1/L0/001": "/var/mobile/Media/DCIM/100APPLE/IMG_0001.HEIC",
            "ASSET-2/L0/001": "/var/mobile/Media/DCIM/100APPLE/IMG_0002.MOV",
            "ASSET-NOFILE/L0/001": None,
        }
    )


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing."""
    mock = MagicMock()
    mock.info = MagicMock()
    mock.warning = MagicMock()
    mock.error = MagicMock()
    mock.debug = MagicMock()
    mock.exception = MagicMock()
    return mock


@pytest.fixture
def config():
    """Create a configuration with no timeout."""
    return ShareIntakeConfig(app_group="group.com.example.app")


@pytest.fixture
def runtime(handoff_store, asset_store, config, mock_logger) -> ShareIntakeRuntime:
    """Create a wired runtime over the in-memory store and fake asset store."""
    return build_runtime(handoff_store, asset_store=asset_store, config=config, logger=mock_logger)


@pytest.fixture
def deliveries(runtime):
    """Subscribe to both feeds and collect what they deliver."""
    received: dict[str, list[str | None]] = {"media": [], "text": []}
    runtime.dispatch.attach("media", received["media"].append)
    runtime.dispatch.attach("text", received["text"].append)
    return received


@pytest.fixture(scope="session")
def nats_container():
    """Start NATS container for integration tests."""
    if os.getenv("SKIP_INTEGRATION_TESTS", "").lower() == "true":
        pytest.skip("Integration tests disabled")

    # Use existing NATS if available
    if os.getenv("NATS_URL"):
        yield os.getenv("NATS_URL")
        return

    try:
        from testcontainers.nats import NatsContainer

        container = NatsContainer("nats:2.10-alpine")
        container.with_command("-js")
        container.start()
    except Exception as e:
        pytest.skip(f"NATS container unavailable: {e}")

    # Wait for NATS to be ready
    time.sleep(2)

    yield f"nats://{container.get_container_host_ip()}:{container.get_exposed_port(4222)}"

    container.stop()
