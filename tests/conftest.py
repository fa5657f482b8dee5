"""
Pytest configuration and shared fixtures for the collectd_docker test suite.

This module provides a fake runtime client and container metadata
builders used across test modules.
"""

import queue
import shutil
import sys
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from collectd_docker.collectors.base import AbstractRuntimeClient  # noqa: E402
from collectd_docker.models.container import ContainerMetadata  # noqa: E402


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


# ============================================================================
# Fake runtime client
# ============================================================================


class FakeRuntimeClient(AbstractRuntimeClient):
    """
    In-memory runtime client.

    ``containers`` maps container IDs to metadata; ``snapshots`` is pushed
    by ``stats``. Set ``inspect_error`` or ``stream_error`` to make the
    corresponding call fail (the stream error is raised after all
    snapshots have been pushed).
    """

    def __init__(
        self,
        containers: Optional[Dict[str, ContainerMetadata]] = None,
        snapshots: Iterable[Any] = (),
        inspect_error: Optional[Exception] = None,
        stream_error: Optional[Exception] = None,
    ):
        self.containers = containers or {}
        self.snapshots = list(snapshots)
        self.inspect_error = inspect_error
        self.stream_error = stream_error
        self.inspected: List[str] = []
        self.streamed: List[str] = []

    def inspect_container(self, container_id: str) -> ContainerMetadata:
        self.inspected.append(container_id)
        if self.inspect_error is not None:
            raise self.inspect_error
        return self.containers[container_id]

    def stats(self, container_id: str, sink: "queue.Queue[Any]", stream: bool = True) -> None:
        self.streamed.append(container_id)
        for snapshot in self.snapshots:
            sink.put(snapshot)
        if self.stream_error is not None:
            raise self.stream_error


def make_container(
    labels: Optional[Dict[str, str]] = None,
    env: Iterable[str] = (),
    container_id: str = "c0ffee" * 10 + "beef",
    name: str = "/test",
) -> ContainerMetadata:
    """Build container metadata for tests."""
    return ContainerMetadata(id=container_id, name=name, labels=labels or {}, env=tuple(env))


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def container_factory():
    """Provide the container metadata builder."""
    return make_container


@pytest.fixture
def fake_client_factory():
    """Provide a factory for fake runtime clients serving one container."""

    def factory(container: ContainerMetadata, **kwargs) -> FakeRuntimeClient:
        return FakeRuntimeClient(containers={container.id: container}, **kwargs)

    return factory


@pytest.fixture
def output_queue():
    """Unbounded output queue for tagged snapshots."""
    return queue.Queue()


def drain(q: "queue.Queue[Any]") -> List[Any]:
    """Return everything currently in a queue."""
    items = []
    while True:
        try:
            items.append(q.get_nowait())
        except queue.Empty:
            return items


@pytest.fixture(name="drain")
def drain_fixture():
    """Provide the queue draining helper."""
    return drain


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "identity": {
            "app_label": "com.example.app",
            "app_env_key": "APP_NAME",
            "task_label": "com.example.task",
            "task_env_key": "TASK_NAME",
        },
        "sampling": {
            "interval": 5,
            "shutdown_timeout": 2.5,
        },
    }


@pytest.fixture
def config_file(temp_dir, sample_config_data):
    """Write the sample configuration to a temporary TOML file."""
    import toml

    config_path = temp_dir / "collectd_docker.toml"
    with open(config_path, "w") as f:
        toml.dump(sample_config_data, f)
    return config_path
