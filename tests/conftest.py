"""Pytest configuration and shared fixtures."""

import tempfile
from pathlib import Path

import pytest

from connector_package.models.meta_config import MetaConfig

EXAMPLES_DIR = Path(__file__).parent.parent / "examples" / "connectors"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def connectors_dir():
    """Directory holding the example connector configs."""
    return EXAMPLES_DIR


@pytest.fixture
def kafka_sink_meta():
    """Minimal metadata for a destination connector."""
    return MetaConfig(
        name="kafka-out",
        type="kafka-sink",
        topic="poc1",
        version="latest",
    )


@pytest.fixture
def mqtt_meta_dict():
    """Metadata mapping as it appears in a decoded YAML document."""
    return {
        "name": "my-test-mqtt",
        "type": "mqtt-source",
        "topic": "my-mqtt",
        "version": "0.1.0",
    }
