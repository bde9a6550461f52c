"""Tests for connector config loading and writing."""

import logging

import pytest
import yaml

from connector_package.core.exceptions import ConfigDecodeError, SecretNameError
from connector_package.models.connector_config import (
    ConnectorConfig,
    ConnectorConfigV0_0_0,
    ConnectorConfigV0_1_0,
)
from connector_package.models.loader import (
    config_from_str,
    from_file,
    from_value,
    load_config,
    to_yaml,
    write_to_file,
)

TAGGED_YAML = """
apiVersion: 0.1.0
meta:
    name: kafka-out
    topic: poc1
    type: kafka-sink
    version: latest
"""

UNTAGGED_YAML = """
meta:
    name: kafka-out
    topic: poc1
    type: kafka-sink
    version: latest
"""


class TestConfigFromStr:
    """Tests for config_from_str."""

    def test_tagged(self):
        """Test parsing a tagged document."""
        config = config_from_str(TAGGED_YAML)
        assert isinstance(config, ConnectorConfigV0_1_0)
        assert config.meta.type == "kafka-sink"

    def test_untagged(self):
        """Test parsing an untagged document."""
        config = config_from_str(UNTAGGED_YAML)
        assert isinstance(config, ConnectorConfigV0_0_0)
        assert config.meta.version == "latest"

    def test_classmethod(self):
        """Test the ConnectorConfig shortcut."""
        assert ConnectorConfig.config_from_str(TAGGED_YAML) == config_from_str(TAGGED_YAML)

    def test_invalid_yaml(self):
        """Test YAML syntax errors are decode errors."""
        with pytest.raises(ConfigDecodeError) as exc_info:
            config_from_str("meta: [unclosed")
        assert "Invalid YAML" in str(exc_info.value)

    def test_empty_document(self):
        """Test an empty document is rejected."""
        with pytest.raises(ConfigDecodeError):
            config_from_str("")

    def test_byte_size_units(self):
        """Test integer and unit-string byte sizes."""
        config = config_from_str(
            """
            apiVersion: 0.1.0
            meta:
              version: 0.1.0
              name: my-test-mqtt
              type: mqtt-source
              topic: my-mqtt
              consumer:
                max_bytes: 1400
              producer:
                batch-size: 44mb
            """
        )
        assert config.meta.consumer.max_bytes == 1400
        assert config.meta.producer.batch_size == 44_000_000

    def test_secret_with_space(self):
        """Test secret name errors surface from text parsing."""
        with pytest.raises(SecretNameError) as exc_info:
            config_from_str(TAGGED_YAML + "    secrets:\n      - name: secret name\n")
        assert "secret name" in str(exc_info.value)

    def test_logs_config_at_debug(self, caplog):
        """Test the parsed config is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="connector_package"):
            config_from_str(TAGGED_YAML)
        assert any("Using connector config" in r.getMessage() for r in caplog.records)
        assert caplog.records[-1].connector_name == "kafka-out"


class TestFromValue:
    """Tests for from_value."""

    def test_decoded_tree(self):
        """Test a tree from another channel decodes like text."""
        assert from_value(yaml.safe_load(TAGGED_YAML)) == config_from_str(TAGGED_YAML)


class TestFiles:
    """Tests for reading and writing files."""

    def test_missing_file(self, temp_dir):
        """Test I/O errors propagate unchanged."""
        with pytest.raises(FileNotFoundError):
            from_file(temp_dir / "missing.yaml")

    def test_directory(self, temp_dir):
        """Test reading a directory is an OS error, not a decode error."""
        with pytest.raises(OSError):
            from_file(temp_dir)

    def test_not_utf8(self, temp_dir):
        """Test undecodable files raise UnicodeDecodeError."""
        path = temp_dir / "latin1.yaml"
        path.write_bytes(b"meta:\n  name: caf\xe9\n")
        with pytest.raises(UnicodeDecodeError):
            from_file(path)

    def test_write_and_read(self, temp_dir):
        """Test a written config reads back equal."""
        config = config_from_str(TAGGED_YAML)
        path = temp_dir / "connector.yaml"
        write_to_file(config, path)
        assert load_config(path) == config
        assert ConnectorConfig.from_file(str(path)) == config

    def test_write_method(self, temp_dir):
        """Test the ConnectorConfig write shortcut."""
        config = config_from_str(UNTAGGED_YAML)
        path = temp_dir / "connector.yaml"
        config.write_to_file(path)
        assert path.read_text(encoding="utf-8").startswith("apiVersion: 0.0.0\n")
        assert from_file(path) == config

    def test_write_overwrites(self, temp_dir):
        """Test writing replaces existing content."""
        path = temp_dir / "connector.yaml"
        path.write_text("garbage: true\n" * 100, encoding="utf-8")
        write_to_file(config_from_str(TAGGED_YAML), path)
        assert "garbage" not in path.read_text(encoding="utf-8")


class TestToYaml:
    """Tests for to_yaml."""

    def test_tagged_output(self):
        """Test the emitted document layout."""
        assert to_yaml(config_from_str(UNTAGGED_YAML)) == (
            "apiVersion: 0.0.0\n"
            "meta:\n"
            "  name: kafka-out\n"
            "  type: kafka-sink\n"
            "  topic: poc1\n"
            "  version: latest\n"
        )

    def test_round_trip(self):
        """Test parse(serialize(config)) == config."""
        config = config_from_str(
            TAGGED_YAML
            + "    producer:\n"
            + "      linger: 1h 30m\n"
            + "      compression: lz4\n"
            + "      batch_size: 1600\n"
            + "    secrets:\n"
            + "      - name: TOKEN\n"
            + "transforms:\n"
            + "  - uses: infinyon/jolt\n"
            + "    with:\n"
            + "      spec:\n"
            + "        - operation: shift\n"
        )
        text = config.to_yaml()
        assert "batch-size: 1600" in text
        assert "linger: 1h 30m" in text
        assert config_from_str(text) == config
