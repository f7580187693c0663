"""
Unit tests for configuration module.
"""

import pytest
from pathlib import Path
import tempfile
import yaml

from file_manager.config.settings import (
    Config,
    ScanConfig,
    OrganizationConfig,
    LogConfig,
)
from file_manager.utils.exceptions import ConfigurationError, ErrorCode


class TestScanConfig:
    """Tests for ScanConfig."""

    def test_default_values(self):
        """Test default configuration values."""
        config = ScanConfig()

        assert config.default_directory == Path("test_files")
        assert config.skip_unreadable is False

    def test_from_dict(self):
        """Test creation from dictionary."""
        config = ScanConfig.from_dict({"default_directory": "/srv/inbox", "skip_unreadable": True})

        assert config.default_directory == Path("/srv/inbox")
        assert config.skip_unreadable is True

    def test_rejects_non_boolean(self):
        """Test booleans must be booleans."""
        with pytest.raises(ConfigurationError) as exc_info:
            ScanConfig.from_dict({"skip_unreadable": "sometimes"})

        assert exc_info.value.details["config_key"] == "scan.skip_unreadable"


class TestOrganizationConfig:
    """Tests for OrganizationConfig."""

    def test_default_values(self):
        config = OrganizationConfig()

        assert config.base_directory is None
        assert config.rescan_after_organize is True

    def test_from_dict(self):
        config = OrganizationConfig.from_dict({"base_directory": "/srv/sorted"})

        assert config.base_directory == Path("/srv/sorted")
        assert config.rescan_after_organize is True


class TestLogConfig:
    """Tests for LogConfig."""

    def test_default_values(self):
        config = LogConfig()

        assert config.activity_log_file == Path("file_manager.log")
        assert config.level == "WARNING"

    def test_level_normalized(self):
        assert LogConfig.from_dict({"level": "debug"}).level == "DEBUG"

    def test_unknown_level(self):
        """Test invalid level raises ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            LogConfig.from_dict({"level": "LOUD"})

        assert exc_info.value.error_code == ErrorCode.CONFIGURATION_ERROR


class TestConfig:
    """Tests for main Config class."""

    def test_default_config(self):
        """Test default configuration."""
        config = Config()

        assert isinstance(config.scan, ScanConfig)
        assert isinstance(config.organization, OrganizationConfig)
        assert isinstance(config.logging, LogConfig)

    def test_load_from_file(self):
        """Test loading configuration from YAML file."""
        with tempfile.TemporaryDirectory() as directory:
            path = Path(directory) / "config.yaml"
            path.write_text(yaml.dump({
                "scan": {"skip_unreadable": True},
                "logging": {"activity_log_file": "/var/log/fm.log"},
            }))

            config = Config.load(path)

        assert config.scan.skip_unreadable is True
        assert config.logging.activity_log_file == Path("/var/log/fm.log")
        assert config.organization.rescan_after_organize is True

    def test_load_missing_file(self):
        """Test loading from non-existent file returns defaults."""
        config = Config.load(Path("/nonexistent/config.yaml"))

        assert config.scan.default_directory == Path("test_files")

    def test_load_invalid_yaml(self):
        """Test broken YAML raises ConfigurationError."""
        with tempfile.TemporaryDirectory() as directory:
            path = Path(directory) / "config.yaml"
            path.write_text("scan: [unclosed")

            with pytest.raises(ConfigurationError) as exc_info:
                Config.load(path)

        assert isinstance(exc_info.value.cause, yaml.YAMLError)

    def test_load_non_mapping(self):
        """Test a YAML list at top level is rejected."""
        with tempfile.TemporaryDirectory() as directory:
            path = Path(directory) / "config.yaml"
            path.write_text("- a\n- b\n")

            with pytest.raises(ConfigurationError):
                Config.load(path)

    def test_save_and_load(self):
        """Test a saved configuration loads back unchanged."""
        config = Config(
            scan=ScanConfig(default_directory=Path("/srv/in"), skip_unreadable=True),
            organization=OrganizationConfig(base_directory=Path("/srv/out")),
        )
        with tempfile.TemporaryDirectory() as directory:
            path = Path(directory) / "config.yaml"
            config.save(path)

            assert Config.load(path) == config

    def test_empty_values_keep_defaults(self):
        """Test keys present without a value fall back to defaults."""
        with tempfile.TemporaryDirectory() as directory:
            path = Path(directory) / "config.yaml"
            path.write_text(
                "scan:\n  default_directory:\n"
                "organization:\n  base_directory:\n"
                "logging:\n  activity_log_file:\n  level:\n"
            )

            config = Config.load(path)

        assert config.scan.default_directory == Path("test_files")
        assert config.organization.base_directory is None
        assert config.logging.activity_log_file == Path("file_manager.log")
        assert config.logging.level == "WARNING"

    def test_empty_section(self):
        """Test a section with no body behaves like a missing one."""
        with tempfile.TemporaryDirectory() as directory:
            path = Path(directory) / "config.yaml"
            path.write_text("scan:\nlogging:\n")

            assert Config.load(path) == Config()

    def test_section_must_be_mapping(self):
        """Test a scalar or list section raises ConfigurationError."""
        with tempfile.TemporaryDirectory() as directory:
            path = Path(directory) / "config.yaml"
            path.write_text("logging: verbose\n")

            with pytest.raises(ConfigurationError) as exc_info:
                Config.load(path)

        assert exc_info.value.details["config_key"] == "logging"
