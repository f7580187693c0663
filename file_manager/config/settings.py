"""
Configuration Management System
===============================

Provides dataclass-based configuration with YAML file loading support.
All settings are validated and have sensible defaults.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Any, Dict

import yaml

from file_manager.utils.exceptions import ConfigurationError
from file_manager.utils.logging_config import get_logger

logger = get_logger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _as_bool(value: Any, key: str) -> bool:
    """Accept real booleans only, YAML already converts yes/no/true/false."""
    if isinstance(value, bool):
        return value
    raise ConfigurationError(
        f"Expected a boolean for '{key}', got {value!r}",
        config_key=key,
        expected_type="bool"
    )


def _as_path(value: Any, default: Path) -> Path:
    """An empty YAML value (``key:``) keeps the default."""
    if value is None or value == "":
        return default
    return Path(value).expanduser()


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(
            f"Section '{name}' must be a mapping, got {type(value).__name__}",
            config_key=name,
            expected_type="mapping"
        )
    return value


@dataclass
class ScanConfig:
    """Directory scanning configuration.

    Attributes:
        default_directory: Directory scanned when none is given on the
            command line. Created on start if missing.
        skip_unreadable: Drop files whose metadata cannot be read instead of
            keeping an empty placeholder record for them.
    """
    default_directory: Path = field(default_factory=lambda: Path("test_files"))
    skip_unreadable: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScanConfig":
        """Create ScanConfig from dictionary."""
        if not data:
            return cls()
        defaults = cls()
        return cls(
            default_directory=_as_path(
                data.get("default_directory"), defaults.default_directory
            ),
            skip_unreadable=_as_bool(
                data.get("skip_unreadable", defaults.skip_unreadable), "scan.skip_unreadable"
            ),
        )


@dataclass
class OrganizationConfig:
    """File organization settings.

    Attributes:
        base_directory: Where category folders are created. ``None`` means
            inside the scanned directory.
        rescan_after_organize: Refresh the file list after moving files.
    """
    base_directory: Optional[Path] = None
    rescan_after_organize: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrganizationConfig":
        """Create OrganizationConfig from dictionary."""
        if not data:
            return cls()
        base_dir = data.get("base_directory")
        return cls(
            base_directory=Path(base_dir).expanduser() if base_dir else None,
            rescan_after_organize=_as_bool(
                data.get("rescan_after_organize", cls.rescan_after_organize),
                "organization.rescan_after_organize"
            ),
        )


@dataclass
class LogConfig:
    """Logging settings.

    Attributes:
        activity_log_file: Append-only activity log location.
        level: Level for diagnostic console logging.
        console_output: Whether diagnostic logging goes to the console.
    """
    activity_log_file: Path = field(default_factory=lambda: Path("file_manager.log"))
    level: str = "WARNING"
    console_output: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogConfig":
        """Create LogConfig from dictionary."""
        if not data:
            return cls()
        defaults = cls()
        level = str(data.get("level") or defaults.level).upper()
        if level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {level}",
                config_key="logging.level",
                expected_type=" | ".join(VALID_LOG_LEVELS)
            )
        return cls(
            activity_log_file=_as_path(
                data.get("activity_log_file"), defaults.activity_log_file
            ),
            level=level,
            console_output=_as_bool(
                data.get("console_output", defaults.console_output), "logging.console_output"
            ),
        )


@dataclass
class Config:
    """Main configuration container.

    Aggregates all configuration sections and provides loading from YAML.
    """
    scan: ScanConfig = field(default_factory=ScanConfig)
    organization: OrganizationConfig = field(default_factory=OrganizationConfig)
    logging: LogConfig = field(default_factory=LogConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """Load configuration from YAML file.

        Args:
            config_path: Path to the configuration file. If None, looks for
                        config.yaml in the current directory.

        Returns:
            Config instance with loaded settings.

        Raises:
            ConfigurationError: If the file is not valid YAML or holds
                invalid values.
        """
        if config_path is None:
            config_path = Path("config.yaml")
        config_path = Path(config_path)

        if not config_path.exists():
            logger.info(f"Config file not found at {config_path}, using defaults")
            return cls()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse config file: {e}")
            raise ConfigurationError(
                f"Invalid YAML in {config_path}", cause=e
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Top level of {config_path} must be a mapping",
                expected_type="mapping"
            )

        logger.info(f"Loaded configuration from {config_path}")
        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        return cls(
            scan=ScanConfig.from_dict(_section(data, "scan")),
            organization=OrganizationConfig.from_dict(_section(data, "organization")),
            logging=LogConfig.from_dict(_section(data, "logging")),
        )

    def save(self, config_path: Path) -> None:
        """Save configuration to YAML file.

        Args:
            config_path: Path where to save the configuration.
        """
        base_dir = self.organization.base_directory
        data = {
            "scan": {
                "default_directory": str(self.scan.default_directory),
                "skip_unreadable": self.scan.skip_unreadable,
            },
            "organization": {
                "base_directory": str(base_dir) if base_dir else None,
                "rescan_after_organize": self.organization.rescan_after_organize,
            },
            "logging": {
                "activity_log_file": str(self.logging.activity_log_file),
                "level": self.logging.level,
                "console_output": self.logging.console_output,
            },
        }

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

        logger.info(f"Saved configuration to {config_path}")
