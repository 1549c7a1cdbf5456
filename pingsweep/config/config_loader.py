"""
Configuration loader for the ping sweep.
Handles loading and validation of the YAML configuration file with fallback to defaults.
"""

import yaml
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

from ..utils.logger import Logger, get_logger

DEFAULT_CONFIG_FILE = "sweep_config.yml"


@dataclass
class SweepConfig:
    """Configuration for a sweep."""
    timeout: int = 1
    max_workers: int = 64
    resolve_timeout: float = 2.0
    probe_slack: int = 2
    resolve_names: bool = True
    color: bool = True


class ConfigLoader:
    """
    Loads and validates the YAML sweep configuration.
    Falls back to defaults when the file is missing or invalid.
    """

    def __init__(self, config_dir: Optional[str] = None, logger: Optional[Logger] = None):
        """
        Initialize ConfigLoader.

        Args:
            config_dir: Directory containing configuration files.
                       Defaults to the config directory relative to this file.
            logger: Logger instance for warnings
        """
        if config_dir is None:
            self.config_dir = Path(__file__).parent
        else:
            self.config_dir = Path(config_dir)

        self.logger = logger or get_logger(__name__)

    def load_sweep_config(self, config_file: str = DEFAULT_CONFIG_FILE) -> SweepConfig:
        """
        Load sweep configuration from YAML file.

        Args:
            config_file: Name of the configuration file

        Returns:
            SweepConfig object with loaded or default configuration
        """
        config_path = self.config_dir / config_file
        defaults = SweepConfig()

        if not config_path.exists():
            self.logger.warning(f"Sweep config file not found at {config_path}. Using default configuration.")
            return defaults

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            self.logger.error(f"Error parsing sweep config file {config_path}: {e}")
            self.logger.warning("Using default sweep configuration.")
            return defaults
        except OSError as e:
            self.logger.error(f"Cannot read sweep config file {config_path}: {e}")
            self.logger.warning("Using default sweep configuration.")
            return defaults

        if not isinstance(config_data, dict) or not isinstance(config_data.get('sweep'), dict):
            self.logger.warning(f"Invalid sweep config structure in {config_path}. Using default configuration.")
            return defaults

        sweep_data = config_data['sweep']

        return SweepConfig(
            timeout=self._validate_positive_int(sweep_data.get('timeout', defaults.timeout), 'timeout', defaults.timeout),
            max_workers=self._validate_positive_int(sweep_data.get('max_workers', defaults.max_workers), 'max_workers', defaults.max_workers),
            resolve_timeout=self._validate_positive_float(sweep_data.get('resolve_timeout', defaults.resolve_timeout), 'resolve_timeout', defaults.resolve_timeout),
            probe_slack=self._validate_non_negative_int(sweep_data.get('probe_slack', defaults.probe_slack), 'probe_slack', defaults.probe_slack),
            resolve_names=self._validate_bool(sweep_data.get('resolve_names', defaults.resolve_names), 'resolve_names', defaults.resolve_names),
            color=self._validate_bool(sweep_data.get('color', defaults.color), 'color', defaults.color),
        )

    def _validate_positive_int(self, value: Any, field_name: str, default: int) -> int:
        """
        Validate that a value is a positive integer.

        Args:
            value: Value to validate
            field_name: Name of the field for error messages
            default: Default value to use if validation fails

        Returns:
            Validated integer value or default
        """
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            self.logger.warning(f"Invalid {field_name} value: {value}. Must be positive integer. Using default: {default}")
            return default
        return value

    def _validate_non_negative_int(self, value: Any, field_name: str, default: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            self.logger.warning(f"Invalid {field_name} value: {value}. Must be non-negative integer. Using default: {default}")
            return default
        return value

    def _validate_positive_float(self, value: Any, field_name: str, default: float) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            self.logger.warning(f"Invalid {field_name} value: {value}. Must be positive number. Using default: {default}")
            return default
        return float(value)

    def _validate_bool(self, value: Any, field_name: str, default: bool) -> bool:
        if not isinstance(value, bool):
            self.logger.warning(f"Invalid {field_name} value: {value}. Must be true or false. Using default: {default}")
            return default
        return value

    def create_default_config(self, config_file: str = DEFAULT_CONFIG_FILE) -> None:
        """
        Create the default configuration file if it doesn't exist.
        """
        config_path = self.config_dir / config_file
        if config_path.exists():
            return

        default_config = {'sweep': asdict(SweepConfig())}

        try:
            with open(config_path, 'w', encoding='utf-8') as f:
                yaml.dump(default_config, f, default_flow_style=False, indent=2)
            self.logger.info(f"Created default sweep config at {config_path}")
        except OSError as e:
            self.logger.error(f"Failed to create default sweep config: {e}")
