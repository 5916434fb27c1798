"""Configuration management for the bt_string_utils command-line tools."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class Config:
    """CLI configuration with sensible defaults."""

    outputs_dir: Path = Path("outputs")
    default_num_groups: int = 2
    default_chunk_size: int = 1024
    default_random_length: int = 16
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> 'Config':
        """Load configuration from environment variables."""
        return cls(
            outputs_dir=Path(os.getenv('BT_STRINGS_OUTPUTS_DIR', 'outputs')),
            default_num_groups=_int_from_env('BT_STRINGS_DEFAULT_NUM_GROUPS', 2),
            default_chunk_size=_int_from_env('BT_STRINGS_DEFAULT_CHUNK_SIZE', 1024),
            default_random_length=_int_from_env('BT_STRINGS_DEFAULT_RANDOM_LENGTH', 16),
            log_level=os.getenv('BT_STRINGS_LOG_LEVEL', 'INFO'),
        )

    def validate(self) -> None:
        """Validate configuration values."""
        if self.default_num_groups <= 0:
            raise ConfigurationError("default_num_groups must be positive")

        if self.default_chunk_size <= 0:
            raise ConfigurationError("default_chunk_size must be positive")

        if self.default_random_length < 0:
            raise ConfigurationError("default_random_length must not be negative")

        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level.upper() not in valid_log_levels:
            raise ConfigurationError(
                f"Invalid log_level: {self.log_level}. Must be one of: {sorted(valid_log_levels)}"
            )

    def ensure_directories(self) -> None:
        """Create the outputs directory if it doesn't exist."""
        self.outputs_dir.mkdir(parents=True, exist_ok=True)


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
        _config.validate()
    return _config


def set_config(config: Config) -> None:
    """Set the global configuration instance."""
    global _config
    config.validate()
    _config = config


def reset_config() -> None:
    """Reset configuration to defaults (useful for testing)."""
    global _config
    _config = None
