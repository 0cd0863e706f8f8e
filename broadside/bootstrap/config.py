"""
bootstrap/config.py - broadside configuration

Provides configuration loading from files, environment variables, and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional
from pathlib import Path
import os
import json
import logging

logger = logging.getLogger(__name__)


class DeckEngineCoupling(str, Enum):
    """How deck armor weight sees machinery weight."""
    PINNED = "pinned"            # Engine term fixed at the break point
    FIXED_POINT = "fixed_point"  # Iterate engine weight against deck armor


@dataclass
class ModelConfig:
    """Ship model evaluation settings."""

    deck_engine_coupling: DeckEngineCoupling = DeckEngineCoupling.PINNED
    fixed_point_max_iterations: int = 50
    fixed_point_tolerance: float = 1e-6

    # Raised-mount test for the second gun group
    corrected_group_superfire: bool = False
    # Frigate rank reads each broadside battery's own second group
    corrected_ship_type_below: bool = False
    # Pre-1900 strength derating by year rather than by whole century
    linear_pre_1900_derating: bool = True

    @classmethod
    def from_env(cls) -> "ModelConfig":
        return cls(
            deck_engine_coupling=DeckEngineCoupling(
                os.getenv("BROADSIDE_DECK_ENGINE_COUPLING", "pinned").lower()
            ),
            fixed_point_max_iterations=int(os.getenv("BROADSIDE_FIXED_POINT_MAX_ITER", "50")),
            fixed_point_tolerance=float(os.getenv("BROADSIDE_FIXED_POINT_TOL", "1e-6")),
            corrected_group_superfire=os.getenv(
                "BROADSIDE_CORRECTED_GROUP_SUPERFIRE", "false"
            ).lower() == "true",
            corrected_ship_type_below=os.getenv(
                "BROADSIDE_CORRECTED_SHIP_TYPE_BELOW", "false"
            ).lower() == "true",
            linear_pre_1900_derating=os.getenv(
                "BROADSIDE_LINEAR_PRE_1900_DERATING", "true"
            ).lower() == "true",
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("BROADSIDE_LOG_LEVEL", "INFO"),
            format=os.getenv("BROADSIDE_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            log_file=os.getenv("BROADSIDE_LOG_FILE"),
            json_logs=os.getenv("BROADSIDE_JSON_LOGS", "false").lower() == "true",
        )


@dataclass
class BroadsideConfig:
    """Root configuration for broadside."""

    environment: str = "development"
    debug: bool = False
    version: str = "0.3.0"

    model: ModelConfig = field(default_factory=ModelConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Additional settings
    settings: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "BroadsideConfig":
        """Create configuration from environment variables."""
        return cls(
            environment=os.getenv("BROADSIDE_ENVIRONMENT", "development"),
            debug=os.getenv("BROADSIDE_DEBUG", "false").lower() == "true",
            model=ModelConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "BroadsideConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "BroadsideConfig":
        """Create config from dictionary."""
        config = cls.from_env()

        # Override with file values
        if "environment" in data:
            config.environment = data["environment"]
        if "debug" in data:
            config.debug = data["debug"]

        if "model" in data:
            for key, value in data["model"].items():
                if key == "deck_engine_coupling":
                    value = DeckEngineCoupling(value)
                if hasattr(config.model, key):
                    setattr(config.model, key, value)

        if "logging" in data:
            for key, value in data["logging"].items():
                if hasattr(config.logging, key):
                    setattr(config.logging, key, value)

        if "settings" in data:
            config.settings.update(data["settings"])

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "version": self.version,
            "model": {
                "deck_engine_coupling": self.model.deck_engine_coupling.value,
                "fixed_point_max_iterations": self.model.fixed_point_max_iterations,
                "fixed_point_tolerance": self.model.fixed_point_tolerance,
                "corrected_group_superfire": self.model.corrected_group_superfire,
                "corrected_ship_type_below": self.model.corrected_ship_type_below,
                "linear_pre_1900_derating": self.model.linear_pre_1900_derating,
            },
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
        }


# Global config instance
_config: Optional[BroadsideConfig] = None


def load_config(filepath: str = None) -> BroadsideConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        BroadsideConfig instance
    """
    global _config

    if filepath:
        _config = BroadsideConfig.from_file(filepath)
    else:
        # Try default locations
        default_paths = [
            "./broadside.json",
            "./config/broadside.json",
            os.path.expanduser("~/.broadside/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = BroadsideConfig.from_file(path)
                return _config

        # Fall back to environment
        _config = BroadsideConfig.from_env()

    logger.info(f"Configuration loaded: environment={_config.environment}")
    return _config


def get_config() -> BroadsideConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Optional[BroadsideConfig]) -> None:
    """Replace the current configuration. None forces a reload on next use."""
    global _config
    _config = config
