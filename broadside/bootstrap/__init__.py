"""
broadside Bootstrap

Configuration and logging setup.
"""

from broadside.bootstrap.config import (
    BroadsideConfig,
    DeckEngineCoupling,
    LoggingConfig,
    ModelConfig,
    get_config,
    load_config,
    set_config,
)
from broadside.bootstrap.log_setup import setup_logging

__all__ = [
    "BroadsideConfig",
    "DeckEngineCoupling",
    "LoggingConfig",
    "ModelConfig",
    "get_config",
    "load_config",
    "set_config",
    "setup_logging",
]
