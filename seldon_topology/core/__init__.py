"""Core configuration, logging, and errors."""

from seldon_topology.core.config import Settings, get_settings
from seldon_topology.core.errors import (
    DuplicateUnitNameError,
    InvalidNamingConfigError,
    InvalidParameterValueError,
    TopologyError,
)
from seldon_topology.core.logging import JsonFormatter, configure_logging, structured_log

__all__ = [
    "Settings",
    "get_settings",
    "TopologyError",
    "DuplicateUnitNameError",
    "InvalidParameterValueError",
    "InvalidNamingConfigError",
    "configure_logging",
    "structured_log",
    "JsonFormatter",
]
