"""Custom exceptions for topology validation and naming configuration."""

from typing import Any, Optional


class TopologyError(Exception):
    """Base exception for seldon_topology errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class DuplicateUnitNameError(TopologyError):
    """Raised by strict validation when a graph reuses predictive unit names."""

    def __init__(self, names: list[str]) -> None:
        super().__init__(
            f"Duplicate predictive unit names in graph: {', '.join(names)}",
            details={"duplicate_names": list(names)},
        )


class InvalidParameterValueError(TopologyError):
    """Raised when a parameter value cannot be converted to its declared type."""

    def __init__(self, name: str, value: str, declared_type: str) -> None:
        super().__init__(
            f"Parameter {name!r}: cannot convert {value!r} to {declared_type}",
            details={"parameter": name, "value": value, "type": declared_type},
        )


class InvalidNamingConfigError(TopologyError):
    """Raised when a naming table cannot produce names within its length limit."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message, details=details)
