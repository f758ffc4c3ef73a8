"""Structured JSON logging with deployment/predictor correlation fields."""

import json
import logging
import os
import re
import sys
from datetime import UTC, datetime
from typing import Any, Optional

from seldon_topology.core.config import get_settings

# Patterns to redact from log output
SECRET_PATTERNS = (
    re.compile(r"(oauth_key|oauth_secret|token|secret|password)\s*[:=]\s*['\"]?[\w-]{8,}['\"]?", re.I),
)

_SECRET_KEYS = ("oauth_key", "oauth_secret", "token", "secret", "password", "authorization")


def _redact(message: str) -> str:
    def repl(m: re.Match[str]) -> str:
        if m.lastindex and m.lastindex >= 1:
            return f"{m.group(1)}=***REDACTED***"
        return "***REDACTED***"

    for pat in SECRET_PATTERNS:
        message = pat.sub(repl, message)
    return message


def _redact_dict(obj: Any) -> Any:
    if isinstance(obj, dict):
        redacted = {}
        for k, v in obj.items():
            key_lower = str(k).lower()
            if any(s in key_lower for s in _SECRET_KEYS):
                redacted[k] = "***REDACTED***"
            else:
                redacted[k] = _redact_dict(v)
        return redacted
    if isinstance(obj, list):
        return [_redact_dict(i) for i in obj]
    if isinstance(obj, str):
        return _redact(obj)
    return obj


def structured_log(
    level: str,
    message: str,
    *,
    deployment_name: Optional[str] = None,
    predictor_name: Optional[str] = None,
    operation: Optional[str] = None,
    metadata: Optional[dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Emit a structured log entry."""
    log = logger or logging.getLogger(__name__)
    if not log.isEnabledFor(getattr(logging, level.upper(), logging.INFO)):
        return
    payload: dict[str, Any] = {
        "severity": level.upper(),
        "message": _redact(message),
        "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
    }
    if deployment_name:
        payload["deployment_name"] = deployment_name
    if predictor_name:
        payload["predictor_name"] = predictor_name
    if operation:
        payload["operation"] = operation
    if metadata:
        payload["metadata"] = _redact_dict(metadata)

    msg = json.dumps(payload) if _use_json() else _format_readable(payload)
    getattr(log, level.lower(), log.info)(msg)


def _use_json() -> bool:
    """Use JSON format unless LOG_FORMAT asks for readable output."""
    return os.getenv("LOG_FORMAT", "json").lower() == "json"


def _format_readable(payload: dict[str, Any]) -> str:
    parts = [f"[{payload.get('severity', 'INFO')}]", payload.get("message", "")]
    if payload.get("deployment_name"):
        parts.append(f"deployment={payload['deployment_name']}")
    if payload.get("predictor_name"):
        parts.append(f"predictor={payload['predictor_name']}")
    if payload.get("operation"):
        parts.append(f"operation={payload['operation']}")
    return " ".join(parts)


def configure_logging(log_level: Optional[str] = None) -> None:
    """Configure root logger with JSON or readable format.

    Without an explicit level, LOG_LEVEL from settings is used.
    """
    if log_level is None:
        log_level = get_settings().log_level
    level = getattr(logging, log_level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        if _use_json():
            handler.setFormatter(JsonFormatter())
        else:
            handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)


class JsonFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "severity": record.levelname,
            "message": _redact(record.getMessage()),
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat().replace("+00:00", "Z"),
            "logger": record.name,
        }
        if getattr(record, "deployment_name", None):
            payload["deployment_name"] = record.deployment_name
        if getattr(record, "predictor_name", None):
            payload["predictor_name"] = record.predictor_name
        if getattr(record, "operation", None):
            payload["operation"] = record.operation
        if getattr(record, "metadata", None):
            payload["metadata"] = _redact_dict(record.metadata)
        if record.exc_info:
            payload["error"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else "",
                "message": str(record.exc_info[1]) if record.exc_info[1] else "",
                "stack_trace": self.formatException(record.exc_info) if record.exc_info[2] else "",
            }
        return json.dumps(payload)
