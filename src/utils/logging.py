"""
Structured JSON logging for the product handler.

Each call prints one JSON object, so CloudWatch Logs Insights can filter on
fields such as ``fieldName`` or ``productId`` directly.
"""

import json
import logging
import os
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

# Searched in order; the first non-empty value becomes the correlation id
CORRELATION_ID_PATHS: Tuple[Tuple[str, ...], ...] = (
    ("requestContext", "requestId"),
    ("request", "headers", "x-correlation-id"),
    ("request", "headers", "x-amzn-requestid"),
)


class StructuredLogger:
    """
    JSON logger carrying the correlation id of the request being resolved.

    Keyword arguments become top-level fields and ``None`` values are dropped.

    Example:
        logger = get_logger(__name__)
        logger.info("Created product", productId="abc-123", category="snacks")
    """

    def __init__(self, name: str, correlation_id: Optional[str] = None) -> None:
        self.logger = logging.getLogger(name)
        self.logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
        self.correlation_id = correlation_id or str(uuid.uuid4())

    def bind_event(self, event: Dict[str, Any]) -> str:
        """Adopt the correlation id of an incoming AppSync event and return it."""
        self.correlation_id = get_correlation_id(event)
        return self.correlation_id

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        if not self.logger.isEnabledFor(level):
            return

        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": logging.getLevelName(level),
            "logger": self.logger.name,
            "message": message,
            "correlationId": self.correlation_id,
            **kwargs,
        }
        # Decimals from DynamoDB are written as strings
        print(json.dumps({k: v for k, v in log_entry.items() if v is not None}, default=str))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)


def get_logger(name: str, correlation_id: Optional[str] = None) -> StructuredLogger:
    """Create a StructuredLogger for a handler module."""
    return StructuredLogger(name, correlation_id)


def _lookup(event: Dict[str, Any], path: Tuple[str, ...]) -> Any:
    value: Any = event
    for key in path:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def get_correlation_id(event: Dict[str, Any]) -> str:
    """
    Extract a correlation id from an AppSync event.

    Direct Lambda resolver events carry no ``requestContext``, so the AppSync
    request id header is used when the caller did not send
    ``x-correlation-id``. A new UUID is generated when nothing matches.
    """
    for path in CORRELATION_ID_PATHS:
        value = _lookup(event, path)
        if value:
            return str(value)

    return str(uuid.uuid4())
