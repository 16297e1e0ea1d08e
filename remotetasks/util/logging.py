"""
Structured logging for view-model operations.
Selections, appends, favorite toggles, picker deliveries and settings store access.
"""

import logging
from typing import Any, Dict, List

from ..core.config import LOG_LEVEL, debug_enabled


class StructuredLogger:
    """Structured logger for view-model and settings store operations."""

    def __init__(self, name: str = "remotetasks"):
        self.logger = logging.getLogger(name)
        level = logging.DEBUG if debug_enabled() else getattr(logging, LOG_LEVEL, logging.INFO)
        self.logger.setLevel(level)

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        self.logger.info(message)

    def log_selection(self, scope: str, record_id: Any = None):
        """Log a selection change; a missing record id means the selection was cleared."""
        if record_id is None:
            self.log_operation(f"{scope}.selection", "cleared")
        else:
            self.log_operation(f"{scope}.selection", "selected", {"record_id": str(record_id)})

    def log_append(self, collection: str, record_id: Any, size: int, fields: Dict[str, Any] = None):
        """Log a record appended to an in-memory collection."""
        details = {"record_id": str(record_id), "size": size}
        if fields:
            details["fields"] = sanitize_payload(fields)

        self.log_operation(f"{collection}.append", "success", details)

    def log_validation_error(self, operation: str, field: str, message: str = ""):
        """Log a rejected create action."""
        details = {"field": field}
        if message:
            details["message"] = message[:100]

        self.log_operation(f"{operation}.validation", "rejected", details)

    def log_favorite_toggle(self, key: str, is_member: bool, status: str = "success"):
        """Log a favorite membership change."""
        self.log_operation("favorites.toggle", status, {
            "key": key,
            "is_member": is_member,
        })

    def log_pick(self, picker: str, payload_count: int, status: str = "delivered"):
        """Log the outcome of an external picker invocation."""
        self.log_operation(f"picker.{picker}", status, {"payload_count": payload_count})

    def log_settings_operation(self, operation: str, key: str, status: str = "success", details: Dict[str, Any] = None):
        """Log a settings store read or write."""
        log_details = {"key": key}
        if details:
            log_details.update(details)

        self.log_operation(f"settings.{operation}", status, log_details)

    # Standard logging methods for compatibility
    def info(self, message: str) -> None:
        """Log an info message."""
        self.logger.info(message)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self.logger.warning(message)

    def error(self, message: str) -> None:
        """Log an error message."""
        self.logger.error(message)

    def debug(self, message: str) -> None:
        """Log a debug message."""
        self.logger.debug(message)


# Global logger instance
logger = StructuredLogger()


def sanitize_payload(payload: Any, binary_fields: List[str] = None) -> Any:
    """Make a payload safe to log: truncate long strings and summarise binary blobs."""
    if binary_fields is None:
        binary_fields = ['photos', 'data', 'payload']

    if isinstance(payload, dict):
        sanitized = {}
        for k, v in payload.items():
            if k in binary_fields and isinstance(v, (list, tuple)):
                sanitized[k] = f"[{len(v)} item(s)]"
            else:
                sanitized[k] = sanitize_payload(v, binary_fields)
        return sanitized
    elif isinstance(payload, (bytes, bytearray)):
        return f"[{len(payload)} bytes]"
    elif isinstance(payload, str):
        # Truncate long strings
        return payload[:100] + "..." if len(payload) > 100 else payload
    elif isinstance(payload, (list, tuple)):
        return [sanitize_payload(item, binary_fields) for item in payload]
    else:
        return payload
