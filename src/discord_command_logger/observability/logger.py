#!/usr/bin/env python3
"""
Structured logging for the Discord Command Logger plugin.
"""

import json
import logging
from datetime import datetime, timezone


class StructuredLogger:
    """Structured logger for plugin lifecycle events."""

    def __init__(self, name: str = __name__):
        self.logger = logging.getLogger(name)

    def _log(self, level: int, message: str, **kwargs):
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": logging.getLevelName(level),
            "message": message,
            **kwargs
        }
        self.logger.log(level, json.dumps(log_data, default=str))

    def info(self, message: str, **kwargs):
        """Log an info message with structured data."""
        self._log(logging.INFO, message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log an error message with structured data."""
        self._log(logging.ERROR, message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log a warning message with structured data."""
        self._log(logging.WARNING, message, **kwargs)

    def debug(self, message: str, **kwargs):
        """Log a debug message with structured data."""
        self._log(logging.DEBUG, message, **kwargs)

# Global instance
structured_logger = StructuredLogger()
