"""
Structured logging for MangoLogs.

JSON logs with timestamp, event_type and address context.
"""

from mangologs.mangologs_logging.logger import bind_address, configure_logging, get_logger

__all__ = ["bind_address", "configure_logging", "get_logger"]
