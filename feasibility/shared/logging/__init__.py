"""Logging configuration and utilities."""

from feasibility.shared.logging.config import (
    setup_logging,
    log_feasibility_event,
    StructuredFormatter,
)

__all__ = [
    "setup_logging",
    "log_feasibility_event",
    "StructuredFormatter",
]
