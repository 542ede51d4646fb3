"""
Structured logging for the feasibility pipeline.

Pipeline events are emitted as JSON lines carrying a compact summary of the
graph state (step, score, candidate count) so a run can be followed per
session without dumping whole trip plans into the log.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union


# Marks handlers installed by setup_logging so a second call replaces them
# without touching handlers added elsewhere (pytest's caplog, app handlers).
_HANDLER_TAG = "_feasibility_handler"


class StructuredFormatter(logging.Formatter):
    """
    Formats log records as single-line JSON.

    Records created by log_feasibility_event carry `session_id` and `extra`
    attributes; both are copied into the entry when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        session_id = getattr(record, "session_id", None)
        if session_id:
            entry["session_id"] = session_id
        if hasattr(record, "extra"):
            entry["extra"] = record.extra
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    logger_name: str = "feasibility",
) -> logging.Logger:
    """
    Route the feasibility loggers through the JSON formatter.

    Safe to call more than once: handlers from a previous call are closed
    and replaced.

    Args:
        level: Level as an int or a name such as "DEBUG"
        log_file: Optional file to append JSON lines to, besides stderr
        logger_name: Root of the logger tree to configure

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(_resolve_level(level))

    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_TAG, False)]:
        logger.removeHandler(handler)
        handler.close()

    handlers: list = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    formatter = StructuredFormatter()
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_TAG, True)
        logger.addHandler(handler)

    return logger


def log_feasibility_event(
    event: str,
    state: Dict[str, Any],
    extra: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Log a pipeline event with a summary of the graph state.

    Args:
        event: Event name (e.g. "evaluated", "complete")
        state: Current FeasibilityState; only summary fields are read
        extra: Additional context for the entry
        logger: Logger to use, defaults to the "feasibility" logger
    """
    if logger is None:
        logger = logging.getLogger("feasibility")

    score_result = state.get("score_result") or {}
    payload: Dict[str, Any] = {
        "event": event,
        "state_summary": {
            "current_step": state.get("current_step"),
            "percentage": score_result.get("percentage"),
            "status": score_result.get("status"),
            "candidates": len(state.get("optimized_trips") or []),
        },
    }
    if state.get("errors"):
        payload["errors"] = list(state["errors"])
    if extra:
        payload["extra"] = extra

    logger.info(
        f"Feasibility event: {event}",
        extra={"extra": payload, "session_id": state.get("session_id")},
    )
