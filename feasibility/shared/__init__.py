"""
Shared infrastructure for the feasibility core.

Modules:
- contracts: Trip plan, score and optimized-trip models
- logging: Structured JSON logging
- errors: InvalidPlanError
"""

from feasibility.shared.errors import InvalidPlanError
from feasibility.shared.logging.config import setup_logging, log_feasibility_event

__all__ = [
    "InvalidPlanError",
    "setup_logging",
    "log_feasibility_event",
]
