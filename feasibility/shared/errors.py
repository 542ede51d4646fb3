"""
Error types for the feasibility core.

Planning risks (over budget, overloaded days) are reported as issues, not
raised. Only structurally degenerate plans are rejected.
"""

from typing import List, Optional


class InvalidPlanError(ValueError):
    """
    Raised when a trip plan cannot be scored.

    Attributes:
        problems: Individual validation problems found in the plan
    """

    def __init__(self, message: str, problems: Optional[List[str]] = None):
        super().__init__(message)
        self.problems = problems or []
