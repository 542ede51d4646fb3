"""
Graph configuration for the feasibility pipeline.

Centralizes configuration options for the feasibility LangGraph workflow.
"""

from dataclasses import dataclass


@dataclass
class FeasibilityGraphConfig:
    """
    Configuration for the feasibility graph.

    Attributes:
        recursion_limit: Maximum number of graph steps
    """

    recursion_limit: int = 10

    def as_run_config(self) -> dict:
        """Runtime config dict accepted by a compiled graph's invoke()."""
        return {"recursion_limit": self.recursion_limit}


# Default configuration instance
DEFAULT_CONFIG = FeasibilityGraphConfig()
