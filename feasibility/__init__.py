"""
Trip feasibility core for the travel-planning application.

This package contains:
- shared/: Data contracts, structured logging, errors
- scorer/: Feasibility scorer (evaluate)
- optimizer/: Plan optimizer (optimize, apply)
- graph/: evaluate -> optimize pipeline built with LangGraph
"""

from feasibility.scorer.scoring import evaluate
from feasibility.optimizer.optimizer import (
    optimize,
    apply_optimized_plan,
    get_best_optimization,
)
from feasibility.shared.errors import InvalidPlanError

__all__ = [
    "evaluate",
    "optimize",
    "apply_optimized_plan",
    "get_best_optimization",
    "InvalidPlanError",
]
