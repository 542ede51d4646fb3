"""
Plan optimizer.

Rewrites copies of a low-scoring trip plan under three policies
(balanced, relaxed, budget) and re-scores each candidate.
"""

from feasibility.optimizer.config import OptimizerConfig, DEFAULT_OPTIMIZER_CONFIG
from feasibility.optimizer.clone import clone_plan
from feasibility.optimizer.optimizer import (
    optimize,
    apply_optimized_plan,
    get_best_optimization,
    can_optimize,
    format_optimization_summary,
)

__all__ = [
    "OptimizerConfig",
    "DEFAULT_OPTIMIZER_CONFIG",
    "clone_plan",
    "optimize",
    "apply_optimized_plan",
    "get_best_optimization",
    "can_optimize",
    "format_optimization_summary",
]
