"""
Plan optimizer entry points.

Generates up to three alternative plans when a trip's feasibility score is
below the feasible threshold, and helpers for choosing and applying one.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from feasibility.optimizer.config import OptimizerConfig, DEFAULT_OPTIMIZER_CONFIG
from feasibility.optimizer.strategies import (
    generate_balanced_plan,
    generate_budget_plan,
    generate_relaxed_plan,
)
from feasibility.scorer.scoring import coerce_plan, validate_plan
from feasibility.shared.contracts import OptimizedTrip, ScoreResult, TripPlan


logger = logging.getLogger(__name__)


def optimize(
    plan: Union[TripPlan, Dict[str, Any]],
    current: ScoreResult,
    config: OptimizerConfig = DEFAULT_OPTIMIZER_CONFIG,
) -> List[OptimizedTrip]:
    """
    Generate optimized alternatives for a trip plan.

    Candidates are produced in order balanced, relaxed, budget. The balanced
    plan is only included when it strictly improves the score.

    Args:
        plan: Original trip plan (never mutated)
        current: Score of the original plan
        config: Optimizer configuration

    Returns:
        Zero to three OptimizedTrip candidates

    Raises:
        InvalidPlanError: If the plan has days but cannot be scored
    """
    if current.percentage >= config.FEASIBLE_THRESHOLD:
        logger.debug(
            f"Plan already feasible ({current.percentage}%), no alternatives generated"
        )
        return []

    plan = coerce_plan(plan)
    if plan.days:
        validate_plan(plan)

    candidates = [
        generate_balanced_plan(plan, current, config),
        generate_relaxed_plan(plan, current, config),
        generate_budget_plan(plan, current, config),
    ]
    optimized = [c for c in candidates if c is not None]

    logger.info(
        f"Generated {len(optimized)} alternative(s) | original={current.percentage}%, "
        + ", ".join(f"{c.id}={c.possibility.percentage}%" for c in optimized)
    )
    return optimized


def apply_optimized_plan(candidate: OptimizedTrip) -> TripPlan:
    """Return the candidate's precomputed plan; no re-validation is done."""
    return candidate.trip_data


def get_best_optimization(
    candidates: List[OptimizedTrip],
) -> Optional[OptimizedTrip]:
    """
    Pick the candidate with the highest resulting score.

    Ties keep the first candidate encountered.
    """
    if not candidates:
        return None

    best = candidates[0]
    for candidate in candidates[1:]:
        if candidate.possibility.percentage > best.possibility.percentage:
            best = candidate
    return best


def can_optimize(
    result: ScoreResult, config: OptimizerConfig = DEFAULT_OPTIMIZER_CONFIG
) -> bool:
    """True if the score is below the feasible threshold and has issues."""
    return result.percentage < config.FEASIBLE_THRESHOLD and len(result.issues) > 0


def format_optimization_summary(candidate: OptimizedTrip) -> str:
    """Short display summary, e.g. '2 changes • +15% improvement'."""
    change_count = len(candidate.changes)
    plural = "" if change_count == 1 else "s"
    return (
        f"{change_count} change{plural} • "
        f"+{candidate.improvement_percentage}% improvement"
    )
