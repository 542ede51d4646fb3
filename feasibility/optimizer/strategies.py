"""
Optimizer policies.

Each policy rewrites its own clone of the plan, re-scores it, and packages
the result as an OptimizedTrip:

- balanced: moves activities off overloaded days, keeps everything
- relaxed: frees an evening on the longest day
- budget: drops the priciest optional activity on expensive days
"""

import logging
from typing import List, Optional

from feasibility.optimizer.clone import clone_plan
from feasibility.optimizer.config import OptimizerConfig, DEFAULT_OPTIMIZER_CONFIG
from feasibility.scorer.scoring import evaluate
from feasibility.shared.contracts import (
    Activity,
    OptimizationChange,
    OptimizedTrip,
    ScoreResult,
    TripDay,
    TripPlan,
)
from feasibility.shared.formatting import format_amount


logger = logging.getLogger(__name__)


def _is_droppable(activity: Activity) -> bool:
    return activity.priority == "low" or activity.is_optional


def _deduct(day: TripDay, activity: Activity) -> None:
    # Totals never drop below zero, whatever the caller stored.
    day.total_cost = max(0.0, day.total_cost - activity.cost)
    day.total_duration = max(0.0, day.total_duration - activity.duration)


def _remove_activity(day: TripDay, activity: Activity) -> None:
    """Remove an activity from a day and deduct it from the day totals."""
    day.activities = [a for a in day.activities if a.id != activity.id]
    _deduct(day, activity)


def _add_activity(day: TripDay, activity: Activity) -> None:
    day.activities.append(activity)
    day.total_cost += activity.cost
    day.total_duration += activity.duration


def generate_balanced_plan(
    plan: TripPlan,
    current: ScoreResult,
    config: OptimizerConfig = DEFAULT_OPTIMIZER_CONFIG,
) -> Optional[OptimizedTrip]:
    """
    Balanced plan: same cities, same days, redistributed load.

    For each overloaded day with more than MAX_ACTIVITIES_PER_DAY
    activities, the last low-priority or optional activity moves to the
    lightest other day. Light days are picked from a load snapshot taken
    before any move.

    Returns:
        The candidate, or None if it does not strictly improve the score
    """
    trip = clone_plan(plan)
    changes: List[OptimizationChange] = []

    overloaded_days = [
        issue.day_index
        for issue in current.issues
        if issue.type == "overload" and issue.day_index is not None
    ]

    if overloaded_days:
        day_loads = sorted(
            ((idx, len(day.activities)) for idx, day in enumerate(trip.days)),
            key=lambda load: load[1],
        )

        for overloaded_idx in overloaded_days:
            if overloaded_idx >= len(trip.days):
                continue
            overloaded_day = trip.days[overloaded_idx]
            lightest = next(
                (
                    idx
                    for idx, count in day_loads
                    if idx != overloaded_idx and count < config.MAX_ACTIVITIES_PER_DAY
                ),
                None,
            )

            if lightest is None or len(overloaded_day.activities) <= config.MAX_ACTIVITIES_PER_DAY:
                continue

            candidates = [a for a in overloaded_day.activities if _is_droppable(a)]
            if not candidates:
                continue
            moved = candidates[-1]

            _remove_activity(overloaded_day, moved)
            _add_activity(trip.days[lightest], moved)

            changes.append(
                OptimizationChange(
                    type="move_activity",
                    description=(
                        f'Move "{moved.name}" from Day {overloaded_idx + 1} '
                        f"to Day {lightest + 1}"
                    ),
                    impact="Reduces overload while keeping all activities",
                    day_index=overloaded_idx,
                    activity_id=moved.id,
                )
            )

    for day_idx, day in enumerate(trip.days):
        sightseeing = [a for a in day.activities if a.category == "sightseeing"]
        if len(sightseeing) >= config.MERGE_SIGHTSEEING_MIN:
            changes.append(
                OptimizationChange(
                    type="merge_activities",
                    description=f"Group related sightseeing activities on Day {day_idx + 1}",
                    impact="More efficient touring, less fatigue",
                    day_index=day_idx,
                )
            )

    possibility = evaluate(trip)

    if possibility.percentage <= current.percentage:
        logger.debug(
            f"Balanced plan discarded | score={possibility.percentage}, "
            f"original={current.percentage}"
        )
        return None

    return OptimizedTrip(
        id="balanced",
        name="Balanced Plan",
        description="Same cities, same days, optimized schedule",
        icon="⭐",
        color="primary",
        trip_data=trip,
        possibility=possibility,
        changes=changes,
        improvement_percentage=possibility.percentage - current.percentage,
        tradeoffs=[
            "✓ All cities preserved",
            "✓ Same trip duration",
            "✓ All activities kept",
            "Activities redistributed across days",
        ],
    )


def generate_relaxed_plan(
    plan: TripPlan,
    current: ScoreResult,
    config: OptimizerConfig = DEFAULT_OPTIMIZER_CONFIG,
) -> OptimizedTrip:
    """
    Relaxed plan: added rest time, reduced daily intensity.

    The longest day loses its last activity when it has more than
    MAX_ACTIVITIES_PER_DAY. Runs of consecutive heavy days are flagged for a
    lighter schedule. Always returned.
    """
    trip = clone_plan(plan)
    changes: List[OptimizationChange] = []

    if trip.days:
        heaviest_idx = max(
            range(len(trip.days)), key=lambda idx: trip.days[idx].total_duration
        )
        heaviest_day = trip.days[heaviest_idx]

        if len(heaviest_day.activities) > config.MAX_ACTIVITIES_PER_DAY:
            removed = heaviest_day.activities.pop()
            _deduct(heaviest_day, removed)

            changes.append(
                OptimizationChange(
                    type="add_rest",
                    description=f"Add free evening on Day {heaviest_idx + 1}",
                    impact="Time for spontaneous exploration or rest",
                    day_index=heaviest_idx,
                    activity_id=removed.id,
                )
            )

    consecutive_heavy = 0
    for idx, day in enumerate(trip.days):
        if day.total_duration > config.HEAVY_DAY_HOURS:
            consecutive_heavy += 1
            if consecutive_heavy >= 2:
                changes.append(
                    OptimizationChange(
                        type="add_rest",
                        description=f"Add lighter schedule on Day {idx + 1}",
                        impact="Prevents fatigue from consecutive busy days",
                        day_index=idx,
                    )
                )
        else:
            consecutive_heavy = 0

    possibility = evaluate(trip)
    budget_increase = format_amount(config.RELAXED_BUDGET_INCREASE, plan.currency)

    return OptimizedTrip(
        id="relaxed",
        name="Relaxed Plan",
        description="Added rest time, reduced daily intensity",
        icon="🌿",
        color="success",
        trip_data=trip,
        possibility=possibility,
        changes=changes,
        improvement_percentage=max(0, possibility.percentage - current.percentage),
        tradeoffs=[
            "✓ Added rest evenings",
            "✓ Reduced daily walking",
            "✓ More sustainable pace",
            f"Budget may increase by ~{budget_increase}",
        ],
    )


def generate_budget_plan(
    plan: TripPlan,
    current: ScoreResult,
    config: OptimizerConfig = DEFAULT_OPTIMIZER_CONFIG,
) -> OptimizedTrip:
    """
    Budget-optimized plan: removes optional activities to save costs.

    A day that is overloaded or costs more than an even share of the budget
    loses its most expensive optional or low-priority activity. Always
    returned.
    """
    trip = clone_plan(plan)
    changes: List[OptimizationChange] = []
    total_saved = 0.0
    daily_allotment = plan.total_budget / plan.total_days if plan.total_days else 0.0

    for day_idx, day in enumerate(trip.days):
        optional = sorted(
            (a for a in day.activities if _is_droppable(a)), key=lambda a: a.cost
        )
        if not optional:
            continue

        over_limit = (
            len(day.activities) > config.MAX_ACTIVITIES_PER_DAY
            or day.total_cost > daily_allotment
        )
        if not over_limit:
            continue

        to_remove = optional[-1]
        _remove_activity(day, to_remove)
        total_saved += to_remove.cost

        changes.append(
            OptimizationChange(
                type="remove_activity",
                description=f'Remove optional "{to_remove.name}" on Day {day_idx + 1}',
                impact=f"Saves {format_amount(to_remove.cost, plan.currency)}",
                day_index=day_idx,
                activity_id=to_remove.id,
            )
        )

    possibility = evaluate(trip)

    return OptimizedTrip(
        id="budget",
        name="Budget-Optimized",
        description="Removed optional activities to save costs",
        icon="💰",
        color="warning",
        trip_data=trip,
        possibility=possibility,
        changes=changes,
        improvement_percentage=max(0, possibility.percentage - current.percentage),
        tradeoffs=[
            f"✓ Saves {format_amount(total_saved, plan.currency)}",
            "✓ Focus on must-see attractions",
            "✓ Reduced daily load",
            f"{len(changes)} optional activities removed",
        ],
    )
