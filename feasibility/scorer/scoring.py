"""
Trip feasibility scoring.

Rates how realistic a planned trip is (0-100%) across five weighted
dimensions: budget, daily activity load, time realism, travel flow and
duration per city. Scoring is deterministic and has no side effects.
"""

import logging
import math
from typing import Any, Dict, List, Tuple, Union

from pydantic import ValidationError

from feasibility.scorer.config import ScoringConfig, DEFAULT_SCORING_CONFIG
from feasibility.scorer.dimensions import (
    daily_overspend,
    score_activity_load,
    score_budget,
    score_duration_balance,
    score_time_realism,
    score_travel_flow,
)
from feasibility.shared.contracts import (
    DimensionScore,
    ScoreBreakdown,
    ScoreResult,
    TripIssue,
    TripPlan,
)
from feasibility.shared.errors import InvalidPlanError
from feasibility.shared.formatting import format_amount


logger = logging.getLogger(__name__)


def coerce_plan(plan: Union[TripPlan, Dict[str, Any]]) -> TripPlan:
    """
    Accept a TripPlan or a plain dict and return a TripPlan.

    Raises:
        InvalidPlanError: If the dict does not validate against TripPlan
    """
    if isinstance(plan, TripPlan):
        return plan
    try:
        return TripPlan.model_validate(plan)
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise InvalidPlanError("Trip plan failed validation", problems) from e


def _non_negative_number(value: float) -> bool:
    return math.isfinite(value) and value >= 0


def validate_plan(plan: TripPlan) -> None:
    """
    Reject plans that would make scoring divide by zero, overflow or go
    negative.

    Only called for plans with at least one day; an empty plan is always
    scorable. Day totals are checked as well as activities because the
    scorer reads the totals the caller maintains.

    Raises:
        InvalidPlanError: Listing every problem found
    """
    problems: List[str] = []

    if not plan.cities:
        problems.append("plan has days but no cities")
    if plan.total_days <= 0:
        problems.append("plan has days but total_days is not positive")
    if not math.isfinite(plan.total_budget):
        problems.append("total_budget is not a finite number")
    elif plan.total_budget <= 0:
        problems.append("plan has days but total_budget is not positive")

    for day_index, day in enumerate(plan.days):
        label = f"day {day_index + 1}"
        if not _non_negative_number(day.total_cost):
            problems.append(f"{label}: total_cost must be a finite, non-negative number")
        if not _non_negative_number(day.total_duration):
            problems.append(
                f"{label}: total_duration must be a finite, non-negative number"
            )
        for activity in day.activities:
            if not math.isfinite(activity.cost):
                problems.append(f"{label}: activity '{activity.id}' has non-finite cost")
            elif activity.cost < 0:
                problems.append(f"{label}: activity '{activity.id}' has negative cost")
            if not math.isfinite(activity.duration):
                problems.append(
                    f"{label}: activity '{activity.id}' has non-finite duration"
                )
            elif activity.duration < 0:
                problems.append(
                    f"{label}: activity '{activity.id}' has negative duration"
                )

    if problems:
        raise InvalidPlanError(
            f"Trip plan cannot be scored: {'; '.join(problems)}", problems
        )


def get_status(
    percentage: int, config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> Tuple[str, str, str]:
    """
    Map a percentage to its status tier.

    Returns:
        Tuple of (status, status_label, status_color)
    """
    if percentage >= config.EXCELLENT_THRESHOLD:
        return "excellent", "Highly Feasible", "success"
    if percentage >= config.GOOD_THRESHOLD:
        return "good", "Good Plan", "primary"
    if percentage >= config.MODERATE_THRESHOLD:
        return "moderate", "Needs Adjustments", "warning"
    return "risky", "Risky Plan", "destructive"


def generate_suggestions(issues: List[TripIssue], plan: TripPlan) -> List[str]:
    """
    Build one actionable suggestion per distinct issue type.

    Order is fixed: budget, overload, time, travel, duration.
    """
    suggestions: List[str] = []
    issue_types = {issue.type for issue in issues}

    if "budget" in issue_types:
        per_day = format_amount(daily_overspend(plan), plan.currency)
        suggestions.append(f"Reduce daily spending by {per_day} on average")

    if "overload" in issue_types:
        overloaded = [
            i for i in issues if i.type == "overload" and i.day_index is not None
        ]
        if overloaded:
            day_num = overloaded[0].day_index + 1
            suggestions.append(f"Move 1-2 activities from Day {day_num} to a lighter day")

    if "time" in issue_types:
        suggestions.append("Add a rest evening or free half-day")

    if "travel" in issue_types:
        suggestions.append("Add buffer time before city changes")

    if "duration" in issue_types:
        suggestions.append("Consider visiting fewer cities or extending trip duration")

    return suggestions


def _empty_plan_result(config: ScoringConfig) -> ScoreResult:
    """Fixed optimistic result for a trip with no days planned yet."""

    def placeholder(max_score: int, text: str) -> DimensionScore:
        return DimensionScore(score=max_score, max_score=max_score, details=[text])

    return ScoreResult(
        percentage=100,
        status="excellent",
        status_label="Ready to plan",
        status_color="success",
        breakdown=ScoreBreakdown(
            budget=placeholder(config.MAX_BUDGET, "No budget data yet"),
            activity=placeholder(config.MAX_ACTIVITY, "No activities planned yet"),
            time=placeholder(config.MAX_TIME, "No schedule set"),
            travel_flow=placeholder(config.MAX_TRAVEL_FLOW, "No cities selected"),
            duration=placeholder(config.MAX_DURATION, "No duration set"),
        ),
        issues=[],
        suggestions=["Start adding activities to your trip!"],
    )


def evaluate(
    plan: Union[TripPlan, Dict[str, Any]],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> ScoreResult:
    """
    Calculate the feasibility score of a trip plan.

    Formula: percentage = clamp(budget + activity + time + travel_flow
                                + duration, 0, 100)

    Each dimension is clamped to its own maximum before summation.

    Args:
        plan: TripPlan (or dict validating into one) to evaluate
        config: Scoring configuration

    Returns:
        ScoreResult with percentage, status, breakdown, issues and suggestions

    Raises:
        InvalidPlanError: If the plan has days but cannot be scored
    """
    plan = coerce_plan(plan)

    if not plan.days:
        logger.debug("Plan has no days yet, returning default result")
        return _empty_plan_result(config)

    validate_plan(plan)

    budget, budget_issues = score_budget(plan, config)
    activity, activity_issues = score_activity_load(plan, config)
    time, time_issues = score_time_realism(plan, config)
    travel_flow, travel_issues = score_travel_flow(plan, config)
    duration, duration_issues = score_duration_balance(plan, config)

    all_issues = (
        budget_issues + activity_issues + time_issues + travel_issues + duration_issues
    )

    total_score = (
        budget.score + activity.score + time.score + travel_flow.score + duration.score
    )
    percentage = max(0, min(100, total_score))
    status, status_label, status_color = get_status(percentage, config)

    logger.debug(
        f"Evaluated plan | days={len(plan.days)}, score={percentage}, "
        f"status={status}, issues={len(all_issues)}"
    )

    return ScoreResult(
        percentage=percentage,
        status=status,
        status_label=status_label,
        status_color=status_color,
        breakdown=ScoreBreakdown(
            budget=budget,
            activity=activity,
            time=time,
            travel_flow=travel_flow,
            duration=duration,
        ),
        issues=all_issues,
        suggestions=generate_suggestions(all_issues, plan),
    )
