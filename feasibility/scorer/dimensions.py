"""
Per-dimension scoring rules.

Each function starts from the dimension maximum, accumulates a penalty,
clamps it, and returns the dimension score with the issues it raised.
"""

import math
from typing import List, Tuple

from feasibility.scorer.config import ScoringConfig, DEFAULT_SCORING_CONFIG
from feasibility.shared.contracts import DimensionScore, TripIssue, TripPlan
from feasibility.shared.formatting import format_amount


DimensionResult = Tuple[DimensionScore, List[TripIssue]]


def _finish(max_score: int, penalty: int, details: List[str]) -> DimensionScore:
    penalty = min(penalty, max_score)
    return DimensionScore(
        score=max_score - penalty,
        max_score=max_score,
        penalty=penalty,
        details=details,
    )


def score_budget(
    plan: TripPlan, config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> DimensionResult:
    """
    Budget feasibility: total day costs against the trip budget.

    Over by <=10% costs 5 points, <=25% costs 15, anything more costs the
    whole dimension. Unusually expensive days are only noted in details.
    """
    details: List[str] = []
    issues: List[TripIssue] = []
    penalty = 0

    total_spent = plan.total_spent
    budget_diff = total_spent - plan.total_budget
    percent_over = budget_diff * 100 / plan.total_budget

    if budget_diff <= 0:
        details.append("✓ Trip is within budget")
    else:
        if percent_over <= config.BUDGET_SLIGHT_OVER_PCT:
            penalty = config.BUDGET_SLIGHT_OVER_PENALTY
            severity = "warning"
            details.append(f"⚠ Slightly over budget by {percent_over:.1f}%")
        elif percent_over <= config.BUDGET_OVER_PCT:
            penalty = config.BUDGET_OVER_PENALTY
            severity = "warning"
            details.append(f"⚠ Over budget by {percent_over:.1f}%")
        else:
            penalty = config.BUDGET_SEVERE_PENALTY
            severity = "critical"
            details.append(f"✗ Significantly over budget by {percent_over:.1f}%")

        issues.append(
            TripIssue(
                type="budget",
                severity=severity,
                message=(
                    f"Trip is {percent_over:.1f}% over budget "
                    f"({format_amount(budget_diff, plan.currency)} extra)"
                ),
                impact=penalty,
            )
        )

    avg_daily_spend = total_spent / plan.total_days
    high_spend_days = [
        day
        for day in plan.days
        if day.total_cost > avg_daily_spend * config.HIGH_SPEND_DAY_FACTOR
    ]
    if high_spend_days:
        details.append(
            f"⚠ {len(high_spend_days)} day(s) have unusually high spending"
        )

    return _finish(config.MAX_BUDGET, penalty, details), issues


def score_activity_load(
    plan: TripPlan, config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> DimensionResult:
    """Daily activity load: penalizes days with too many activities."""
    details: List[str] = []
    issues: List[TripIssue] = []
    penalty = 0

    overloaded_days = 0
    heavy_overload_days = 0

    for index, day in enumerate(plan.days):
        activity_count = len(day.activities)

        if activity_count > config.HEAVY_OVERLOAD_ACTIVITY_COUNT:
            heavy_overload_days += 1
            issues.append(
                TripIssue(
                    type="overload",
                    severity="critical",
                    day_index=index,
                    message=(
                        f"Day {index + 1} is heavily overloaded with "
                        f"{activity_count} activities"
                    ),
                    impact=config.HEAVY_OVERLOAD_PENALTY,
                )
            )
        elif activity_count > config.OVERLOAD_ACTIVITY_COUNT:
            overloaded_days += 1
            issues.append(
                TripIssue(
                    type="overload",
                    severity="warning",
                    day_index=index,
                    message=(
                        f"Day {index + 1} has {activity_count} activities "
                        f"(recommended: {config.OVERLOAD_ACTIVITY_COUNT} or less)"
                    ),
                    impact=config.OVERLOAD_PENALTY,
                )
            )

    if overloaded_days == 0 and heavy_overload_days == 0:
        details.append("✓ All days have balanced activity count")
    else:
        if heavy_overload_days > 0:
            penalty += heavy_overload_days * config.HEAVY_OVERLOAD_PENALTY
            details.append(
                f"✗ {heavy_overload_days} day(s) are heavily overloaded "
                f"(>{config.HEAVY_OVERLOAD_ACTIVITY_COUNT} activities)"
            )
        if overloaded_days > 0:
            penalty += overloaded_days * config.OVERLOAD_PENALTY
            details.append(
                f"⚠ {overloaded_days} day(s) are slightly overloaded "
                f"({config.OVERLOAD_ACTIVITY_COUNT + 1}-"
                f"{config.HEAVY_OVERLOAD_ACTIVITY_COUNT} activities)"
            )
        if overloaded_days + heavy_overload_days > config.MULTIPLE_OVERLOAD_DAYS:
            penalty += config.MULTIPLE_OVERLOAD_PENALTY
            details.append("⚠ Multiple overloaded days detected")

    return _finish(config.MAX_ACTIVITY, penalty, details), issues


def score_time_realism(
    plan: TripPlan, config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> DimensionResult:
    """Time realism: long days and missing rest days on longer trips."""
    details: List[str] = []
    issues: List[TripIssue] = []
    penalty = 0

    long_days = 0
    has_rest_day = False

    for index, day in enumerate(plan.days):
        if day.total_duration < config.REST_DAY_HOURS:
            has_rest_day = True

        if day.total_duration > config.MAX_DAILY_HOURS:
            long_days += 1
            issues.append(
                TripIssue(
                    type="time",
                    severity="warning",
                    day_index=index,
                    message=(
                        f"Day {index + 1} has {day.total_duration:g}+ hours "
                        f"of activities"
                    ),
                    impact=config.LONG_DAY_PENALTY,
                )
            )

    if long_days > 0:
        penalty += long_days * config.LONG_DAY_PENALTY
        details.append(
            f"⚠ {long_days} day(s) exceed {config.MAX_DAILY_HOURS:g} hours "
            f"of activities"
        )
    else:
        details.append("✓ Daily schedules have reasonable duration")

    if plan.total_days > config.REST_DAY_MIN_TRIP_DAYS:
        if has_rest_day:
            details.append("✓ Trip includes rest/light days")
        else:
            penalty += config.NO_REST_DAY_PENALTY
            details.append(
                f"⚠ No rest/light day in a trip longer than "
                f"{config.REST_DAY_MIN_TRIP_DAYS} days"
            )
            issues.append(
                TripIssue(
                    type="time",
                    severity="warning",
                    message=(
                        f"Consider adding a rest day for trips longer than "
                        f"{config.REST_DAY_MIN_TRIP_DAYS} days"
                    ),
                    impact=config.NO_REST_DAY_PENALTY,
                )
            )

    return _finish(config.MAX_TIME, penalty, details), issues


def score_travel_flow(
    plan: TripPlan, config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> DimensionResult:
    """
    Travel-flow consistency.

    A city switch right after a busy day (no buffer) costs 5 points, as does
    visiting more cities than half the number of trip days.
    """
    details: List[str] = []
    issues: List[TripIssue] = []
    penalty = 0

    city_switches = 0
    switches_without_buffer = 0

    for i in range(1, len(plan.days)):
        prev_day = plan.days[i - 1]
        prev_city = prev_day.city_key
        curr_city = plan.days[i].city_key

        if prev_city and curr_city and prev_city != curr_city:
            city_switches += 1

            if len(prev_day.activities) > config.BUFFER_MAX_ACTIVITIES:
                switches_without_buffer += 1
                issues.append(
                    TripIssue(
                        type="travel",
                        severity="warning",
                        day_index=i,
                        message=(
                            f"City change on Day {i + 1} without buffer time "
                            f"on Day {i}"
                        ),
                        impact=config.NO_BUFFER_PENALTY,
                    )
                )

    if switches_without_buffer > 0:
        penalty += switches_without_buffer * config.NO_BUFFER_PENALTY
        details.append(
            f"⚠ {switches_without_buffer} city change(s) without buffer day"
        )
    elif city_switches > 0:
        details.append("✓ City changes have appropriate buffer time")
    else:
        details.append("✓ Single destination - no travel flow issues")

    if len(plan.cities) > plan.total_days / 2:
        penalty += config.TOO_MANY_CITIES_PENALTY
        details.append("⚠ Too many cities for trip duration")
        issues.append(
            TripIssue(
                type="travel",
                severity="warning",
                message=(
                    f"{len(plan.cities)} cities in {plan.total_days} days "
                    f"may be rushed"
                ),
                impact=config.TOO_MANY_CITIES_PENALTY,
            )
        )

    return _finish(config.MAX_TRAVEL_FLOW, penalty, details), issues


def score_duration_balance(
    plan: TripPlan, config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> DimensionResult:
    """Duration-per-city balance: days available for each city visited."""
    details: List[str] = []
    issues: List[TripIssue] = []
    penalty = 0

    days_per_city = plan.total_days / len(plan.cities)

    if days_per_city < config.MIN_DAYS_PER_CITY:
        penalty = config.RUSHED_CITY_PENALTY
        details.append(
            f"✗ Only {days_per_city:.1f} days per city "
            f"(recommended: {config.MIN_DAYS_PER_CITY:g}+)"
        )
        issues.append(
            TripIssue(
                type="duration",
                severity="critical",
                message=(
                    f"Less than {config.MIN_DAYS_PER_CITY:g} days per city "
                    f"makes the trip rushed"
                ),
                impact=penalty,
            )
        )
    elif days_per_city < config.COMFORTABLE_DAYS_PER_CITY:
        penalty = config.TIGHT_CITY_PENALTY
        details.append(f"⚠ {days_per_city:.1f} days per city - slightly tight")
        issues.append(
            TripIssue(
                type="duration",
                severity="warning",
                message="Consider extending trip or reducing cities",
                impact=penalty,
            )
        )
    else:
        details.append(f"✓ {days_per_city:.1f} days per city - well balanced")

    return _finish(config.MAX_DURATION, penalty, details), issues


def daily_overspend(plan: TripPlan) -> int:
    """Average per-day reduction needed to get back within budget (rounded up)."""
    return math.ceil((plan.total_spent - plan.total_budget) / plan.total_days)
