"""
Structural cloning of trip plans.

Candidates are built by mutating a copy of the caller's plan. The copy
rebuilds every day and activity so no list or model is shared with the
original.
"""

from feasibility.shared.contracts import Activity, TripDay, TripPlan


def clone_activity(activity: Activity) -> Activity:
    return activity.model_copy()


def clone_day(day: TripDay) -> TripDay:
    return day.model_copy(
        update={"activities": [clone_activity(a) for a in day.activities]}
    )


def clone_plan(plan: TripPlan) -> TripPlan:
    """Return a fully independent copy of the plan."""
    return plan.model_copy(
        update={
            "cities": list(plan.cities),
            "days": [clone_day(day) for day in plan.days],
        }
    )
