"""Data contracts shared by the scorer, optimizer and pipeline."""

from feasibility.shared.contracts.trip_plan import Activity, TripDay, TripPlan
from feasibility.shared.contracts.score_result import (
    DimensionScore,
    ScoreBreakdown,
    ScoreResult,
    TripIssue,
)
from feasibility.shared.contracts.optimized_trip import (
    OptimizationChange,
    OptimizedTrip,
)

__all__ = [
    "Activity",
    "TripDay",
    "TripPlan",
    "DimensionScore",
    "ScoreBreakdown",
    "ScoreResult",
    "TripIssue",
    "OptimizationChange",
    "OptimizedTrip",
]
