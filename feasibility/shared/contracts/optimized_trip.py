"""
Optimizer output contract.

Defines a candidate rewrite of a trip plan together with its re-computed
score and a description of what was changed.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from feasibility.shared.contracts.score_result import ScoreResult
from feasibility.shared.contracts.trip_plan import TripPlan


ChangeType = Literal[
    "move_activity",
    "remove_activity",
    "merge_activities",
    "add_rest",
    "adjust_budget",
    "reduce_cities",
]


class OptimizationChange(BaseModel):
    """A single diff entry between the original plan and a candidate."""

    type: ChangeType = Field(description="Kind of change")
    description: str = Field(description="What was changed")
    impact: str = Field(description="Expected effect of the change")
    day_index: Optional[int] = Field(
        default=None, description="Zero-based day the change applies to"
    )
    activity_id: Optional[str] = Field(
        default=None, description="Activity affected by the change"
    )


class OptimizedTrip(BaseModel):
    """An alternative trip plan produced by one optimizer policy."""

    id: str = Field(description="Policy identifier: balanced, relaxed or budget")
    name: str = Field(description="Display name")
    description: str = Field(description="Short description of the policy")
    icon: str = Field(description="Display icon")
    color: str = Field(description="Display color token")
    trip_data: TripPlan = Field(description="Rewritten trip plan")
    possibility: ScoreResult = Field(description="Score of the rewritten plan")
    changes: List[OptimizationChange] = Field(
        default_factory=list, description="Changes applied to the plan"
    )
    improvement_percentage: int = Field(
        ge=0, description="New score minus old score, floored at 0"
    )
    tradeoffs: List[str] = Field(
        default_factory=list, description="Short trade-off labels"
    )
