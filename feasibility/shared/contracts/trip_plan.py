"""
Trip plan contract.

Defines the in-memory itinerary payload that the scorer evaluates and the
optimizer rewrites. This is the canonical schema shared with the
surrounding application layers.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field


ActivityCategory = Literal[
    "sightseeing",
    "food",
    "shopping",
    "adventure",
    "culture",
    "relaxation",
    "transport",
    "other",
]

ActivityPriority = Literal["high", "medium", "low"]


class Activity(BaseModel):
    """A single planned activity within a day."""

    id: str = Field(description="Activity identifier, unique within the plan")
    name: str = Field(description="Activity name")
    category: ActivityCategory = Field(
        default="other", description="Activity category"
    )
    duration: float = Field(
        ge=0, allow_inf_nan=False, description="Duration in hours"
    )
    cost: float = Field(
        default=0.0, ge=0, allow_inf_nan=False, description="Activity cost"
    )
    priority: ActivityPriority = Field(
        default="medium", description="Priority: 'high', 'medium' or 'low'"
    )
    is_optional: bool = Field(
        default=False,
        description="Whether the activity can be dropped or moved first",
    )


class TripDay(BaseModel):
    """
    A single day in the trip plan.

    total_cost and total_duration are maintained by the caller (or the
    optimizer) and are not recomputed from activities during scoring.
    """

    date: str = Field(description="Date in YYYY-MM-DD format")
    city_id: Optional[str] = Field(default=None, description="City identifier")
    city_name: Optional[str] = Field(default=None, description="City name")
    activities: List[Activity] = Field(
        default_factory=list, description="Activities planned for this day"
    )
    total_cost: float = Field(
        default=0.0, ge=0, allow_inf_nan=False, description="Sum of activity costs"
    )
    total_duration: float = Field(
        default=0.0,
        ge=0,
        allow_inf_nan=False,
        description="Sum of activity durations in hours",
    )

    @classmethod
    def from_activities(
        cls,
        date: str,
        activities: List[Activity],
        city_id: Optional[str] = None,
        city_name: Optional[str] = None,
    ) -> "TripDay":
        """Build a day whose totals are derived from its activities."""
        day = cls(
            date=date,
            city_id=city_id,
            city_name=city_name,
            activities=list(activities),
        )
        day.recalculate_totals()
        return day

    def recalculate_totals(self) -> None:
        """Re-sync total_cost and total_duration with the activity list."""
        self.total_cost = sum(a.cost for a in self.activities)
        self.total_duration = sum(a.duration for a in self.activities)

    @property
    def city_key(self) -> Optional[str]:
        """City identity used for transition checks (id, else name)."""
        return self.city_id or self.city_name


class TripPlan(BaseModel):
    """
    Full description of a multi-day itinerary.

    Day order is chronological and significant; city order is not.
    """

    total_budget: float = Field(
        allow_inf_nan=False, description="Total budget for the trip"
    )
    total_days: int = Field(ge=0, description="Trip duration in days")
    cities: List[str] = Field(
        default_factory=list, description="Cities visited on the trip"
    )
    days: List[TripDay] = Field(
        default_factory=list, description="Day-by-day plan"
    )
    currency: Optional[str] = Field(
        default=None, description="Currency label used when formatting amounts"
    )

    @property
    def total_spent(self) -> float:
        """Sum of the caller-maintained day totals."""
        return sum(day.total_cost for day in self.days)

    class Config:
        """Pydantic model configuration."""

        json_schema_extra = {
            "example": {
                "total_budget": 50000.0,
                "total_days": 2,
                "cities": ["Jaipur"],
                "currency": "INR",
                "days": [
                    {
                        "date": "2025-11-02",
                        "city_id": "jaipur",
                        "city_name": "Jaipur",
                        "activities": [
                            {
                                "id": "act-0-0",
                                "name": "Amber Fort",
                                "category": "sightseeing",
                                "duration": 3.0,
                                "cost": 1500.0,
                                "priority": "high",
                            }
                        ],
                        "total_cost": 1500.0,
                        "total_duration": 3.0,
                    }
                ],
            }
        }
