"""
Scorer output contract.

Defines the feasibility score, its per-dimension breakdown, and the typed
issues raised while scoring.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field


IssueType = Literal["budget", "overload", "time", "travel", "duration"]
IssueSeverity = Literal["critical", "warning", "info"]
FeasibilityStatus = Literal["excellent", "good", "moderate", "risky"]


class TripIssue(BaseModel):
    """A typed, severity-tagged finding from one scoring dimension."""

    type: IssueType = Field(description="Dimension that raised the issue")
    severity: IssueSeverity = Field(description="critical, warning or info")
    day_index: Optional[int] = Field(
        default=None, description="Zero-based day the issue refers to"
    )
    message: str = Field(description="Human-readable description")
    impact: int = Field(description="Penalty points attributable to the issue")


class DimensionScore(BaseModel):
    """Score of a single dimension after its penalty is applied."""

    score: int = Field(description="Points kept in this dimension")
    max_score: int = Field(description="Maximum points for this dimension")
    penalty: int = Field(default=0, description="Points deducted")
    details: List[str] = Field(
        default_factory=list, description="Explanatory detail lines"
    )


class ScoreBreakdown(BaseModel):
    """Per-dimension breakdown of the feasibility score."""

    budget: DimensionScore
    activity: DimensionScore
    time: DimensionScore
    travel_flow: DimensionScore
    duration: DimensionScore

    def dimensions(self) -> List[DimensionScore]:
        """Return the dimensions in scoring order."""
        return [self.budget, self.activity, self.time, self.travel_flow, self.duration]


class ScoreResult(BaseModel):
    """
    Result of a feasibility evaluation.

    percentage is the clamped sum of the five dimension scores.
    """

    percentage: int = Field(ge=0, le=100, description="Feasibility score 0-100")
    status: FeasibilityStatus = Field(description="Status tier")
    status_label: str = Field(description="Display label for the status")
    status_color: str = Field(description="Display color token for the status")
    breakdown: ScoreBreakdown = Field(description="Per-dimension breakdown")
    issues: List[TripIssue] = Field(
        default_factory=list, description="Issues from all dimensions"
    )
    suggestions: List[str] = Field(
        default_factory=list, description="One suggestion per issue type"
    )
