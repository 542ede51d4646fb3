"""
Feasibility scorer.

Rates a draft itinerary 0-100 across budget, activity load, time realism,
travel flow and duration-per-city balance.
"""

from feasibility.scorer.config import ScoringConfig, DEFAULT_SCORING_CONFIG
from feasibility.scorer.scoring import evaluate, validate_plan, get_status

__all__ = [
    "ScoringConfig",
    "DEFAULT_SCORING_CONFIG",
    "evaluate",
    "validate_plan",
    "get_status",
]
