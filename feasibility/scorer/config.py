"""
Scoring policy for the feasibility scorer.

Weights, thresholds and penalty tables are compiled-in policy. Functions
accept a config argument so tests can exercise alternate tables.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringConfig:
    """
    Configuration for feasibility scoring.

    Dimension maxima sum to 100.
    """

    # Dimension maxima
    MAX_BUDGET: int = 30
    MAX_ACTIVITY: int = 25
    MAX_TIME: int = 20
    MAX_TRAVEL_FLOW: int = 15
    MAX_DURATION: int = 10

    # Budget: percent over budget -> penalty
    BUDGET_SLIGHT_OVER_PCT: float = 10.0
    BUDGET_SLIGHT_OVER_PENALTY: int = 5
    BUDGET_OVER_PCT: float = 25.0
    BUDGET_OVER_PENALTY: int = 15
    BUDGET_SEVERE_PENALTY: int = 30
    HIGH_SPEND_DAY_FACTOR: float = 1.5

    # Activity load
    OVERLOAD_ACTIVITY_COUNT: int = 4  # more than this is overloaded
    HEAVY_OVERLOAD_ACTIVITY_COUNT: int = 6  # more than this is heavily overloaded
    OVERLOAD_PENALTY: int = 5
    HEAVY_OVERLOAD_PENALTY: int = 10
    MULTIPLE_OVERLOAD_DAYS: int = 2
    MULTIPLE_OVERLOAD_PENALTY: int = 5

    # Time realism
    MAX_DAILY_HOURS: float = 10.0
    LONG_DAY_PENALTY: int = 5
    REST_DAY_HOURS: float = 3.0
    REST_DAY_MIN_TRIP_DAYS: int = 4
    NO_REST_DAY_PENALTY: int = 10

    # Travel flow
    BUFFER_MAX_ACTIVITIES: int = 3
    NO_BUFFER_PENALTY: int = 5
    TOO_MANY_CITIES_PENALTY: int = 5

    # Duration per city
    MIN_DAYS_PER_CITY: float = 2.0
    COMFORTABLE_DAYS_PER_CITY: float = 2.5
    RUSHED_CITY_PENALTY: int = 10
    TIGHT_CITY_PENALTY: int = 5

    # Status thresholds
    EXCELLENT_THRESHOLD: int = 85
    GOOD_THRESHOLD: int = 70
    MODERATE_THRESHOLD: int = 55


DEFAULT_SCORING_CONFIG = ScoringConfig()
