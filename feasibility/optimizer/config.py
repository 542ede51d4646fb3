"""
Configuration for the plan optimizer.

Centralizes the thresholds the optimizer policies use when rewriting plans.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class OptimizerConfig:
    """
    Configuration for the plan optimizer.

    Attributes:
        FEASIBLE_THRESHOLD: Scores at or above this get no alternatives
        MAX_ACTIVITIES_PER_DAY: Days with more activities are trimmed
        HEAVY_DAY_HOURS: Days longer than this count towards a heavy run
        MERGE_SIGHTSEEING_MIN: Sightseeing count that suggests grouping
        RELAXED_BUDGET_INCREASE: Flat extra-spend estimate for the relaxed plan
    """

    FEASIBLE_THRESHOLD: int = 85
    MAX_ACTIVITIES_PER_DAY: int = 4
    HEAVY_DAY_HOURS: float = 8.0
    MERGE_SIGHTSEEING_MIN: int = 3
    RELAXED_BUDGET_INCREASE: float = 1200.0


DEFAULT_OPTIMIZER_CONFIG = OptimizerConfig()
