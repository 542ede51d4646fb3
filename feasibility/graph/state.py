"""
Feasibility pipeline state schema.

Defines the state that flows through the evaluate -> optimize graph. Models
are stored as plain dicts (model_dump) so the state stays serializable.
"""

from typing import TypedDict, List, Optional, Annotated
import operator


class FeasibilityState(TypedDict):
    """
    State schema for the feasibility graph.

    Carries the caller's trip plan plus slots for the score, the optimizer
    candidates, and the best candidate.
    """

    # Input
    trip_plan: dict

    # Outputs (populated as nodes complete)
    score_result: Optional[dict]
    optimized_trips: Optional[List[dict]]
    best_option: Optional[dict]

    # Pipeline tracking
    current_step: str
    errors: Annotated[List[str], operator.add]
    messages: Annotated[List[dict], operator.add]

    # Session tracking
    session_id: Optional[str]
