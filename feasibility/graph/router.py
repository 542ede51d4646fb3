"""
Routing logic for the feasibility graph.

Decides whether an evaluated plan needs optimizer alternatives.
"""

import logging
from typing import Literal

from feasibility.graph.state import FeasibilityState
from feasibility.optimizer.config import DEFAULT_OPTIMIZER_CONFIG


logger = logging.getLogger(__name__)


def route_after_evaluation(
    state: FeasibilityState,
) -> Literal["optimize", "complete"]:
    """
    Determine the next node after evaluation.

    Routing logic:
    1. If evaluation failed (errors or no score) -> complete
    2. If score is already feasible -> complete
    3. Otherwise -> optimize

    Args:
        state: Current feasibility state

    Returns:
        Name of the next node to execute
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=feasibility] [router=route_after_evaluation] "

    score_result = state.get("score_result")
    if state.get("errors") or score_result is None:
        logger.info(f"{_log}Routing to 'complete' | evaluation unavailable")
        return "complete"

    percentage = score_result["percentage"]
    if percentage >= DEFAULT_OPTIMIZER_CONFIG.FEASIBLE_THRESHOLD:
        logger.info(f"{_log}Routing to 'complete' | score={percentage} (feasible)")
        return "complete"

    logger.info(f"{_log}Routing to 'optimize' | score={percentage}")
    return "optimize"
