"""
Feasibility graph construction.

Builds the graph that scores a trip plan and, when the score is below the
feasible threshold, generates optimized alternatives.
"""

import logging
from typing import Any, Dict, Optional, Union

from langgraph.graph import StateGraph, END

from feasibility.graph.config import FeasibilityGraphConfig, DEFAULT_CONFIG
from feasibility.graph.router import route_after_evaluation
from feasibility.graph.state import FeasibilityState
from feasibility.optimizer.optimizer import get_best_optimization, optimize
from feasibility.scorer.scoring import coerce_plan, evaluate
from feasibility.shared.contracts import ScoreResult, TripPlan
from feasibility.shared.errors import InvalidPlanError
from feasibility.shared.logging.config import log_feasibility_event


logger = logging.getLogger(__name__)


def _evaluate_node(state: FeasibilityState) -> Dict[str, Any]:
    """
    Score the trip plan held in state.

    An invalid plan is recorded in errors instead of aborting the graph.

    Args:
        state: Current feasibility state

    Returns:
        State updates with score_result and tracking messages
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=feasibility] [node=evaluate] "

    try:
        plan = coerce_plan(state["trip_plan"])
        logger.info(
            f"{_log}Entering node | days={len(plan.days)}, "
            f"cities={len(plan.cities)}, budget={plan.total_budget}"
        )
        result = evaluate(plan)
    except InvalidPlanError as e:
        logger.warning(f"{_log}Plan rejected: {e}")
        return {
            "current_step": "evaluate_failed",
            "errors": [f"Invalid trip plan: {e}"],
            "messages": [
                {
                    "role": "system",
                    "agent": "scorer",
                    "content": f"Plan could not be scored: {e}",
                }
            ],
        }

    logger.info(
        f"{_log}Evaluation complete | score={result.percentage}, "
        f"status={result.status}, issues={len(result.issues)}"
    )

    return {
        "score_result": result.model_dump(),
        "current_step": "evaluated",
        "messages": [
            {
                "role": "system",
                "agent": "scorer",
                "content": (
                    f"Trip scored {result.percentage}% ({result.status_label}) "
                    f"with {len(result.issues)} issue(s)."
                ),
            }
        ],
    }


def _optimize_node(state: FeasibilityState) -> Dict[str, Any]:
    """
    Generate optimized alternatives for a low-scoring plan.

    Args:
        state: Current feasibility state with score_result populated

    Returns:
        State updates with optimized_trips, best_option and tracking messages
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=feasibility] [node=optimize] "

    plan = coerce_plan(state["trip_plan"])
    current = ScoreResult.model_validate(state["score_result"])
    logger.info(f"{_log}Entering node | score={current.percentage}")

    candidates = optimize(plan, current)
    best = get_best_optimization(candidates)

    logger.info(
        f"{_log}Optimization complete | candidates={len(candidates)}, "
        f"best={best.id if best else 'none'}"
    )

    return {
        "optimized_trips": [c.model_dump() for c in candidates],
        "best_option": best.model_dump() if best else None,
        "current_step": "optimized",
        "messages": [
            {
                "role": "system",
                "agent": "optimizer",
                "content": (
                    f"Generated {len(candidates)} alternative plan(s)"
                    + (
                        f"; best is '{best.name}' at {best.possibility.percentage}%."
                        if best
                        else "."
                    )
                ),
            }
        ],
    }


def _complete_node(state: FeasibilityState) -> Dict[str, Any]:
    """
    Final node that marks the feasibility pipeline as complete.

    Args:
        state: Current feasibility state

    Returns:
        Completion tracking message
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=feasibility] [node=complete] "

    has_score = state.get("score_result") is not None
    num_candidates = len(state.get("optimized_trips") or [])
    num_errors = len(state.get("errors", []))

    logger.info(
        f"{_log}Pipeline complete | "
        f"score={'done' if has_score else 'MISSING'}, "
        f"candidates={num_candidates}, errors={num_errors} -> END"
    )
    log_feasibility_event("complete", state)

    return {
        "current_step": "complete",
        "messages": [
            {
                "role": "system",
                "agent": "pipeline",
                "content": (
                    f"Feasibility check complete. "
                    f"Score: {'done' if has_score else 'missing'}. "
                    f"Alternatives: {num_candidates}."
                ),
            }
        ],
    }


def create_feasibility_graph():
    """
    Create and compile the feasibility graph.

    The graph structure is:
        Entry -> evaluate -> route_after_evaluation
                               -> "optimize" -> optimize -> complete -> END
                               -> "complete" -> complete -> END

    Returns:
        Compiled LangGraph application ready for execution.
    """
    graph = StateGraph(FeasibilityState)

    graph.add_node("evaluate", _evaluate_node)
    graph.add_node("optimize", _optimize_node)
    graph.add_node("complete", _complete_node)

    graph.set_entry_point("evaluate")

    graph.add_conditional_edges(
        "evaluate",
        route_after_evaluation,
        {
            "optimize": "optimize",
            "complete": "complete",
        },
    )

    graph.add_edge("optimize", "complete")
    graph.add_edge("complete", END)

    return graph.compile()


def make_initial_state(
    plan: Union[TripPlan, Dict[str, Any]], session_id: Optional[str] = None
) -> FeasibilityState:
    """Build the initial graph state for a trip plan."""
    trip_plan = plan.model_dump() if isinstance(plan, TripPlan) else dict(plan)
    return {
        "trip_plan": trip_plan,
        "score_result": None,
        "optimized_trips": None,
        "best_option": None,
        "current_step": "starting",
        "errors": [],
        "messages": [],
        "session_id": session_id,
    }


def run_feasibility_check(
    plan: Union[TripPlan, Dict[str, Any]],
    session_id: Optional[str] = None,
    config: Optional[FeasibilityGraphConfig] = None,
) -> FeasibilityState:
    """
    Run the full feasibility pipeline for a single plan.

    Args:
        plan: Trip plan to check
        session_id: Optional identifier used in log prefixes
        config: Optional configuration. Uses DEFAULT_CONFIG if not provided.

    Returns:
        Final graph state
    """
    if config is None:
        config = DEFAULT_CONFIG

    app = create_feasibility_graph()
    return app.invoke(make_initial_state(plan, session_id), config.as_run_config())
