"""
Feasibility pipeline graph.

Composes the scorer and optimizer into a single run:
    trip_plan -> evaluate -> (optimize if score < 85) -> complete
"""

from feasibility.graph.build import create_feasibility_graph, run_feasibility_check

__all__ = ["create_feasibility_graph", "run_feasibility_check"]
