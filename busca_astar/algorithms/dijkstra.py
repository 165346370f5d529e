"""
Dijkstra (custo uniforme): o mesmo motor do A* com heurística nula.
Mantido como ponto de entrada próprio para comparações A* x Dijkstra.
"""

from __future__ import annotations

from typing import Any, Optional

from .. import config
from .a_star import GoalFn, NeighborsFn, VisitFn, WeightFn, traverse
from .result import Result


def dijkstra(
    start: Any,
    goal: GoalFn,
    neighbors: NeighborsFn,
    weight: Optional[WeightFn] = None,
    visit: Optional[VisitFn] = None,
    max_expansions: Optional[int] = config.DEFAULT_MAX_EXPANSIONS,
) -> Result:
    """
    Retorna Result(score, path, visited), como traverse(), sem heurística:
    expande sempre o nó com menor custo acumulado g.
    """
    return traverse(
        start,
        goal,
        neighbors,
        heuristic=None,
        weight=weight,
        visit=visit,
        max_expansions=max_expansions,
    )
