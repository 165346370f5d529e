"""
Algoritmo A*: implementação genérica, independente de domínio.
Busca heurística com f(n) = g(n) + h(n) sobre um grafo que o chamador descreve por callbacks
(goal, neighbors, weight, heuristic); o motor nunca lê o grafo diretamente.
Fronteira: PriorityQueue ordenada por f (sem decrease-key; entradas velhas ficam na fila).
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, NamedTuple, Optional

from .. import config
from ..exceptions import ExpansionLimitError, InvalidTraversalArguments
from .priority_queue import PriorityQueue
from .result import LazyPath, Result

logger = logging.getLogger(__name__)

GoalFn = Callable[[Any], bool]
NeighborsFn = Callable[[Any, LazyPath], Iterable[Any]]
HeuristicFn = Callable[[Any], float]
WeightFn = Callable[[Any, Any], float]
VisitFn = Callable[[Any, LazyPath], None]


class OpenSetEntry(NamedTuple):
    node: Any
    cost: float


def _cheaper(a: OpenSetEntry, b: OpenSetEntry) -> bool:
    return a.cost < b.cost


def _entry_node(entry: OpenSetEntry) -> Any:
    return entry.node


def _lookup_g(g_score: Dict[Any, float], node: Any) -> float:
    return g_score.get(node, config.UNSEEN_COST)


def _validate(
    goal: Optional[GoalFn],
    neighbors: Optional[NeighborsFn],
    heuristic: Optional[HeuristicFn],
    weight: Optional[WeightFn],
    visit: Optional[VisitFn],
    max_expansions: Optional[int],
) -> None:
    """Falha antes de qualquer expansão se o contrato de chamada não for cumprido."""
    for name, fn in (("goal", goal), ("neighbors", neighbors)):
        if fn is None:
            raise InvalidTraversalArguments(f"{name} é obrigatório")
    callbacks = (
        ("goal", goal),
        ("neighbors", neighbors),
        ("heuristic", heuristic),
        ("weight", weight),
        ("visit", visit),
    )
    for name, fn in callbacks:
        if fn is not None and not callable(fn):
            raise InvalidTraversalArguments(f"{name} deve ser chamável, recebido {type(fn).__name__}")
    if max_expansions is not None:
        if isinstance(max_expansions, bool) or not isinstance(max_expansions, int) or max_expansions < 1:
            raise InvalidTraversalArguments(f"max_expansions deve ser um inteiro positivo, recebido {max_expansions!r}")


def traverse(
    start: Any,
    goal: GoalFn,
    neighbors: NeighborsFn,
    heuristic: Optional[HeuristicFn] = None,
    weight: Optional[WeightFn] = None,
    visit: Optional[VisitFn] = None,
    max_expansions: Optional[int] = config.DEFAULT_MAX_EXPANSIONS,
) -> Result:
    """
    Retorna Result(score, path, visited) com o caminho de menor custo do start até
    o primeiro nó que satisfaz goal, ou Result(None, (), visited) se não houver caminho.

    Parâmetros:
      start: nó inicial (qualquer valor hashable, inclusive None).
      goal(node) -> bool: True quando node é o destino.
      neighbors(node, path) -> iterável de vizinhos; [] para nós sem saída.
      heuristic(node) -> float: estimativa do custo restante (padrão 0 => Dijkstra).
      weight(node, neighbor) -> float: custo da aresta (padrão 0 => só alcançabilidade).
      visit(node, path): chamado a cada nó retirado da fronteira, antes do teste de objetivo.
      max_expansions: limite opcional de nós expandidos; excedido => ExpansionLimitError.

    `path` nos callbacks é um LazyPath: só é reconstruído se for iterado.
    Exceções levantadas pelos callbacks propagam sem tratamento.
    """
    _validate(goal, neighbors, heuristic, weight, visit, max_expansions)

    open_set: PriorityQueue[OpenSetEntry] = PriorityQueue(_cheaper, key=_entry_node)
    came_from: Dict[Any, Any] = {}
    g_score: Dict[Any, float] = {start: 0.0}
    h_start = heuristic(start) if heuristic is not None else config.DEFAULT_HEURISTIC
    f_score: Dict[Any, float] = {start: g_score[start] + h_start}
    open_set.push(OpenSetEntry(start, f_score[start]))

    logger.debug("A*: início em %r (f=%s)", start, f_score[start])
    expansions = 0

    while not open_set.empty():
        current = open_set.pop().node
        if max_expansions is not None and expansions >= max_expansions:
            raise ExpansionLimitError(expansions, list(came_from))
        expansions += 1

        path = LazyPath(came_from, current, start)
        if visit is not None:
            visit(current, path)

        if goal(current):
            score = f_score[current]
            logger.debug("A*: objetivo %r alcançado (score=%s, expansões=%d)", current, score, expansions)
            return Result(score=score, path=tuple(path.materialize()), visited=tuple(came_from))

        for neighbor in neighbors(current, path):
            w = weight(current, neighbor) if weight is not None else config.DEFAULT_WEIGHT
            tentative_g = g_score[current] + w
            if tentative_g < _lookup_g(g_score, neighbor):
                came_from[neighbor] = current
                g_score[neighbor] = tentative_g
                h = heuristic(neighbor) if heuristic is not None else config.DEFAULT_HEURISTIC
                f_score[neighbor] = tentative_g + h
                # Sem decrease-key: se já está na fila com custo pior, a entrada velha fica e será re-expandida
                if neighbor not in open_set:
                    open_set.push(OpenSetEntry(neighbor, f_score[neighbor]))

    logger.debug("A*: fronteira esgotada sem objetivo (expansões=%d, relaxados=%d)", expansions, len(came_from))
    return Result(score=None, path=(), visited=tuple(came_from))
