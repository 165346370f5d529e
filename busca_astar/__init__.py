# Busca A* genérica: motor de travessia guiado por callbacks
# (vizinhos, peso, heurística, objetivo), com adaptador opcional para grafos NetworkX.

__version__ = "0.1.0"

from .algorithms import LazyPath, PriorityQueue, Result, dijkstra, traverse
from .exceptions import ExpansionLimitError, InvalidTraversalArguments, TraversalError
from .graph_operations import GraphOperations
from .metrics import VisitRecorder, measure_latency_ms, path_cost_from_list

__all__ = [
    "traverse",
    "dijkstra",
    "PriorityQueue",
    "LazyPath",
    "Result",
    "GraphOperations",
    "TraversalError",
    "InvalidTraversalArguments",
    "ExpansionLimitError",
    "VisitRecorder",
    "measure_latency_ms",
    "path_cost_from_list",
]
