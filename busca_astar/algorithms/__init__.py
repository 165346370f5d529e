from .a_star import OpenSetEntry, traverse
from .dijkstra import dijkstra
from .priority_queue import PriorityQueue
from .result import LazyPath, Result

__all__ = ["traverse", "dijkstra", "PriorityQueue", "OpenSetEntry", "LazyPath", "Result"]
