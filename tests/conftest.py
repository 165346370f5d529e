"""
Configuração do pytest e fixtures compartilhadas.
Grafos pequenos descritos como dicionários: o motor só os enxerga pelos callbacks.
"""

from typing import Any, Dict, List, Tuple

import pytest

from .mazes import MANHATTAN_DIRECTIONS, SMALL_MAZE, parse_maze


@pytest.fixture
def chain_graph() -> Dict[str, List[str]]:
    """a -> b -> c -> d, com um desvio sem saída a -> astray."""
    return {
        "a": ["b", "astray"],
        "b": ["c"],
        "c": ["d"],
        "astray": [],
    }


@pytest.fixture
def disconnected_graph() -> Dict[str, List[str]]:
    """a -> b -> c -> d e um nó e isolado."""
    return {
        "a": ["b"],
        "b": ["c"],
        "c": ["d"],
        "e": [],
    }


@pytest.fixture
def two_route_graph() -> Dict[str, Dict[str, float]]:
    """
    [a] --3--> [b] --3--> [c] --3--> [e]
     |                                ^
     +--1--> [x] --1--> [y] --1--> [z] --1--+
    Rota por b custa 9; rota por x, y, z custa 4.
    """
    return {
        "a": {"b": 3, "x": 1},
        "b": {"c": 3},
        "c": {"e": 3},
        "x": {"y": 1},
        "y": {"z": 1},
        "z": {"e": 1},
    }


@pytest.fixture
def small_maze() -> List[List[str]]:
    return parse_maze(SMALL_MAZE)


@pytest.fixture
def maze_callbacks(small_maze: List[List[str]]) -> Dict[str, Any]:
    """start/goal/neighbors/weight para o labirinto pequeno (paredes = ':')."""
    grid = small_maze

    def goal(node: Tuple[int, int]) -> bool:
        row, col = node
        return grid[row][col] == "E"

    def neighbors(node: Tuple[int, int], path: Any) -> List[Tuple[int, int]]:
        row, col = node
        candidates = [(row + dr, col + dc) for dr, dc in MANHATTAN_DIRECTIONS]
        return [(r, c) for r, c in candidates if grid[r][c] != ":"]

    return {
        "start": (1, 1),
        "goal": goal,
        "neighbors": neighbors,
        "weight": lambda node, neighbor: 1,
    }
