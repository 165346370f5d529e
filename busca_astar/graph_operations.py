"""
Operações sobre grafos NetworkX: adapta um nx.Graph/nx.DiGraph para os callbacks do motor A*
(vizinhos, peso, heurística), valida nós e calcula custo de caminho.
O motor continua sem estrutura de grafo própria; isto é só uma ponte para quem já usa NetworkX.
"""

from __future__ import annotations

import itertools
import logging
import math
from typing import Any, Callable, List, Optional, Sequence

import networkx as nx

from . import config
from .algorithms.a_star import traverse
from .algorithms.result import LazyPath, Result
from .metrics import path_cost_from_list

logger = logging.getLogger(__name__)


class GraphOperations:
    """Responsável por transformar um grafo NetworkX nas funções esperadas por traverse()."""

    @staticmethod
    def neighbors_function(G: nx.Graph) -> Callable[[Any, LazyPath], List[Any]]:
        """
        Retorna (node, path) -> lista de vizinhos.
        Grafo dirigido: sucessores; não dirigido: vizinhos. Nó desconhecido: [].
        """
        directed = G.is_directed()

        def neighbors(node: Any, path: LazyPath) -> List[Any]:
            if node not in G:
                return []
            return list(G.successors(node)) if directed else list(G.neighbors(node))

        return neighbors

    @staticmethod
    def weight_function(
        G: nx.Graph,
        attr: str = config.DEFAULT_WEIGHT_ATTR,
        default: float = config.DEFAULT_EDGE_WEIGHT,
    ) -> Callable[[Any, Any], float]:
        """Retorna (u, v) -> G.edges[u, v][attr] (ou default se o atributo faltar); inf se a aresta não existe."""

        def weight(u: Any, v: Any) -> float:
            if not G.has_edge(u, v):
                return float("inf")
            return float(G.edges[u, v].get(attr, default))

        return weight

    @staticmethod
    def get_edge_cost(G: nx.Graph, u: Any, v: Any, attr: str = config.DEFAULT_WEIGHT_ATTR) -> float:
        """Custo da aresta (u, v); inf se não existir."""
        return GraphOperations.weight_function(G, attr)(u, v)

    @staticmethod
    def validate_path_nodes(G: nx.Graph, start: Any, goal: Any) -> None:
        """Levanta nx.NetworkXError listando os nós ausentes (start e/ou goal) e uma amostra dos nós de G."""
        absent = [node for node in (start, goal) if node not in G]
        if absent:
            sample = list(itertools.islice(G.nodes, 15))
            suffix = ", ..." if G.number_of_nodes() > len(sample) else ""
            raise nx.NetworkXError(f"Nó(s) {absent} não existem no grafo (amostra: {sample}{suffix})")

    @staticmethod
    def get_straight_line_distance(G: nx.Graph, u: Any, v: Any, pos_attr: str = config.DEFAULT_POS_ATTR) -> float:
        """Distância euclidiana entre G.nodes[u][pos_attr] e G.nodes[v][pos_attr]; inf se um dos nós faltar."""
        if u not in G or v not in G:
            return math.inf
        origin = (0, 0)
        return math.dist(G.nodes[u].get(pos_attr, origin), G.nodes[v].get(pos_attr, origin))

    @staticmethod
    def heuristic_to(G: nx.Graph, target: Any, pos_attr: str = config.DEFAULT_POS_ATTR) -> Callable[[Any], float]:
        """Heurística de um argumento (node -> distância em linha reta até target)."""

        def heuristic(node: Any) -> float:
            return GraphOperations.get_straight_line_distance(G, node, target, pos_attr)

        return heuristic

    @staticmethod
    def path_cost(G: nx.Graph, path: Sequence[Any], attr: str = config.DEFAULT_WEIGHT_ATTR) -> float:
        """Soma dos pesos ao longo de path; a aresta inexistente vale inf, então o total também."""
        return path_cost_from_list(GraphOperations.weight_function(G, attr), path)

    @staticmethod
    def a_star(
        G: nx.Graph,
        start: Any,
        goal: Any,
        heuristic: Optional[Callable[[Any, Any], float]] = None,
        attr: str = config.DEFAULT_WEIGHT_ATTR,
    ) -> Result:
        """
        A* entre dois nós de G. heuristic(n, target) segue a assinatura do nx.astar_path;
        sem heurística a busca vira Dijkstra. Retorna o Result de traverse().
        """
        GraphOperations.validate_path_nodes(G, start, goal)

        def towards_goal(node: Any) -> float:
            return heuristic(node, goal)

        logger.debug("a_star em grafo com %d nós e %d arestas: %r -> %r", G.number_of_nodes(), G.number_of_edges(), start, goal)
        return traverse(
            start,
            lambda node: node == goal,
            GraphOperations.neighbors_function(G),
            heuristic=towards_goal if heuristic is not None else None,
            weight=GraphOperations.weight_function(G, attr),
        )
