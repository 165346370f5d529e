"""
Métricas de avaliação da busca:

- Latência: tempo médio de uma chamada em milissegundos.
- Custo de caminho a partir de uma função de custo por aresta.
- Expansões: VisitRecorder, usado como callback `visit`, conta nós expandidos e re-expansões
  (entradas velhas da fronteira, já que não há decrease-key).
"""

import time
from collections import Counter
from typing import Any, Callable, List, Sequence, Tuple


def measure_latency_ms(
    fn: Callable[[], Any],
    repetitions: int = 1,
) -> Tuple[float, Any]:
    """
    Executa fn() `repetitions` vezes e devolve (média em ms, resultado da última execução).
    Útil para comparar traverse() com e sem heurística sobre o mesmo grafo.
    """
    if repetitions < 1:
        raise ValueError(f"repetitions deve ser >= 1, recebido {repetitions}")
    result = None
    began = time.perf_counter()
    for _ in range(repetitions):
        result = fn()
    total_ms = (time.perf_counter() - began) * 1000
    return total_ms / repetitions, result


def path_cost_from_list(
    cost_fn: Callable[[Any, Any], float],
    path: Sequence[Any],
) -> float:
    """Soma cost_fn(u, v) para cada par consecutivo de path (0.0 para caminhos com menos de dois nós)."""
    nodes = list(path)
    return float(sum(cost_fn(u, v) for u, v in zip(nodes, nodes[1:])))


class VisitRecorder:
    """
    Callback de visita que registra a ordem de expansão.
    Com keep_paths=True também materializa o caminho de cada visita (mais caro).
    """

    def __init__(self, keep_paths: bool = False) -> None:
        self.keep_paths = keep_paths
        self.nodes: List[Any] = []
        self.paths: List[List[Any]] = []

    def __call__(self, node: Any, path: Any) -> None:
        self.nodes.append(node)
        if self.keep_paths:
            self.paths.append(list(path))

    @property
    def expansions(self) -> int:
        return len(self.nodes)

    @property
    def reexpanded(self) -> List[Any]:
        """Nós expandidos mais de uma vez, na ordem da primeira expansão."""
        counts = Counter(self.nodes)
        return [node for node in counts if counts[node] > 1]
