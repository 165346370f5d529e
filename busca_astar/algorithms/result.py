"""
Resultado da busca (score, path, visited) e a visão preguiçosa do caminho passada aos callbacks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple


class LazyPath:
    """
    Caminho do start até `node`, reconstruído só quando alguém itera.

    Guarda apenas a referência ao came_from da busca e o nó final; cada iteração
    percorre came_from de trás para frente de novo, então reflete o came_from no
    momento em que é consumido.
    """

    __slots__ = ("_came_from", "_node", "_start")

    def __init__(self, came_from: Dict[Any, Any], node: Any, start: Any) -> None:
        self._came_from = came_from
        self._node = node
        self._start = start

    @property
    def node(self) -> Any:
        return self._node

    def materialize(self) -> List[Any]:
        current = self._node
        full_path = [current]
        while current != self._start and current in self._came_from:
            current = self._came_from[current]
            full_path.append(current)
        full_path.reverse()
        return full_path

    def __iter__(self) -> Iterator[Any]:
        return iter(self.materialize())

    def __repr__(self) -> str:
        return f"LazyPath(node={self._node!r})"


@dataclass(frozen=True)
class Result:
    """
    score: custo total do caminho, ou None se não houver caminho.
    path: nós do start ao objetivo (tupla vazia se não houver caminho).
    visited: nós relaxados durante a busca (chaves de came_from, em ordem de inserção).
    """

    score: Optional[float]
    path: Tuple[Any, ...] = ()
    visited: Tuple[Any, ...] = ()

    @property
    def found(self) -> bool:
        return self.score is not None
