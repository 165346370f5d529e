"""
Fila de prioridade ordenada (fronteira / open set) usada pela busca A*.
Lista mantida ordenada por busca binária; o primeiro elemento a sair fica no fim da lista,
então pop() é O(1) e push() faz O(log n) comparações + O(n) deslocamento.
Pertinência por nó via Counter auxiliar (O(1)), mantido junto com push/pop.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Callable, Generic, Hashable, List, Optional, TypeVar

T = TypeVar("T")


def _identity(entry: Any) -> Any:
    return entry


class PriorityQueue(Generic[T]):
    """
    Fila que sempre entrega primeiro o elemento "menor" segundo o comparador.

    before(a, b) -> True se a vem antes de b; False se não; None se forem equivalentes
    (a busca binária para no índice sondado). key(entry) define a identidade usada em
    include()/``in`` (por padrão o próprio elemento).
    """

    def __init__(
        self,
        before: Callable[[T, T], Optional[bool]],
        key: Optional[Callable[[T], Hashable]] = None,
    ) -> None:
        self._queue: List[T] = []
        self._before = before
        self._key = key or _identity
        self._present: Counter = Counter()

    def push(self, entry: T) -> "PriorityQueue[T]":
        self._queue.insert(self._binary_index(entry), entry)
        self._present[self._key(entry)] += 1
        return self

    def pop(self) -> Optional[T]:
        """Remove e retorna o primeiro elemento, ou None se a fila estiver vazia."""
        if not self._queue:
            return None
        entry = self._queue.pop()
        k = self._key(entry)
        self._present[k] -= 1
        if self._present[k] <= 0:
            del self._present[k]
        return entry

    def empty(self) -> bool:
        return not self._queue

    def include(self, value: Hashable) -> bool:
        """True se algum elemento da fila tem essa identidade, independente do custo."""
        return value in self._present

    def __contains__(self, value: object) -> bool:
        return self.include(value)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)

    def _binary_index(self, entry: T) -> int:
        # Índice 0 = último a sair. Se entry vem antes do elemento sondado, vai para a direita.
        upper = len(self._queue) - 1
        lower = 0
        while upper >= lower:
            index = lower + (upper - lower) // 2
            comp = self._before(entry, self._queue[index])
            if comp is None:
                return index
            if comp:
                lower = index + 1
            else:
                upper = index - 1
        return lower
