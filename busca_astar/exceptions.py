"""Exceções da busca A*."""

from __future__ import annotations

from typing import Any, List


class TraversalError(Exception):
    """Erro base da busca."""


class InvalidTraversalArguments(TraversalError, ValueError):
    """Parâmetros obrigatórios ausentes ou callbacks inválidos (levantado antes de qualquer expansão)."""


class ExpansionLimitError(TraversalError):
    """O número de expansões passou de max_expansions sem atingir o objetivo."""

    def __init__(self, expansions: int, visited: List[Any]) -> None:
        super().__init__(f"Limite de expansões atingido ({expansions}) sem alcançar o objetivo")
        self.expansions = expansions
        self.visited = visited
