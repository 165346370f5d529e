"""
Valores padrão da busca. Não há variáveis de ambiente nem arquivos: tudo é constante de módulo.
"""

from __future__ import annotations

from typing import Optional

# Contribuição de peso/heurística quando o chamador não fornece a função (ausente => 0, nunca "pula o termo")
DEFAULT_WEIGHT = 0.0
DEFAULT_HEURISTIC = 0.0

# g_score de um nó ainda não visto
UNSEEN_COST = float("inf")

# Limite de expansões (None = sem limite)
DEFAULT_MAX_EXPANSIONS: Optional[int] = None

# Atributos usados pelo adaptador de grafos NetworkX
DEFAULT_WEIGHT_ATTR = "weight"
DEFAULT_EDGE_WEIGHT = 1.0
DEFAULT_POS_ATTR = "pos"
