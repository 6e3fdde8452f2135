"""
Exports públicos do módulo routing/ancestry.

Tabelas explícitas de reconstrução de pilha e de views por rota.
"""

from routing.ancestry.rules import (
    REPLAY_CHAINS,
    VIEW_NAMES,
    replay_chain,
    validate_replay_tables,
    validate_view_tables,
    view_name,
)

__all__ = [
    "REPLAY_CHAINS",
    "VIEW_NAMES",
    "replay_chain",
    "validate_replay_tables",
    "validate_view_tables",
    "view_name",
]
