"""
Exports públicos do módulo routing/types.

Tipos de estado de navegação (itens, pedidos de view e snapshots).
"""

from routing.types.navigation import NavigationItem, NavigationSnapshot, ViewHandle

__all__ = [
    "NavigationItem",
    "NavigationSnapshot",
    "ViewHandle",
]
