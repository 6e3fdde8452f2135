"""
Estados de autenticação observados pelo App Coordinator.

O app só distingue dois estados: sem sessão e com sessão. Não existe
estado intermediário ("autenticando"); o fluxo de login vive dentro do
coordinator de Auth.
"""

from enum import StrEnum


class AuthState(StrEnum):
    """
    Estados de autenticação do app.

    Estados:
        - UNAUTHENTICATED: Sem sessão; deep links ficam pendentes
        - AUTHENTICATED: Sessão ativa; deep links são despachados
    """

    UNAUTHENTICATED = "UNAUTHENTICATED"
    AUTHENTICATED = "AUTHENTICATED"

    def __str__(self) -> str:
        return self.value


# Estado inicial: o app sempre começa sem sessão
DEFAULT_INITIAL_STATE: AuthState = AuthState.UNAUTHENTICATED


def is_authenticated_state(state: AuthState) -> bool:
    """Verifica se o estado representa sessão ativa."""
    return state is AuthState.AUTHENTICATED


def state_for(is_authenticated: bool) -> AuthState:
    """
    Converte o booleano da fonte de autenticação em estado.

    Args:
        is_authenticated: Valor publicado pelo serviço de auth

    Returns:
        AuthState correspondente
    """
    return AuthState.AUTHENTICATED if is_authenticated else AuthState.UNAUTHENTICATED


def is_valid_state(state: AuthState) -> bool:
    """
    Verifica se o valor é um estado válido do enum.

    Args:
        state: Estado a ser verificado

    Returns:
        True se é um AuthState válido
    """
    return isinstance(state, AuthState)
