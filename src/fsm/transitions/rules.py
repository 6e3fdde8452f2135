"""
Regras de transição válidas entre estados de autenticação.

O grafo é mínimo: login leva a AUTHENTICATED; logout, expiração de
sessão ou sign-out da fonte levam a UNAUTHENTICATED.
"""

from fsm.states.auth import AuthState

# Tipagem explícita do mapa de transições
TransitionMap = dict[AuthState, frozenset[AuthState]]

# Mapa de transições válidas
# Chave: estado de origem
# Valor: conjunto de estados de destino permitidos
VALID_TRANSITIONS: TransitionMap = {
    # Login bem-sucedido
    AuthState.UNAUTHENTICATED: frozenset({AuthState.AUTHENTICATED}),
    # Logout, expiração de sessão ou sign-out externo
    AuthState.AUTHENTICATED: frozenset({AuthState.UNAUTHENTICATED}),
}

# Gatilhos aceitos pela máquina (registrados no histórico)
TRIGGERS: frozenset[str] = frozenset({
    "login_succeeded",
    "auth_source_signed_out",
    "logout",
    "session_expired",
})


def get_valid_targets(state: AuthState) -> frozenset[AuthState]:
    """
    Retorna os estados de destino válidos para um estado de origem.

    Args:
        state: Estado de origem

    Returns:
        Conjunto de estados de destino permitidos
    """
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: AuthState, to_state: AuthState) -> bool:
    """
    Verifica se uma transição é válida segundo as regras definidas.

    Args:
        from_state: Estado de origem
        to_state: Estado de destino

    Returns:
        True se a transição é permitida, False caso contrário
    """
    return to_state in get_valid_targets(from_state)


def validate_transition_map() -> list[str]:
    """
    Valida a integridade do mapa de transições.

    Verifica:
    - Todos os estados do enum estão no mapa
    - Nenhum estado transita para si mesmo
    - Nenhuma transição aponta para estado inexistente

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for state in AuthState:
        if state not in VALID_TRANSITIONS:
            errors.append(f"Estado {state.name} ausente em VALID_TRANSITIONS")

    for from_state, targets in VALID_TRANSITIONS.items():
        if from_state in targets:
            errors.append(f"Transição reflexiva declarada: {from_state.name}")
        for target in targets:
            if not isinstance(target, AuthState):
                errors.append(
                    f"Transição {from_state.name} → {target}: destino inválido"
                )

    return errors
