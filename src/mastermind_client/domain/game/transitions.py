"""Tabela de transições da sessão de jogo.

- TRANSITIONS[(current_state, event)] = next_state
- Validação pura: sem side effects
"""

from __future__ import annotations

from mastermind_client.domain.game.events import GameEvent
from mastermind_client.domain.game.states import GameStatus

TRANSITIONS: dict[tuple[GameStatus, GameEvent], GameStatus] = {
    # === INACTIVE → ... ===
    (GameStatus.INACTIVE, GameEvent.SESSION_CREATED): GameStatus.ACTIVE,
    # === ACTIVE → ... ===
    (GameStatus.ACTIVE, GameEvent.GUESS_SCORED): GameStatus.ACTIVE,
    (GameStatus.ACTIVE, GameEvent.CODE_CRACKED): GameStatus.WON,
    (GameStatus.ACTIVE, GameEvent.SESSION_DELETED): GameStatus.INACTIVE,
    # === WON → ... (só encerramento) ===
    (GameStatus.WON, GameEvent.SESSION_DELETED): GameStatus.INACTIVE,
}


def validate_transition(
    current_state: GameStatus, event: GameEvent
) -> tuple[bool, GameStatus | None, str]:
    """Valida se uma transição é permitida.

    Retorna:
    - (True, next_state, ""): transição válida
    - (False, None, motivo): transição inválida

    Nunca lança exceção; apenas valida.
    """
    next_state = TRANSITIONS.get((current_state, event))
    if next_state is None:
        return False, None, f"No transition from {current_state} on event {event}"
    return True, next_state, ""


def allows(current_state: GameStatus, event: GameEvent) -> bool:
    """Atalho: True se o evento tem transição a partir do estado."""
    return (current_state, event) in TRANSITIONS
