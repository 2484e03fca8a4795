"""FSM da sessão de jogo — estados, eventos e transições.

Exporta:
- GameStatus: 3 estados
- GameEvent: 4 eventos
- validate_transition / allows: validadores puros
"""

from mastermind_client.domain.game.events import GameEvent
from mastermind_client.domain.game.states import SESSION_STATES, GameStatus
from mastermind_client.domain.game.transitions import allows, validate_transition

__all__ = [
    "GameStatus",
    "GameEvent",
    "validate_transition",
    "allows",
    "SESSION_STATES",
]
