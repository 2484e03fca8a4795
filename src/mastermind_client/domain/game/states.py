"""Estados de uma sessão de jogo do lado do cliente.

- INACTIVE: sem sessão; game_id ausente
- ACTIVE: sessão criada no servidor; palpites permitidos
- WON: código quebrado; só resta encerrar a sessão

Invariante: game_id existe sse o estado está em SESSION_STATES.
"""

from __future__ import annotations

from enum import StrEnum


class GameStatus(StrEnum):
    """Estados canônicos da sessão de jogo."""

    INACTIVE = "INACTIVE"
    """Estado inicial; também o destino de end()."""

    ACTIVE = "ACTIVE"
    """Sessão aberta no servidor, aceitando palpites."""

    WON = "WON"
    """Palpite com 4 pinos pretos; terminal até end()."""


SESSION_STATES = frozenset({GameStatus.ACTIVE, GameStatus.WON})
"""Estados em que existe sessão no servidor (game_id definido)."""
