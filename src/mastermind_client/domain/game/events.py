"""Eventos que disparam transições da sessão de jogo.

Cada evento corresponde a uma resposta bem-sucedida do servidor.
Falhas não geram evento: o estado fica como estava.
"""

from __future__ import annotations

from enum import StrEnum


class GameEvent(StrEnum):
    """Eventos canônicos do ciclo de vida da sessão."""

    SESSION_CREATED = "SESSION_CREATED"
    """POST /game devolveu game_id."""

    GUESS_SCORED = "GUESS_SCORED"
    """POST /guess devolveu feedback com black < 4."""

    CODE_CRACKED = "CODE_CRACKED"
    """POST /guess devolveu feedback com black == 4."""

    SESSION_DELETED = "SESSION_DELETED"
    """DELETE /game/{id} devolveu 204."""
