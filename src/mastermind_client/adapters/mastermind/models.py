"""Modelos de wire do servidor Mastermind.

Responsabilidade:
- Validar corpos JSON recebidos (nunca confiar em formato do servidor)
- Serializar o corpo de POST /guess
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class CreateGameResponse(BaseModel):
    """Corpo de sucesso de POST /game."""

    game_id: StrictStr = Field(min_length=1)


class GuessRequest(BaseModel):
    """Corpo de POST /guess."""

    model_config = ConfigDict(frozen=True)

    game_id: str
    guess: str


class GuessResponse(BaseModel):
    """Corpo de sucesso de POST /guess (200)."""

    black: StrictInt = Field(ge=0)
    white: StrictInt = Field(ge=0)


class ErrorResponse(BaseModel):
    """Corpo de erro documentado: {"error": string}."""

    error: StrictStr
