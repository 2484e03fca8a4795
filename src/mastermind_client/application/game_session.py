"""GameSession — máquina de estados da sessão de jogo.

Dona exclusiva do game_id corrente. Regras:
- start(): só a partir de INACTIVE; nunca sobrescreve sessão existente
- guess(): só a partir de ACTIVE; valida localmente antes da rede
- end(): a partir de ACTIVE ou WON; limpa game_id só após 204

Em qualquer falha o estado fica como estava, então a mesma operação pode
ser repetida. Operações são serializadas por um asyncio.Lock.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from mastermind_client.domain.errors import (
    AlreadyActiveError,
    ApiError,
    EndError,
    GuessError,
    InvalidGuessError,
    NoActiveGameError,
    StartError,
)
from mastermind_client.domain.game import GameEvent, GameStatus, allows, validate_transition
from mastermind_client.domain.guess import Feedback, is_valid_guess
from mastermind_client.domain.result import Err, Ok, Result
from mastermind_client.observability.context import correlation_scope
from mastermind_client.observability.logging import get_logger, mask_game_id


class GameTransport(Protocol):
    """Contrato do cliente de transporte consumido pela sessão."""

    async def create_session(self) -> Result[str, ApiError]: ...

    async def submit_guess(self, game_id: str, guess: str) -> Result[Feedback, ApiError]: ...

    async def delete_session(self, game_id: str) -> Result[None, ApiError]: ...


class GameSession:
    """Sessão de jogo do cliente (uma por instância, nenhuma global)."""

    def __init__(
        self,
        transport: GameTransport,
        logger: logging.Logger | None = None,
    ) -> None:
        self._transport = transport
        self._logger = logger or get_logger(__name__)
        self._status = GameStatus.INACTIVE
        self._game_id: str | None = None
        self._attempts = 0
        self._lock = asyncio.Lock()

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def game_id(self) -> str | None:
        return self._game_id

    @property
    def attempts(self) -> int:
        """Palpites pontuados pelo servidor na sessão corrente."""
        return self._attempts

    def _apply(self, event: GameEvent) -> None:
        is_valid, next_state, error = validate_transition(self._status, event)
        if not is_valid or next_state is None:
            # Só acontece se a tabela e as guardas abaixo divergirem
            raise RuntimeError(error)
        self._logger.debug(
            "Game transition",
            extra={
                "current_state": self._status,
                "event": event,
                "next_state": next_state,
            },
        )
        self._status = next_state

    async def start(self) -> Result[None, StartError]:
        """Cria sessão no servidor e passa para ACTIVE."""
        async with self._lock:
            if not allows(self._status, GameEvent.SESSION_CREATED):
                self._logger.info("start rejected", extra={"status": self._status})
                return Err(AlreadyActiveError())

            result = await self._transport.create_session()
            if isinstance(result, Err):
                self._logger.info(
                    "start failed",
                    extra={"error_type": type(result.error).__name__},
                )
                return result

            self._game_id = result.value
            self._attempts = 0
            self._apply(GameEvent.SESSION_CREATED)
            with correlation_scope(mask_game_id(self._game_id) or ""):
                self._logger.info("Game started")
            return Ok(None)

    async def guess(self, candidate: str) -> Result[Feedback, GuessError]:
        """Envia palpite; 4 pinos pretos passam a sessão para WON."""
        async with self._lock:
            if self._game_id is None or not allows(self._status, GameEvent.GUESS_SCORED):
                return Err(NoActiveGameError())

            if not is_valid_guess(candidate):
                return Err(InvalidGuessError(guess=candidate))

            with correlation_scope(mask_game_id(self._game_id) or ""):
                result = await self._transport.submit_guess(self._game_id, candidate)
                if isinstance(result, Err):
                    self._logger.info(
                        "guess failed",
                        extra={"error_type": type(result.error).__name__},
                    )
                    return result

                feedback = result.value
                self._attempts += 1
                if feedback.is_perfect:
                    self._apply(GameEvent.CODE_CRACKED)
                    self._logger.info("Code cracked", extra={"attempts": self._attempts})
                else:
                    self._apply(GameEvent.GUESS_SCORED)
                return Ok(feedback)

    async def end(self) -> Result[None, EndError]:
        """Remove sessão no servidor e volta para INACTIVE."""
        async with self._lock:
            if self._game_id is None or not allows(self._status, GameEvent.SESSION_DELETED):
                return Err(NoActiveGameError())

            with correlation_scope(mask_game_id(self._game_id) or ""):
                result = await self._transport.delete_session(self._game_id)
                if isinstance(result, Err):
                    self._logger.info(
                        "end failed",
                        extra={"error_type": type(result.error).__name__},
                    )
                    return result

                self._apply(GameEvent.SESSION_DELETED)
                self._game_id = None
                self._logger.info("Game ended")
                return Ok(None)
