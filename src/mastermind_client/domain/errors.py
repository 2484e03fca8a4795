"""Taxonomia fechada de erros do cliente Mastermind.

Erros de protocolo (ApiError) vêm do adaptador HTTP:
- NetworkError: falha de transporte; nunca repetida internamente
- BadStatusError: status fora do contrato da operação
- ProtocolError: status de sucesso com corpo fora do formato esperado

Erros locais vêm da máquina de estados, antes de qualquer chamada de rede,
e nunca são embrulhados como ApiError.

Todos são valores (dataclasses imutáveis), não exceções: circulam dentro
de Err(...).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from mastermind_client.domain.guess import GUESS_ALPHABET, GUESS_LENGTH

# === Erros de protocolo ===


@dataclass(frozen=True, slots=True)
class NetworkError:
    """Falha de transporte (DNS, conexão recusada, timeout, transferência interrompida)."""

    cause: str

    @property
    def message(self) -> str:
        return f"Network error: {self.cause}"


@dataclass(frozen=True, slots=True)
class BadStatusError:
    """Servidor respondeu com status fora do contrato da operação.

    server_message só é preenchido quando o corpo segue {"error": string}.
    """

    status_code: int
    server_message: str | None = None

    @property
    def message(self) -> str:
        if self.server_message:
            return f"Server error ({self.status_code}): {self.server_message}"
        return f"Unexpected server status {self.status_code}"


@dataclass(frozen=True, slots=True)
class ProtocolError:
    """Corpo de resposta não corresponde ao formato esperado."""

    detail: str

    @property
    def message(self) -> str:
        return f"Invalid response from server: {self.detail}"


ApiError = Union[NetworkError, BadStatusError, ProtocolError]


# === Erros locais (máquina de estados) ===


@dataclass(frozen=True, slots=True)
class AlreadyActiveError:
    """start() chamado com sessão já ativa ou vencida."""

    @property
    def message(self) -> str:
        return "A game is already in progress. End it before starting a new one."


@dataclass(frozen=True, slots=True)
class NoActiveGameError:
    """Operação exige sessão e não há nenhuma."""

    @property
    def message(self) -> str:
        return "No active game. Please start a new game first."


@dataclass(frozen=True, slots=True)
class InvalidGuessError:
    """Palpite rejeitado pelo validador local."""

    guess: str

    @property
    def message(self) -> str:
        return (
            f"Invalid guess. Please enter exactly {GUESS_LENGTH} digits "
            f"between {GUESS_ALPHABET[0]} and {GUESS_ALPHABET[-1]}."
        )


StartError = Union[AlreadyActiveError, ApiError]
GuessError = Union[NoActiveGameError, InvalidGuessError, ApiError]
EndError = Union[NoActiveGameError, ApiError]
