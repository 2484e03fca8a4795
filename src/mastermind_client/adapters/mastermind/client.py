"""Adaptador de protocolo do servidor Mastermind.

Traduz as três operações remotas em resultados tipados:
- create_session: POST /game → Ok(game_id)
- submit_guess: POST /guess → Ok(Feedback)
- delete_session: DELETE /game/{game_id} → Ok(None), sucesso só com 204

Sem estado próprio além do endpoint base: o game_id chega por parâmetro
em cada chamada. Cada chamada faz exatamente uma ida e volta; nenhuma
repetição automática.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from mastermind_client.adapters.mastermind.models import (
    CreateGameResponse,
    ErrorResponse,
    GuessRequest,
    GuessResponse,
)
from mastermind_client.domain.errors import (
    ApiError,
    BadStatusError,
    NetworkError,
    ProtocolError,
)
from mastermind_client.domain.guess import Feedback
from mastermind_client.domain.result import Err, Ok, Result
from mastermind_client.infra.http import (
    HttpClient,
    HttpDecodingError,
    HttpTransportError,
    create_http_client,
)
from mastermind_client.observability.logging import get_logger, mask_game_id
from mastermind_client.observability.timing import timed

if TYPE_CHECKING:
    from mastermind_client.config.settings import Settings

logger: logging.Logger = get_logger(__name__)

# Status em que POST /guess devolve {"error": ...} documentado
_GUESS_ERROR_STATUSES = frozenset({400, 404})


def _extract_server_message(response: httpx.Response) -> str | None:
    """Extrai mensagem de {"error": string}; None se o corpo não segue o formato."""
    try:
        return ErrorResponse.model_validate_json(response.content).error
    except ValidationError:
        return None


def _protocol_error(operation: str, exc: ValidationError) -> ProtocolError:
    """Resume erro de validação sem copiar o corpo recebido."""
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ())) or "body"
    detail = f"{operation}: {location}: {first.get('msg', 'malformed body')}"
    logger.info(
        "Resposta fora do contrato",
        extra={"operation": operation, "location": location},
    )
    return ProtocolError(detail)


def _bad_status(operation: str, status_code: int, message: str | None) -> BadStatusError:
    logger.info(
        "Status fora do contrato",
        extra={
            "operation": operation,
            "status_code": status_code,
            "has_server_message": message is not None,
        },
    )
    return BadStatusError(status_code=status_code, server_message=message)


class MastermindApiClient:
    """Cliente de transporte do jogo (sem estado de sessão).

    Uso típico:
        async with MastermindApiClient(base_url, http) as api:
            result = await api.create_session()
    """

    def __init__(self, base_url: str, http: HttpClient) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = http

    @property
    def base_url(self) -> str:
        return self._base_url

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> MastermindApiClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _send(
        self, operation: str, method: str, url: str, **kwargs: Any
    ) -> httpx.Response | ApiError:
        """Executa a ida e volta.

        Falha de transporte vira NetworkError; corpo impossível de decodificar
        vira ProtocolError (a resposta chegou, mas fora do contrato).
        """
        with timed(operation, method=method) as latency:
            try:
                if method == "POST":
                    response = await self._http.post(url, **kwargs)
                else:
                    response = await self._http.delete(url, **kwargs)
            except HttpTransportError as exc:
                latency["outcome"] = "network_error"
                return NetworkError(cause=exc.cause)
            except HttpDecodingError:
                latency["outcome"] = "undecodable_body"
                return ProtocolError(f"{operation}: response body could not be decoded")
            latency["status_code"] = response.status_code
            return response

    async def create_session(self) -> Result[str, ApiError]:
        """Cria sessão no servidor (POST /game, sem corpo)."""
        response = await self._send("create_session", "POST", f"{self._base_url}/game")
        if not isinstance(response, httpx.Response):
            return Err(response)

        if not response.is_success:
            message = _extract_server_message(response)
            return Err(_bad_status("create_session", response.status_code, message))

        try:
            created = CreateGameResponse.model_validate_json(response.content)
        except ValidationError as exc:
            return Err(_protocol_error("create_session", exc))

        logger.debug("Sessão criada", extra={"game_id": mask_game_id(created.game_id)})
        return Ok(created.game_id)

    async def submit_guess(self, game_id: str, guess: str) -> Result[Feedback, ApiError]:
        """Envia palpite (POST /guess).

        200 → Feedback; 400/404 → BadStatusError com mensagem do servidor;
        qualquer outro status → BadStatusError sem mensagem.
        """
        payload = GuessRequest(game_id=game_id, guess=guess).model_dump()
        response = await self._send(
            "submit_guess", "POST", f"{self._base_url}/guess", json=payload
        )
        if not isinstance(response, httpx.Response):
            return Err(response)

        if response.status_code in _GUESS_ERROR_STATUSES:
            message = _extract_server_message(response)
            return Err(_bad_status("submit_guess", response.status_code, message))

        if response.status_code != httpx.codes.OK:
            return Err(_bad_status("submit_guess", response.status_code, None))

        try:
            scored = GuessResponse.model_validate_json(response.content)
        except ValidationError as exc:
            return Err(_protocol_error("submit_guess", exc))

        return Ok(Feedback(black=scored.black, white=scored.white))

    async def delete_session(self, game_id: str) -> Result[None, ApiError]:
        """Remove sessão (DELETE /game/{game_id}); sucesso estritamente 204.

        O corpo da resposta nunca é lido.
        """
        url = f"{self._base_url}/game/{quote(game_id, safe='')}"
        response = await self._send("delete_session", "DELETE", url)
        if not isinstance(response, httpx.Response):
            return Err(response)

        if response.status_code != httpx.codes.NO_CONTENT:
            return Err(_bad_status("delete_session", response.status_code, None))

        logger.debug("Sessão removida", extra={"game_id": mask_game_id(game_id)})
        return Ok(None)


def create_api_client(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> MastermindApiClient:
    """Factory do cliente de transporte a partir de Settings."""
    if settings is None:
        from mastermind_client.config.settings import get_settings

        settings = get_settings()

    http = create_http_client(settings, transport=transport)
    return MastermindApiClient(settings.api_base_url, http)
