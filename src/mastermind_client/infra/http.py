"""Cliente HTTP centralizado com timeout e logging.

Este módulo fornece o cliente HTTP usado pelo adaptador do servidor
Mastermind, com:
- Uma única tentativa por requisição (quem chama decide se repete)
- Timeout limitado e configurável
- Logging estruturado (sem ids completos de jogo)
- Injeção de headers padrão

Respostas não-2xx são devolvidas, não levantadas: a interpretação do
status pertence ao adaptador de protocolo. Falhas de transporte viram
HttpTransportError; corpo que o httpx não consegue decodificar (ex.: gzip
corrompido) vira HttpDecodingError.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from mastermind_client.observability.logging import get_logger

if TYPE_CHECKING:
    from mastermind_client.config.settings import Settings

logger: logging.Logger = get_logger(__name__)

# Ids de jogo aparecem no path de DELETE /game/{game_id}
_GAME_PATH_PATTERN = re.compile(r"/game/([^/?#]{8})[^/?#]*")


def _sanitize_url(url: str) -> str:
    """Trunca ids de jogo na URL para logging seguro."""
    return _GAME_PATH_PATTERN.sub(r"/game/\1...", url)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP.

    `transport` existe para testes (httpx.MockTransport); em produção fica None.
    """

    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None


class HttpTransportError(Exception):
    """Falha de transporte (DNS, conexão recusada, timeout, transferência interrompida)."""

    def __init__(self, message: str, cause: str) -> None:
        super().__init__(message)
        self.cause = cause


class HttpDecodingError(Exception):
    """Resposta recebida, mas o corpo não pôde ser decodificado (content-encoding inválido)."""


def _log_request_start(method: str, url: str) -> None:
    logger.debug(
        "Executando requisição HTTP",
        extra={"method": method, "url": _sanitize_url(url)},
    )


def _log_response(method: str, url: str, status_code: int) -> None:
    level = logging.DEBUG if 200 <= status_code < 300 else logging.INFO
    logger.log(
        level,
        "Resposta HTTP recebida",
        extra={
            "method": method,
            "url": _sanitize_url(url),
            "status_code": status_code,
        },
    )


def _describe_transport_error(exc: httpx.TransportError) -> str:
    """Descrição curta da falha de transporte, sem payloads."""
    if isinstance(exc, httpx.TimeoutException):
        return "timeout"
    if isinstance(exc, httpx.ConnectError):
        return "connection failed"
    if isinstance(exc, httpx.RemoteProtocolError):
        return "transfer interrupted"
    return type(exc).__name__


class HttpClient:
    """Cliente HTTP assíncrono de tentativa única.

    Uso típico:
        async with HttpClient(config) as client:
            response = await client.post(url, json=payload)
    """

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()
        self._client: httpx.AsyncClient | None = None

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    async def _get_client(self) -> httpx.AsyncClient:
        """Retorna cliente httpx (lazy loading, conexão reaproveitada)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._config.timeout_seconds),
                headers=self._config.default_headers,
                verify=self._config.verify_ssl,
                transport=self._config.transport,
            )
        return self._client

    async def close(self) -> None:
        """Fecha o cliente e libera recursos."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Executa exatamente uma requisição.

        Raises:
            HttpTransportError: se a troca não se completar
            HttpDecodingError: se o corpo recebido não puder ser decodificado
        """
        client = await self._get_client()
        _log_request_start(method, url)

        try:
            response = await client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            cause = _describe_transport_error(exc)
            logger.info(
                "Falha de transporte HTTP",
                extra={
                    "method": method,
                    "url": _sanitize_url(url),
                    "error_type": type(exc).__name__,
                },
            )
            raise HttpTransportError(f"{method} falhou: {cause}", cause=cause) from exc
        except httpx.DecodingError as exc:
            logger.info(
                "Corpo HTTP não decodificável",
                extra={"method": method, "url": _sanitize_url(url)},
            )
            raise HttpDecodingError(f"{method} devolveu corpo ilegível") from exc

        _log_response(method, url, response.status_code)
        return response

    # Métodos de conveniência

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        """Executa GET."""
        return await self._request("GET", url, **kwargs)

    async def post(
        self,
        url: str,
        json: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Executa POST (sem corpo quando json é None)."""
        if json is not None:
            kwargs["json"] = json
        return await self._request("POST", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        """Executa DELETE."""
        return await self._request("DELETE", url, **kwargs)


def create_http_client(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> HttpClient:
    """Factory para criar cliente HTTP configurado.

    Args:
        settings: Configurações da aplicação. Se None, usa get_settings()
        transport: Transport alternativo (testes)
    """
    if settings is None:
        from mastermind_client.config.settings import get_settings

        settings = get_settings()

    config = HttpClientConfig(
        timeout_seconds=float(settings.request_timeout_seconds),
        default_headers={
            "User-Agent": settings.user_agent,
            "Accept": "application/json",
        },
        verify_ssl=settings.verify_ssl,
        transport=transport,
    )

    logger.debug(
        "Cliente HTTP criado",
        extra={"timeout_seconds": config.timeout_seconds},
    )

    return HttpClient(config)
