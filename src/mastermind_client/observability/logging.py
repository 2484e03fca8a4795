"""Configuração de logging estruturado (JSON ou texto)."""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

from mastermind_client.observability.context import get_correlation_id

_TEXT_FORMAT = "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s"


class CorrelationIdFilter(logging.Filter):
    """Insere correlation_id e service no record de log.

    Importante: nunca adicionar ids de jogo completos nos logs.
    """

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else get_correlation_id()
        record.service = self._service_name
        return True


def _build_formatter(fmt: str) -> logging.Formatter:
    if fmt.lower() == "text":
        return logging.Formatter(_TEXT_FORMAT)
    return JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(correlation_id)s %(service)s",
        rename_fields={"levelname": "level", "name": "logger"},
    )


def configure_logging(level: str, service_name: str, fmt: str = "json") -> None:
    """Configura o logger raiz com campos padrão do cliente.

    Logs vão para stderr; stdout fica reservado para o jogo.
    """

    handler = logging.StreamHandler()
    handler.setLevel(level.upper())
    handler.setFormatter(_build_formatter(fmt))
    handler.addFilter(CorrelationIdFilter(service_name))

    root = logging.getLogger()
    root.setLevel(level.upper())
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger simples; o filtro injeta service/correlation_id."""

    return logging.getLogger(name)


def mask_game_id(game_id: str | None) -> str | None:
    """Mascara id de jogo para logging (primeiros 8 caracteres)."""

    if not game_id:
        return None
    return game_id[:8] + "..."
