"""Latência das idas e voltas ao servidor Mastermind."""

from __future__ import annotations

import contextlib
import time
from collections.abc import Generator
from typing import Any

from mastermind_client.observability.logging import get_logger

logger = get_logger(__name__)


@contextlib.contextmanager
def timed(operation: str, **fields: Any) -> Generator[dict[str, Any], None, None]:
    """Mede um bloco e registra `round_trip_latency` ao sair.

    O dicionário entregue ao bloco vai para o registro, então quem chama
    pode anexar o desfecho depois de medir:

        with timed("submit_guess", method="POST") as latency:
            response = await http.post(url, json=payload)
            latency["status_code"] = response.status_code

    Se o bloco levantar, o registro sai mesmo assim com `outcome` igual ao
    nome da exceção (a menos que o bloco já tenha definido um).
    """
    record: dict[str, Any] = dict(fields)
    start = time.perf_counter()
    try:
        yield record
    except BaseException as exc:
        record.setdefault("outcome", type(exc).__name__)
        raise
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug(
            "round_trip_latency",
            extra={
                **record,
                "operation": operation,
                "elapsed_ms": round(elapsed_ms, 2),
            },
        )
