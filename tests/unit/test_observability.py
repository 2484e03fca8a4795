"""Testes para observability: correlation-id, filtro de logging e timing."""

from __future__ import annotations

import json
import logging

import pytest

from mastermind_client.observability.context import correlation_scope, get_correlation_id
from mastermind_client.observability.logging import (
    CorrelationIdFilter,
    _build_formatter,
    configure_logging,
    mask_game_id,
)
from mastermind_client.observability.timing import timed


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, msg, None, None)


class TestCorrelationScope:
    """Correlation id em ContextVar."""

    def test_default_empty(self) -> None:
        assert get_correlation_id() == ""

    def test_scope_sets_and_restores(self) -> None:
        with correlation_scope("game-123"):
            assert get_correlation_id() == "game-123"
            with correlation_scope("inner"):
                assert get_correlation_id() == "inner"
            assert get_correlation_id() == "game-123"
        assert get_correlation_id() == ""

    @pytest.mark.asyncio
    async def test_propagates_to_awaited_coroutines(self) -> None:
        async def inner() -> str:
            return get_correlation_id()

        with correlation_scope("async-id"):
            assert await inner() == "async-id"


class TestCorrelationIdFilter:
    """Filtro injeta service e correlation_id."""

    def test_injects_fields(self) -> None:
        record = _record()
        with correlation_scope("abc12345..."):
            assert CorrelationIdFilter("svc").filter(record) is True
        assert record.correlation_id == "abc12345..."  # type: ignore[attr-defined]
        assert record.service == "svc"  # type: ignore[attr-defined]

    def test_keeps_explicit_correlation_id(self) -> None:
        record = _record()
        record.correlation_id = "explicit"  # type: ignore[attr-defined]
        with correlation_scope("ambient"):
            CorrelationIdFilter("svc").filter(record)
        assert record.correlation_id == "explicit"  # type: ignore[attr-defined]


class TestFormatters:
    """JSON e texto."""

    def test_json_formatter_renames_fields(self) -> None:
        record = _record("json line")
        CorrelationIdFilter("svc").filter(record)

        payload = json.loads(_build_formatter("json").format(record))

        assert payload["message"] == "json line"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "test"
        assert payload["service"] == "svc"

    def test_text_formatter(self) -> None:
        record = _record("text line")
        with correlation_scope("cid"):
            CorrelationIdFilter("svc").filter(record)

        line = _build_formatter("text").format(record)

        assert "INFO [cid] test: text line" in line

    def test_configure_logging_replaces_root_handlers(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging("debug", "svc", "text")
            assert len(root.handlers) == 1
            assert root.level == logging.DEBUG
            assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)


class TestMaskGameId:
    def test_masks(self) -> None:
        assert mask_game_id("0123456789abcdef") == "01234567..."

    def test_none(self) -> None:
        assert mask_game_id(None) is None
        assert mask_game_id("") is None


class TestTimed:
    """timed() registra latência mesmo com exceção."""

    def test_logs_elapsed(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="mastermind_client.observability.timing"):
            with timed("create_session", method="POST"):
                pass

        record = next(r for r in caplog.records if r.getMessage() == "round_trip_latency")
        assert record.operation == "create_session"  # type: ignore[attr-defined]
        assert record.method == "POST"  # type: ignore[attr-defined]
        assert record.elapsed_ms >= 0  # type: ignore[attr-defined]

    def test_block_can_attach_outcome(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="mastermind_client.observability.timing"):
            with timed("delete_session") as latency:
                latency["status_code"] = 204

        record = next(r for r in caplog.records if r.getMessage() == "round_trip_latency")
        assert record.status_code == 204  # type: ignore[attr-defined]

    def test_logs_on_exception(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="mastermind_client.observability.timing"):
            with pytest.raises(RuntimeError), timed("submit_guess"):
                raise RuntimeError("boom")

        record = next(r for r in caplog.records if r.getMessage() == "round_trip_latency")
        assert record.outcome == "RuntimeError"  # type: ignore[attr-defined]
