"""Testes unitários para cli/presenter.py."""

from __future__ import annotations

import pytest

from mastermind_client.cli.presenter import (
    BLACK_PEG,
    WHITE_PEG,
    Ansi,
    Presenter,
    describe_error,
)
from mastermind_client.domain.errors import (
    AlreadyActiveError,
    BadStatusError,
    InvalidGuessError,
    NetworkError,
    NoActiveGameError,
    ProtocolError,
)
from mastermind_client.domain.guess import Feedback


class TestFormatGuess:
    def test_each_digit_has_its_color(self) -> None:
        text = Presenter(color=True).format_guess("16")
        assert text == f"{Ansi.RED}1{Ansi.RESET}{Ansi.CYAN}6{Ansi.RESET}"

    def test_plain_mode(self) -> None:
        assert Presenter(color=False).format_guess("1234") == "1234"


class TestFormatFeedback:
    def test_pegs(self) -> None:
        text = Presenter(color=True).format_feedback(Feedback(black=2, white=1))
        assert BLACK_PEG * 2 in text
        assert WHITE_PEG in text
        assert text.count(BLACK_PEG) == 2
        assert text.count(WHITE_PEG) == 1

    def test_plain_letters(self) -> None:
        assert Presenter(color=False).format_feedback(Feedback(black=1, white=2)) == "BWW"

    def test_no_pegs(self) -> None:
        assert Presenter(color=True).format_feedback(Feedback(black=0, white=0)) == "-"

    def test_turn_line(self) -> None:
        line = Presenter(color=False).format_turn("1234", Feedback(black=4, white=0))
        assert line == "Guess: 1234 | Result: BBBB"


class TestColorize:
    def test_disabled(self) -> None:
        assert Presenter(color=False).colorize("x", Ansi.RED) == "x"

    def test_enabled(self) -> None:
        assert Presenter(color=True).colorize("x", Ansi.BOLD, Ansi.RED) == (
            f"{Ansi.BOLD}{Ansi.RED}x{Ansi.RESET}"
        )

    def test_plain_banner_has_no_escape_codes(self) -> None:
        presenter = Presenter(color=False)
        assert "\033[" not in presenter.banner()
        assert "\033[" not in presenter.menu()


class TestDescribeError:
    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (NetworkError(cause="timeout"), "Network error: timeout"),
            (
                BadStatusError(status_code=400, server_message="bad guess"),
                "Error: Server error (400): bad guess",
            ),
            (BadStatusError(status_code=500), "Error: Unexpected server status 500"),
            (
                BadStatusError(status_code=404, server_message="game not found"),
                "Game not found on server: game not found",
            ),
            (ProtocolError(detail="x"), "Invalid response from server: x"),
            (NoActiveGameError(), "No active game. Please start a new game first."),
            (
                InvalidGuessError(guess="9"),
                "Invalid guess. Please enter exactly 4 digits between 1 and 6.",
            ),
        ],
    )
    def test_messages(self, error: object, expected: str) -> None:
        assert describe_error(error) == expected

    def test_already_active(self) -> None:
        assert "already in progress" in describe_error(AlreadyActiveError())

    def test_unknown(self) -> None:
        assert describe_error("weird").startswith("Unexpected error")
