"""Apresentação no terminal: cores ANSI, pinos e mensagens de erro.

Só consome valores tipados da GameSession (Feedback, erros); nunca fala
com o transporte.
"""

from __future__ import annotations

from mastermind_client.domain.errors import (
    AlreadyActiveError,
    BadStatusError,
    InvalidGuessError,
    NetworkError,
    NoActiveGameError,
    ProtocolError,
)
from mastermind_client.domain.guess import Feedback


class Ansi:
    """Códigos ANSI usados pelo cliente."""

    RESET = "\033[0m"
    BLACK = "\033[30m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    BOLD = "\033[1m"


DIGIT_COLORS: dict[str, str] = {
    "1": Ansi.RED,
    "2": Ansi.GREEN,
    "3": Ansi.YELLOW,
    "4": Ansi.BLUE,
    "5": Ansi.MAGENTA,
    "6": Ansi.CYAN,
}

BLACK_PEG = "●"
WHITE_PEG = "○"


class Presenter:
    """Formata a saída do jogo, com ou sem cores."""

    def __init__(self, color: bool = True) -> None:
        self.color = color

    def colorize(self, text: str, *styles: str) -> str:
        if not self.color or not styles:
            return text
        return f"{''.join(styles)}{text}{Ansi.RESET}"

    def format_guess(self, guess: str) -> str:
        """Cada dígito 1-6 na sua cor; outros caracteres intactos."""
        if not self.color:
            return guess
        return "".join(
            self.colorize(char, DIGIT_COLORS[char]) if char in DIGIT_COLORS else char
            for char in guess
        )

    def format_feedback(self, feedback: Feedback) -> str:
        """● por pino preto, ○ por pino branco (B/W sem cores)."""
        if not self.color:
            return "B" * feedback.black + "W" * feedback.white
        black = self.colorize(BLACK_PEG * feedback.black, Ansi.BLACK) if feedback.black else ""
        white = self.colorize(WHITE_PEG * feedback.white, Ansi.WHITE) if feedback.white else ""
        return black + white or "-"

    def format_turn(self, guess: str, feedback: Feedback) -> str:
        return f"Guess: {self.format_guess(guess)} | Result: {self.format_feedback(feedback)}"

    def banner(self) -> str:
        rule = self.colorize("=================================", Ansi.BOLD, Ansi.CYAN)
        title = self.colorize("        MASTERMIND GAME         ", Ansi.BOLD, Ansi.CYAN)
        lines = [
            rule,
            title,
            rule,
            self.colorize("Welcome to Mastermind!", Ansi.YELLOW),
            "Try to guess the 4-digit code.",
            "Each digit is between 1 and 6.",
            f"{BLACK_PEG if self.color else 'B'} = Correct digit in correct position",
            f"{WHITE_PEG if self.color else 'W'} = Correct digit in wrong position",
            "Type 'exit' at any time to quit.",
            "",
        ]
        return "\n".join(lines)

    def menu(self) -> str:
        return "\n".join(
            [
                self.colorize("Choose an option:", Ansi.BOLD, Ansi.GREEN),
                "1. Start a new game",
                "2. Exit",
            ]
        )

    def info(self, text: str) -> str:
        return self.colorize(text, Ansi.CYAN)

    def success(self, text: str) -> str:
        return self.colorize(text, Ansi.BOLD, Ansi.GREEN)

    def warning(self, text: str) -> str:
        return self.colorize(text, Ansi.YELLOW)

    def error(self, text: str) -> str:
        return self.colorize(text, Ansi.RED)

    def describe_error(self, error: object) -> str:
        """Linha legível para qualquer variante de erro."""
        return self.error(describe_error(error))


def describe_error(error: object) -> str:
    """Mensagem de uma variante de erro da sessão."""
    if isinstance(error, BadStatusError):
        if error.status_code == 404:
            return f"Game not found on server: {error.server_message or 'unknown game'}"
        return f"Error: {error.message}"
    if isinstance(
        error,
        (NetworkError, ProtocolError, AlreadyActiveError, NoActiveGameError, InvalidGuessError),
    ):
        return error.message
    return f"Unexpected error: {error!r}"
