"""
Mastermind CLI - terminal client for the remote Mastermind server.

Usage:
    mastermind                         Interactive menu
    mastermind --base-url URL          Use another server
    mastermind --no-color              Plain B/W pegs, no ANSI codes
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import ValidationError

from mastermind_client import __version__
from mastermind_client.adapters.mastermind.client import create_api_client
from mastermind_client.application.game_session import GameSession
from mastermind_client.cli.presenter import Presenter
from mastermind_client.config.settings import Settings
from mastermind_client.domain.game import GameStatus
from mastermind_client.domain.result import Err
from mastermind_client.observability.logging import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2

ReadLine = Callable[[str], Awaitable[str | None]]
Write = Callable[[str], None]


async def read_stdin(prompt: str) -> str | None:
    """Lê uma linha do terminal sem bloquear o event loop; None em EOF."""
    try:
        return await asyncio.to_thread(input, prompt)
    except EOFError:
        return None


class GameConsole:
    """Menu interativo que dirige uma GameSession."""

    def __init__(
        self,
        session: GameSession,
        presenter: Presenter,
        read_line: ReadLine = read_stdin,
        write: Write = print,
    ) -> None:
        self.session = session
        self.presenter = presenter
        self._read = read_line
        self._write = write

    async def run(self) -> int:
        p = self.presenter
        self._write(p.banner())
        while True:
            self._write(p.menu())
            choice = await self._read(p.info("Enter your choice (1-2): "))
            if choice is None:
                break
            choice = choice.strip().lower()
            if choice == "1":
                if not await self.play_game():
                    break
            elif choice in ("2", "exit"):
                break
            else:
                self._write(p.error("Invalid choice. Please try again."))

        self._write(p.warning("Thank you for playing! Goodbye!"))
        return EXIT_OK

    async def play_game(self) -> bool:
        """Joga uma partida; False se a entrada acabou (EOF)."""
        p = self.presenter
        started = await self.session.start()
        if isinstance(started, Err):
            self._write(p.error(f"Error starting game: {p.describe_error(started.error)}"))
            return True

        self._write(p.success("New game started!"))
        self._write(p.info(f"Game ID: {self.session.game_id}"))
        self._write(p.success("Enter your 4-digit guess (digits 1-6):"))

        while self.session.status != GameStatus.INACTIVE:
            line = await self._read(p.info(f"Guess #{self.session.attempts + 1}: "))
            if line is None:
                await self._end_game()
                return False

            text = line.strip()
            if text.lower() == "exit":
                await self._end_game()
                continue

            await self._play_turn(text)

        self._write("")
        return True

    async def _play_turn(self, text: str) -> None:
        p = self.presenter
        result = await self.session.guess(text)
        if isinstance(result, Err):
            self._write(p.describe_error(result.error))
            return

        self._write(p.format_turn(text, result.value))
        if self.session.status == GameStatus.WON:
            self._write(
                p.success(
                    "Congratulations! You've cracked the code in "
                    f"{self.session.attempts} attempts!"
                )
            )
            await self._end_game()

    async def _end_game(self) -> None:
        p = self.presenter
        ended = await self.session.end()
        if isinstance(ended, Err):
            self._write(p.describe_error(ended.error))
            self._write(p.warning("Could not close the game. Type 'exit' to try again."))
            return
        self._write(p.warning("Game deleted successfully."))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Mastermind - Terminal Edition",
        prog="mastermind",
    )
    parser.add_argument("--base-url", help="Server base URL (MASTERMIND_API_BASE_URL)")
    parser.add_argument(
        "--timeout", type=float, help="Request timeout in seconds (MASTERMIND_REQUEST_TIMEOUT_SECONDS)"
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    parser.add_argument("--log-format", choices=["json", "text"], help="Log output format")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Settings do ambiente, com flags da linha de comando por cima."""
    overrides: dict[str, Any] = {}
    if args.base_url:
        overrides["api_base_url"] = args.base_url
    if args.timeout is not None:
        overrides["request_timeout_seconds"] = args.timeout
    if args.no_color:
        overrides["color_output"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.log_format:
        overrides["log_format"] = args.log_format
    return Settings(**overrides)


async def run_console(settings: Settings) -> int:
    async with create_api_client(settings) as api:
        console = GameConsole(GameSession(api), Presenter(color=settings.color_output))
        return await console.run()


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = settings_from_args(args)
    except ValidationError as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    errors = settings.validate_all()
    if errors:
        for error in errors:
            print(f"Error: {error}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(settings.log_level, settings.service_name, settings.log_format)
    logger.info("Client starting", extra={"base_url": settings.api_base_url})

    try:
        return asyncio.run(run_console(settings))
    except KeyboardInterrupt:
        print()
        return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
