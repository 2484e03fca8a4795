"""Palpites e feedback.

O cálculo de pinos é do servidor; aqui só existe o formato do palpite e o
valor de feedback devolvido.
"""

from __future__ import annotations

from dataclasses import dataclass

GUESS_LENGTH: int = 4
GUESS_ALPHABET: str = "123456"


def is_valid_guess(candidate: object) -> bool:
    """True sse candidate tem exatamente 4 caracteres, cada um entre '1' e '6'.

    Função total: nunca lança exceção, qualquer entrada devolve bool.
    """
    if not isinstance(candidate, str) or len(candidate) != GUESS_LENGTH:
        return False
    return all(char in GUESS_ALPHABET for char in candidate)


@dataclass(frozen=True, slots=True)
class Feedback:
    """Pinos devolvidos pelo servidor para um palpite.

    black + white <= 4 é garantido pelo servidor, não verificado aqui.
    """

    black: int
    white: int

    @property
    def is_perfect(self) -> bool:
        """Todos os dígitos certos na posição certa."""
        return self.black == GUESS_LENGTH
