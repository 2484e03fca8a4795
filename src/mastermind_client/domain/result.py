"""Resultado discriminado das operações falíveis.

Toda operação do cliente devolve Ok(valor) ou Err(erro); nenhuma levanta
exceção para falhas esperadas. Quem chama trata cada variante de erro
explicitamente (isinstance ou match).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Sucesso com valor."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Falha com uma variante de erro."""

    error: E


Result = Union[Ok[T], Err[E]]
