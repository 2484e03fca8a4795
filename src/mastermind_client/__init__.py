"""Cliente de terminal para o servidor remoto de Mastermind."""

__version__ = "0.1.0"
