"""Configurações centralizadas do mastermind_client.

Uso típico:
    from mastermind_client.config import get_settings
"""

from mastermind_client.config.settings import (
    DEFAULT_API_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    Settings,
    get_settings,
)

__all__ = [
    "Settings",
    "get_settings",
    "DEFAULT_API_BASE_URL",
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
]
