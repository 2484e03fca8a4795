"""Adaptador HTTP do servidor Mastermind.

Exporta:
- MastermindApiClient: create_session / submit_guess / delete_session
- create_api_client: factory a partir de Settings
"""

from mastermind_client.adapters.mastermind.client import MastermindApiClient, create_api_client

__all__ = ["MastermindApiClient", "create_api_client"]
