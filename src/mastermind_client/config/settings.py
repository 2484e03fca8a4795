"""Configurações do cliente via variáveis de ambiente.

Todas as chaves usam o prefixo MASTERMIND_ (ex.: MASTERMIND_API_BASE_URL).
O endpoint base é fixo por processo: nunca muda durante uma sessão.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

# -----------------------------------------------------------------------------
# Constantes do servidor Mastermind
# -----------------------------------------------------------------------------
DEFAULT_API_BASE_URL: str = "https://mastermind.darkube.app"
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 10.0

VALID_LOG_FORMATS = frozenset({"json", "text"})
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """Configurações lidas do ambiente."""

    model_config = SettingsConfigDict(
        env_prefix="MASTERMIND_",
        case_sensitive=False,
    )

    # Aplicação
    service_name: str = "mastermind_client"
    version: str = "0.1.0"
    environment: str = "development"

    # Servidor remoto
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    verify_ssl: bool = True

    # Observabilidade (terminal interativo: WARNING por padrão para não poluir a tela)
    log_level: str = "WARNING"
    log_format: str = "json"  # json | text

    # Apresentação
    color_output: bool = True

    @property
    def user_agent(self) -> str:
        """User-Agent enviado em todas as requisições."""
        return f"{self.service_name}/{self.version}"

    def validate_api_config(self) -> list[str]:
        """Valida endpoint e timeout do servidor.

        Retorna lista de erros (vazia = OK).
        """
        errors: list[str] = []
        base_url = self.api_base_url.strip()
        if not base_url:
            errors.append("MASTERMIND_API_BASE_URL é obrigatório")
        elif not base_url.startswith(("http://", "https://")):
            errors.append("MASTERMIND_API_BASE_URL deve começar com http:// ou https://")
        elif self.is_production and base_url.startswith("http://"):
            errors.append("MASTERMIND_API_BASE_URL deve usar https em production")

        if self.request_timeout_seconds <= 0:
            errors.append("MASTERMIND_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        return errors

    def validate_logging_config(self) -> list[str]:
        """Valida nível e formato de log."""
        errors: list[str] = []
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"MASTERMIND_LOG_LEVEL '{self.log_level}' inválido. "
                f"Valores válidos: {sorted(VALID_LOG_LEVELS)}"
            )
        if self.log_format.lower() not in VALID_LOG_FORMATS:
            errors.append("MASTERMIND_LOG_FORMAT inválido: use json | text")
        return errors

    def validate_all(self) -> list[str]:
        """Agrega todas as validações."""
        return self.validate_api_config() + self.validate_logging_config()

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment.lower() in ("production", "prod")

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment.lower() in ("development", "dev", "local")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Retorna uma instância cacheada de Settings."""
    return Settings()
