from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'EventHub Ticketing'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Logs args/returns of @Logger.io calls when enabled
    LOG_TO_FILE: bool = False

    # Ticket record defaults (applied when a sub-field is absent)
    TICKET_DEFAULT_CURRENCY: str = 'USD'
    TICKET_DEFAULT_STATUS: str = 'available'
    TICKET_DEFAULT_TYPE: str = 'general'
    TICKET_CODE_PREFIX: str = 'TKT'

    # Pagination defaults
    PAGINATION_DEFAULT_PAGE: int = 1
    PAGINATION_DEFAULT_LIMIT: int = 10

    # OpenTelemetry
    OTEL_SERVICE_NAME: str = 'ticket-service'
    OTEL_CONSOLE_EXPORT: bool = False

    @field_validator('TICKET_DEFAULT_CURRENCY', mode='before')
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator('PAGINATION_DEFAULT_PAGE', 'PAGINATION_DEFAULT_LIMIT')
    @classmethod
    def ensure_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError('pagination defaults must be >= 1')
        return v


settings = Settings()  # type: ignore
