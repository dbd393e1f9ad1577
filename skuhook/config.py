from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CATALOG_SKUS = ["SKU2006-001", "SKU2006-002", "SKU2006-003"]

class DatabaseSettings(BaseSettings):
    """The slice of settings migrations need; readable without the webhook secret."""

    DATABASE_URL: str = "sqlite:///./skuhook.db"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

class Settings(DatabaseSettings):
    SHOPIFY_WEBHOOK_SECRET: SecretStr

    CATALOG_BACKEND: Literal["memory", "database"] = "memory"
    CATALOG_SKUS: list[str] = DEFAULT_CATALOG_SKUS

    FULFILLMENT_URL: str | None = None
    INTERNAL_SHARED_SECRET: SecretStr | None = None
    FULFILLMENT_TIMEOUT: float = 12.0
    DISPATCH_STOP_ON_FIRST_MATCH: bool = False

    CORS_ALLOW_ORIGINS: list[str] = ["http://127.0.0.1"]
    HOST: str = "localhost"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"
    ENV: str = "dev"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("SHOPIFY_WEBHOOK_SECRET")
    @classmethod
    def _secret_not_blank(cls, v: SecretStr) -> SecretStr:
        # an empty key makes every HMAC trivially forgeable
        if not v.get_secret_value().strip():
            raise ValueError("SHOPIFY_WEBHOOK_SECRET must not be empty")
        return v

    @model_validator(mode="after")
    def _fulfillment_needs_secret(self) -> "Settings":
        if self.FULFILLMENT_URL and not self.INTERNAL_SHARED_SECRET:
            raise ValueError("FULFILLMENT_URL requires INTERNAL_SHARED_SECRET")
        return self

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings; call get_settings.cache_clear() to reload."""
    return Settings()

def get_database_url() -> str:
    return DatabaseSettings().DATABASE_URL
