import warnings
from typing import List

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# ── Known insecure default keys (must never be used in production) ──
_INSECURE_KEYS = {
    "change_this",
    "change_this_to_a_secure_random_string",
    "secret",
}

_DOMAIN_MATCH_MODES = ("suffix", "substring")


class Settings(BaseSettings):
    APP_NAME: str = "Wedding Sites"
    APP_ENV: str = "development"
    API_V1_STR: str = "/api/v1"
    SECRET_KEY: str = "change_this"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 8  # 8 days
    ALGORITHM: str = "HS256"

    # CORS
    BACKEND_CORS_ORIGINS: str = ""

    # Database (DATABASE_URL wins over the POSTGRES_* parts when set)
    DATABASE_URL: str = ""
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "weddingsite"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    SLOW_QUERY_THRESHOLD_MS: int = 500

    # Custom domain routing
    PLATFORM_DOMAINS: str = "localhost,wedding-tiv4.vercel.app,vercel.app"
    PLATFORM_DOMAIN_MATCH: str = "suffix"       # suffix / substring (legacy)
    DOMAIN_LOOKUP_TIMEOUT_SECONDS: float = 2.0

    # Edge routing targets tenants point their DNS at
    EDGE_PROVIDER_NAME: str = "Vercel"
    EDGE_A_RECORD_IP: str = "76.76.21.21"
    EDGE_CNAME_TARGET: str = "cname.vercel-dns.com"
    DNS_TIMEOUT_SECONDS: float = 5.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )

    @model_validator(mode="after")
    def _validate_settings(self) -> "Settings":
        if self.PLATFORM_DOMAIN_MATCH not in _DOMAIN_MATCH_MODES:
            raise ValueError(
                f"PLATFORM_DOMAIN_MATCH must be one of {_DOMAIN_MATCH_MODES}, "
                f"got '{self.PLATFORM_DOMAIN_MATCH}'"
            )
        if self.APP_ENV in ("production", "staging"):
            if self.SECRET_KEY in _INSECURE_KEYS or len(self.SECRET_KEY) < 32:
                raise ValueError(
                    f"SECRET_KEY is insecure ('{self.SECRET_KEY[:8]}…'). "
                    "Set a strong random key (≥ 32 chars) in .env or environment."
                )
            if not self.DATABASE_URL and self.POSTGRES_PASSWORD in ("postgres", ""):
                raise ValueError(
                    "POSTGRES_PASSWORD is set to default 'postgres'. "
                    "Set a strong password in .env or environment."
                )
            if self.PLATFORM_DOMAIN_MATCH == "substring":
                warnings.warn(
                    "PLATFORM_DOMAIN_MATCH=substring treats any host containing a "
                    "platform domain as our own. Use 'suffix' in production.",
                    UserWarning,
                    stacklevel=2,
                )
        return self

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_SERVER}/{self.POSTGRES_DB}"
        )

    @property
    def platform_domains(self) -> List[str]:
        return [d.strip().lower() for d in self.PLATFORM_DOMAINS.split(",") if d.strip()]

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "production"

    @property
    def is_staging(self) -> bool:
        return self.APP_ENV == "staging"

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"

settings = Settings()
