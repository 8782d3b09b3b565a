# dnscontroller/config.py
from typing import List, Optional

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 14000

    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "dns-controller"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"

    # Full SQLAlchemy URL, takes precedence over the POSTGRES_* parts
    DATABASE_URL: Optional[str] = None

    DEBUG_SQL: bool = False
    DEBUG_HTTP: bool = False
    LOG_LEVEL: str = "INFO"
    TRUSTED_PROXIES: List[str] = []

    @property
    def postgres_dsn(self) -> str:
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:"
            f"{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def database_url(self) -> str:
        return self.DATABASE_URL or self.postgres_dsn

    @property
    def listen(self) -> str:
        return f"{self.API_HOST}:{self.API_PORT}"

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
