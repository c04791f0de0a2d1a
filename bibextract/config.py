import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database (journal name index)
    database_url: str = "postgresql+asyncpg://localhost/bibextract"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_database_url(cls, v: str) -> str:
        """Convert plain postgres:// URLs to asyncpg format."""
        if v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql+asyncpg://", 1)
        if v.startswith("postgresql://") and "+asyncpg" not in v:
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    # Database pool
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 30
    db_pool_recycle: int = 1800  # 30 minutes
    db_command_timeout: int = 30

    # Journal matching needs the journal index; off by default
    journal_lookup_enabled: bool = False

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "BIBEXTRACT_"
        extra = "ignore"


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging with the package's standard format."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
