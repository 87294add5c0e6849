"""Application settings read from the environment (and ``.env`` when present)."""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Environment-driven settings. Each field maps to the upper-cased
    environment variable of the same name, e.g. ``api_key`` -> ``API_KEY``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    database_url: Optional[str] = None
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "category_db"
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"

    api_key: str = Field("RAHASIA", min_length=1)
    api_prefix: str = "/api"

    # Connection pool limits
    db_pool_size: int = Field(5, ge=1)
    db_max_open: int = Field(20, ge=1)
    db_pool_recycle: int = 3600
    db_pool_timeout: int = 30

    log_level: str = "INFO"

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def db_max_overflow(self) -> int:
        return max(self.db_max_open - self.db_pool_size, 0)

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """Build settings from the environment, optionally skipping ``.env``."""
        if load_env_file:
            return cls()
        return cls(_env_file=None)
