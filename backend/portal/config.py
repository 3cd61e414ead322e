"""Application settings and validation."""

import os
from urllib.parse import quote_plus

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


class Settings:
    ENV: str
    DATABASE_URL: str
    DB_USER: str
    DB_PASSWORD: str
    DB_HOST: str
    DB_PORT: int
    DB_DATABASE: str
    DB_SSL_NO_VERIFY: bool
    DB_POOL_SIZE: int
    DB_MAX_OVERFLOW: int
    DB_ECHO: bool
    DEFAULT_MAX_FEE: float
    ALLOW_DEV_CORS: bool
    HOST: str
    PORT: int
    LOG_LEVEL: str

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL", "").strip()
        self.DB_USER = os.getenv("DB_USER", "postgres")
        self.DB_PASSWORD = os.getenv("DB_PASSWORD", "")
        self.DB_HOST = os.getenv("DB_HOST", "localhost")
        self.DB_PORT = _env_int("DB_PORT", "5432")
        self.DB_DATABASE = os.getenv("DB_DATABASE", "postgres")
        # managed providers (Neon, Heroku, ...) hand out a DATABASE_URL and
        # certificates that do not verify against the system store
        self.DB_SSL_NO_VERIFY = _env_flag("DB_SSL_NO_VERIFY", "true" if self.DATABASE_URL else "false")
        self.DB_POOL_SIZE = _env_int("DB_POOL_SIZE", "5")
        self.DB_MAX_OVERFLOW = _env_int("DB_MAX_OVERFLOW", "10")
        self.DB_ECHO = _env_flag("DB_ECHO", "false")
        self.DEFAULT_MAX_FEE = float(os.getenv("DEFAULT_MAX_FEE", "100000"))
        self.ALLOW_DEV_CORS = _env_flag("ALLOW_DEV_CORS", "true")
        self.HOST = os.getenv("HOST", "0.0.0.0")
        self.PORT = _env_int("PORT", "5000")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def database_url(self) -> str:
        """Return the SQLAlchemy URL for the configured store.

        `DATABASE_URL` wins when set; otherwise the URL is assembled from
        the discrete `DB_*` fields.
        """
        if self.DATABASE_URL:
            url = self.DATABASE_URL
            if url.startswith("postgres://"):
                url = "postgresql://" + url[len("postgres://"):]
            return url
        return (
            f"postgresql://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASSWORD)}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_DATABASE}"
        )


settings = Settings()
