from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List

logger = logging.getLogger(__name__)


DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"
DEFAULT_DB_PATH = "myproject.db"
DEFAULT_LOG_LEVEL = "INFO"


def _env_str(name: str, default: str) -> str:
    """Read a string env var; empty values count as unset."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_int(name: str, default: int) -> int:
    """Parse an int env var with a default."""
    try:
        return int(os.getenv(name, str(default)))
    except Exception:
        return int(default)


def _clamp_int(v: int, lo: int, hi: int) -> int:
    """Clamp integer to [lo, hi]."""
    return max(lo, min(hi, int(v)))


def _env_csv(name: str) -> List[str]:
    # Comma-separated list, blanks dropped, order preserved.
    raw = os.getenv(name) or ""
    seen = set()
    out: List[str] = []
    for part in raw.split(","):
        p = part.strip()
        if p and p not in seen:
            seen.add(p)
            out.append(p)
    return out


@dataclass(frozen=True)
class AppConfig:
    """Runtime configuration loaded from env."""

    db_path: str = DEFAULT_DB_PATH
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    log_level: str = DEFAULT_LOG_LEVEL

    # Extra CORS origins; empty disables the middleware.
    cors_allow_origins: List[str] = field(default_factory=list)

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the single-file SQLite store."""
        return f"sqlite:///{self.db_path}"


# PUBLIC_INTERFACE
def load_config() -> AppConfig:
    """Load AppConfig from env vars, falling back to fixed defaults."""
    port = _clamp_int(_env_int("PORT", DEFAULT_PORT), 1, 65535)

    config = AppConfig(
        db_path=_env_str("DB_PATH", DEFAULT_DB_PATH),
        port=port,
        host=_env_str("HOST", DEFAULT_HOST),
        log_level=_env_str("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        cors_allow_origins=_env_csv("CORS_ALLOW_ORIGINS"),
    )

    logger.info(
        "Resolved alert logger config db_path=%s host=%s port=%s cors_origins=%s",
        config.db_path,
        config.host,
        config.port,
        len(config.cors_allow_origins),
    )
    return config
