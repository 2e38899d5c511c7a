"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from urllib.parse import unquote, urlparse

import dotenv

from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

_BACKENDS = ("sqlalchemy", "memory")


@dataclass(frozen=True)
class AppSettings:
    """Settings for selecting storage backends.

    Attributes:
        backend: Repository backend identifier (sqlalchemy or memory).
        database_url: SQLAlchemy URL of the accounts database.
        preferences_file: Path of the JSON user preferences file.
    """

    backend: str = "sqlalchemy"
    database_url: str = ""
    preferences_file: Path | None = None

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from environment variables.

        Returns:
            AppSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("ACCOUNTS_BACKEND", "sqlalchemy").strip().lower()
        if backend not in _BACKENDS:
            logger.warning(
                f"Unknown ACCOUNTS_BACKEND={backend!r}; using sqlalchemy"
            )
            backend = "sqlalchemy"
        database_url = os.getenv("ACCOUNTS_DB_URL") or cls._default_database_url()
        raw_preferences = os.getenv("PREFERENCES_FILE")
        if raw_preferences:
            preferences_file = cls._normalize_path(raw_preferences)
        else:
            preferences_file = get_project_root() / "data" / "preferences.json"
        return cls(
            backend=backend,
            database_url=database_url,
            preferences_file=preferences_file,
        )

    @staticmethod
    def _normalize_path(raw_path: str) -> Path:
        """Normalize a file path or ``file://`` URI.

        Args:
            raw_path: Raw file path string.

        Returns:
            Path: Absolute filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        return Path(raw_path).expanduser().resolve()

    @staticmethod
    def _default_database_url() -> str:
        """Return a sqlite URL inside the project data/ directory."""
        data_dir = get_project_root() / "data"
        return f"sqlite:///{data_dir / 'accounts.db'}"


__all__ = ["AppSettings"]
