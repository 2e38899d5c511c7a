"""JSON file store for user preferences."""

from dataclasses import asdict
import json
from pathlib import Path

from src.application.ports.preferences_store import (
    DEFAULT_TAB_ORDER,
    WELCOME_SCREEN_MODES,
    AppPreferences,
    PreferencesStorePort,
)
from src.infrastructure.logging.logger import get_app_logger


class JsonPreferencesStore(PreferencesStorePort):
    """Preferences persisted as a small JSON document."""

    def __init__(self, path: Path | str, logger=None) -> None:
        """Initialize the store.

        Args:
            path: Location of the JSON file.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()

    def load(self) -> AppPreferences:
        """Return stored preferences, falling back to defaults.

        A missing file yields defaults silently. An unreadable file yields
        defaults with a warning.
        """
        if not self._path.exists():
            return AppPreferences()
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            self._logger.warning(
                f"Ignoring unreadable preferences file {self._path}: {exc}"
            )
            return AppPreferences()
        if not isinstance(payload, dict):
            self._logger.warning(
                f"Ignoring malformed preferences file {self._path}"
            )
            return AppPreferences()
        return self._from_payload(payload)

    def save(self, preferences: AppPreferences) -> None:
        """Write preferences to disk, creating parent directories."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = asdict(preferences)
        payload["tab_order"] = list(preferences.tab_order)
        self._path.write_text(
            json.dumps(payload, indent=2, sort_keys=True),
            encoding="utf-8",
        )
        self._logger.info(f"Preferences saved to {self._path}")

    def _from_payload(self, payload: dict) -> AppPreferences:
        mode = payload.get("welcome_screen_mode", "first_time_only")
        if mode not in WELCOME_SCREEN_MODES:
            self._logger.warning(f"Unknown welcome_screen_mode={mode!r}")
            mode = "first_time_only"
        tab_order = payload.get("tab_order", DEFAULT_TAB_ORDER)
        if not _is_valid_tab_order(tab_order):
            self._logger.warning(f"Unknown tab_order={tab_order!r}")
            tab_order = DEFAULT_TAB_ORDER
        return AppPreferences(
            is_dark_mode=bool(payload.get("is_dark_mode", False)),
            has_completed_onboarding=bool(
                payload.get("has_completed_onboarding", False)
            ),
            tab_order=tuple(tab_order),
            welcome_screen_mode=mode,
        )


def _is_valid_tab_order(tab_order) -> bool:
    """Return True for a non-empty list of distinct known tab names."""
    if not isinstance(tab_order, (list, tuple)) or not tab_order:
        return False
    if not all(
        isinstance(tab, str) and tab in DEFAULT_TAB_ORDER for tab in tab_order
    ):
        return False
    return len(set(tab_order)) == len(tab_order)


__all__ = ["JsonPreferencesStore"]
