"""Port for persisted user preferences."""

from dataclasses import dataclass, replace
from typing import Protocol

WELCOME_SCREEN_MODES = ("first_time_only", "every_time", "never")
DEFAULT_TAB_ORDER = ("Dashboard", "Accounts", "Transactions", "Settings")


@dataclass(frozen=True)
class AppPreferences:
    """User preferences read by the presentation layer.

    Attributes:
        is_dark_mode: Whether the dark theme is selected.
        has_completed_onboarding: Whether the welcome flow was finished.
        tab_order: Order of the navigation tabs.
        welcome_screen_mode: When the welcome screen is displayed.
    """

    is_dark_mode: bool = False
    has_completed_onboarding: bool = False
    tab_order: tuple[str, ...] = DEFAULT_TAB_ORDER
    welcome_screen_mode: str = "first_time_only"

    def toggle_dark_mode(self) -> "AppPreferences":
        return replace(self, is_dark_mode=not self.is_dark_mode)

    def complete_onboarding(self) -> "AppPreferences":
        return replace(self, has_completed_onboarding=True)

    def reset_onboarding(self) -> "AppPreferences":
        return replace(self, has_completed_onboarding=False)

    @property
    def should_show_welcome(self) -> bool:
        """Return True when the welcome screen must be displayed."""
        if self.welcome_screen_mode == "every_time":
            return True
        if self.welcome_screen_mode == "never":
            return False
        return not self.has_completed_onboarding


class PreferencesStorePort(Protocol):
    """Port exposing explicit load/save of user preferences."""

    def load(self) -> AppPreferences:
        """Return the stored preferences, or defaults."""

    def save(self, preferences: AppPreferences) -> None:
        """Persist the provided preferences."""


__all__ = [
    "AppPreferences",
    "PreferencesStorePort",
    "WELCOME_SCREEN_MODES",
    "DEFAULT_TAB_ORDER",
]
