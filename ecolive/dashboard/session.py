"""Demo login gate and theme preference, both kept in local storage."""

import logging

from ecolive.shared.storage import LOGIN_KEY, THEME_KEY, LocalStore
from .projections import THEME_DARK, THEME_LIGHT

logger = logging.getLogger(__name__)

DEMO_USERNAME = "admin"
DEMO_PASSWORD = "1234"


class SessionGate:
    """Hardcoded single-user login that gates the dashboard."""

    def __init__(self, store: LocalStore):
        self.store = store

    def login(self, username: str, password: str) -> bool:
        """Check credentials and set the login flag on success."""
        if username.strip() == DEMO_USERNAME and password == DEMO_PASSWORD:
            self.store.set_item(LOGIN_KEY, "true")
            logger.info(f"User {DEMO_USERNAME} logged in")
            return True
        logger.warning(f"Rejected login for {username!r}")
        return False

    def logout(self) -> None:
        self.store.remove_item(LOGIN_KEY)
        logger.info("Logged out")

    def is_logged_in(self) -> bool:
        return self.store.get_item(LOGIN_KEY) == "true"


class ThemePreference:
    def __init__(self, store: LocalStore):
        self.store = store

    def current(self) -> str:
        """Saved theme, 'light' unless 'dark' was stored."""
        return THEME_DARK if self.store.get_item(THEME_KEY) == THEME_DARK else THEME_LIGHT

    def toggle(self) -> str:
        theme = THEME_LIGHT if self.current() == THEME_DARK else THEME_DARK
        self.store.set_item(THEME_KEY, theme)
        return theme
