"""Sign in through the login form and persist the browser session state."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import expect

from . import constants
from .errors import AuthenticationError

if TYPE_CHECKING:
    from playwright.sync_api import Browser, BrowserContext, Page

    from .config import CheckSettings, Credentials

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionHandle:
    """A persisted signed-in session that other checks can reuse."""

    storage_state_path: Path
    username: str

    def new_context(self, browser: Browser, **kwargs: Any) -> BrowserContext:
        """Open a browser context that starts out signed in."""
        return browser.new_context(
            storage_state=str(self.storage_state_path), **kwargs
        )


def authenticate(page: Page, credentials: Credentials, settings: CheckSettings) -> Path:
    """Log in on ``page`` and write its storage state to disk.

    The post-login URL is awaited first, then the dashboard link must become
    visible. Any failure along the way is raised as ``AuthenticationError``.
    """
    logger.info(f"Signing in as {credentials.username} at {settings.login_url}")
    timeout = settings.timeout_ms
    try:
        page.goto(settings.login_url, timeout=timeout)
        page.get_by_label(constants.USERNAME_LABEL).fill(
            credentials.username, timeout=timeout
        )
        page.get_by_label(constants.PASSWORD_LABEL, exact=True).fill(
            credentials.password, timeout=timeout
        )
        page.get_by_role("button", name=constants.SIGN_IN_BUTTON).click(
            timeout=timeout
        )
        # Cookies can be set across several redirects; the final URL means they are in place.
        page.wait_for_url(settings.post_login_url, timeout=timeout)
        expect(
            page.get_by_role("link", name=settings.dashboard_link_name)
        ).to_be_visible(timeout=timeout)
    except (PlaywrightError, AssertionError) as e:
        logger.error(f"Sign-in for {credentials.username} failed: {e}")
        raise AuthenticationError(f"authentication did not complete: {e}") from e

    state_path = Path(settings.storage_state_path)
    state_path.parent.mkdir(parents=True, exist_ok=True)
    page.context.storage_state(path=state_path)
    logger.info(f"Session state written to {state_path}")
    return state_path


def bootstrap_session(
    browser: Browser, credentials: Credentials, settings: CheckSettings
) -> SessionHandle:
    """Sign in with a fresh context and return a handle to the saved state."""
    context = browser.new_context()
    try:
        page = context.new_page()
        state_path = authenticate(page, credentials, settings)
    finally:
        context.close()
    return SessionHandle(storage_state_path=state_path, username=credentials.username)
