"""pytest fixtures that hand a signed-in session to dependent tests.

Enable them with ``pytest_plugins = ["browserchecks.fixtures"]``. The
``browser`` fixture comes from pytest-playwright.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from .auth import SessionHandle, bootstrap_session
from .config import CheckSettings, Credentials, load_credentials, load_settings

if TYPE_CHECKING:
    from collections.abc import Generator

    from playwright.sync_api import Browser, BrowserContext


@pytest.fixture(scope="session")
def check_settings() -> CheckSettings:
    return load_settings()


@pytest.fixture(scope="session")
def github_credentials() -> Credentials:
    return load_credentials()


@pytest.fixture(scope="session")
def auth_session(
    browser: Browser, github_credentials: Credentials, check_settings: CheckSettings
) -> SessionHandle:
    """Sign in once per test session and share the saved state."""
    return bootstrap_session(browser, github_credentials, check_settings)


@pytest.fixture
def authenticated_context(
    browser: Browser, auth_session: SessionHandle
) -> Generator[BrowserContext, None, None]:
    context = auth_session.new_context(browser)
    yield context
    context.close()
