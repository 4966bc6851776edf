"""Configuration for the browser checks.

Values come from the process environment, optionally seeded from a ``.env``
file. They are validated once here and passed explicitly to the checks.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from . import constants
from .errors import ConfigurationError


@dataclass(frozen=True)
class Credentials:
    """Login secrets for the auth bootstrap."""

    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class CheckSettings:
    """Fixed inputs of the auth bootstrap and the accessibility smoke check."""

    login_url: str = constants.LOGIN_URL
    post_login_url: str = constants.POST_LOGIN_URL
    dashboard_link_name: str = constants.DASHBOARD_LINK
    storage_state_path: Path = Path(constants.STORAGE_STATE_PATH)
    a11y_target_url: str = constants.A11Y_TARGET_URL
    a11y_tags: tuple[str, ...] = constants.WCAG_TAGS
    axe_script_url: str = constants.AXE_SCRIPT_URL
    # None leaves every wait on the Playwright default timeout.
    timeout_ms: Optional[float] = None


def _environ(environ: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    if environ is None:
        load_dotenv(override=False)
        return os.environ
    return environ


def load_credentials(environ: Optional[Mapping[str, str]] = None) -> Credentials:
    """Read the login credentials, failing if either is missing or empty."""
    env = _environ(environ)
    username = env.get(constants.ENV_USERNAME)
    password = env.get(constants.ENV_PASSWORD)
    if not username or not password:
        raise ConfigurationError(constants.MISSING_CREDENTIALS_MESSAGE)
    return Credentials(username=username, password=password)


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(
            f"{constants.ENV_TIMEOUT_MS} must be a number of milliseconds, got {raw!r}."
        ) from None
    if not math.isfinite(timeout) or timeout < 0:
        raise ConfigurationError(
            f"{constants.ENV_TIMEOUT_MS} must be a finite, non-negative number."
        )
    return timeout


def load_settings(environ: Optional[Mapping[str, str]] = None) -> CheckSettings:
    """Build the check settings, applying any environment overrides."""
    env = _environ(environ)
    defaults = CheckSettings()
    return CheckSettings(
        login_url=env.get(constants.ENV_LOGIN_URL) or defaults.login_url,
        post_login_url=env.get(constants.ENV_POST_LOGIN_URL)
        or defaults.post_login_url,
        storage_state_path=Path(
            env.get(constants.ENV_STATE_PATH) or defaults.storage_state_path
        ),
        a11y_target_url=env.get(constants.ENV_A11Y_URL) or defaults.a11y_target_url,
        axe_script_url=env.get(constants.ENV_AXE_SCRIPT_URL)
        or defaults.axe_script_url,
        timeout_ms=_parse_timeout(env.get(constants.ENV_TIMEOUT_MS)),
    )
