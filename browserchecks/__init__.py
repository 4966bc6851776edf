"""End-to-end browser checks: session bootstrap and accessibility smoke check."""

from .accessibility import AxeResults, AxeScanner, assert_no_violations, run_smoke_check
from .auth import SessionHandle, authenticate, bootstrap_session
from .config import CheckSettings, Credentials, load_credentials, load_settings
from .errors import (
    AccessibilityViolationError,
    AuthenticationError,
    CheckError,
    ConfigurationError,
)

__version__ = "0.1.0"

__all__ = [
    "AccessibilityViolationError",
    "AuthenticationError",
    "AxeResults",
    "AxeScanner",
    "CheckError",
    "CheckSettings",
    "ConfigurationError",
    "Credentials",
    "SessionHandle",
    "assert_no_violations",
    "authenticate",
    "bootstrap_session",
    "load_credentials",
    "load_settings",
    "run_smoke_check",
]
