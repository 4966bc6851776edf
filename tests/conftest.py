"""Shared fixtures for the unit tests."""

from pathlib import Path

import pytest

from browserchecks.config import CheckSettings, Credentials
from tests.helpers import SANDBOX_PASSWORD, SANDBOX_USERNAME


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(username=SANDBOX_USERNAME, password=SANDBOX_PASSWORD)


@pytest.fixture
def settings(tmp_path: Path) -> CheckSettings:
    return CheckSettings(
        login_url="http://localhost:5003/login",
        post_login_url="http://localhost:5003/",
        storage_state_path=tmp_path / ".auth" / "user.json",
        a11y_target_url="http://localhost:5003/accessible",
    )
