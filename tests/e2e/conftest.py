import threading
from typing import TYPE_CHECKING

import pytest
from werkzeug.serving import make_server

from browserchecks.config import CheckSettings, Credentials
from browserchecks.sandbox import create_app
from tests.helpers import SANDBOX_PASSWORD, SANDBOX_USERNAME

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(scope="session")
def app_server() -> "Generator[str, None, None]":
    """Serve the sandbox site on a background thread."""
    app = create_app(
        {
            "TESTING": True,
            "SANDBOX_USERNAME": SANDBOX_USERNAME,
            "SANDBOX_PASSWORD": SANDBOX_PASSWORD,
        }
    )

    server = make_server("localhost", 0, app)
    t = threading.Thread(target=server.serve_forever)
    t.daemon = True
    t.start()

    yield f"http://localhost:{server.server_port}"

    server.shutdown()
    t.join()


@pytest.fixture(scope="session")
def check_settings(app_server: str, tmp_path_factory) -> CheckSettings:
    """Point both checks at the sandbox instead of the live sites."""
    state_dir = tmp_path_factory.mktemp("playwright")
    return CheckSettings(
        login_url=f"{app_server}/login",
        post_login_url=f"{app_server}/",
        storage_state_path=state_dir / ".auth" / "user.json",
        a11y_target_url=f"{app_server}/accessible",
        timeout_ms=10000,
    )


@pytest.fixture(scope="session")
def github_credentials() -> Credentials:
    return Credentials(username=SANDBOX_USERNAME, password=SANDBOX_PASSWORD)
