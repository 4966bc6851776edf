"""A local stand-in site for rehearsing the browser checks offline."""

import os

from flask import Flask
from werkzeug.security import generate_password_hash


def create_app(test_config=None):
    """Create and configure an instance of the sandbox application.

    Only a hash of the sign-in password is kept in the config. A plain
    ``SANDBOX_PASSWORD`` in ``test_config`` is hashed and dropped.
    """
    app = Flask(__name__, template_folder="templates")

    app.config.from_mapping(
        SECRET_KEY=os.environ.get("SANDBOX_SECRET_KEY") or "dev",
        SANDBOX_USERNAME=os.environ.get("SANDBOX_USERNAME") or "octocat",
        SANDBOX_PASSWORD_HASH=generate_password_hash(
            os.environ.get("SANDBOX_PASSWORD") or "hunter2", method="pbkdf2:sha256"
        ),
    )

    if test_config:
        app.config.update(test_config)

    password = app.config.pop("SANDBOX_PASSWORD", None)
    if password is not None:
        app.config["SANDBOX_PASSWORD_HASH"] = generate_password_hash(
            password, method="pbkdf2:sha256"
        )

    from . import auth as auth_bp

    app.register_blueprint(auth_bp.bp)

    from . import pages as pages_bp

    app.register_blueprint(pages_bp.bp)

    return app
