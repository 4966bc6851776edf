"""The content pages blueprint."""

from flask import Blueprint

bp = Blueprint("pages", __name__)

from . import routes  # noqa: E402

__all__ = ["routes"]
