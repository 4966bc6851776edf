"""Routes for the content pages."""

from flask import redirect, render_template, session, url_for

from . import bp


@bp.route("/")
def index():
    """Show the signed-in home page, or send anonymous users to sign in."""
    username = session.get("username")
    if not username:
        return redirect(url_for("auth.login"))
    return render_template("index.html", username=username)


@bp.route("/dashboard")
def dashboard():
    username = session.get("username")
    if not username:
        return redirect(url_for("auth.login"))
    return render_template("index.html", username=username)


@bp.route("/accessible")
def accessible():
    """A page with no automatically detectable WCAG A or AA violations."""
    return render_template("accessible.html")


@bp.route("/inaccessible")
def inaccessible():
    """A page with known WCAG A and AA violations."""
    return render_template("inaccessible.html")
