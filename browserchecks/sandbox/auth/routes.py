from flask import current_app, redirect, render_template, request, session, url_for
from werkzeug.security import check_password_hash

from . import bp


def _credentials_match(username, password):
    return username == current_app.config["SANDBOX_USERNAME"] and check_password_hash(
        current_app.config["SANDBOX_PASSWORD_HASH"], password
    )


@bp.route("/login")
def login():
    if session.get("username"):
        return redirect(url_for("pages.index"))
    return render_template("login.html")


@bp.route("/session", methods=["POST"])
def create_session():
    username = request.form.get("login", "")
    password = request.form.get("password", "")

    if not _credentials_match(username, password):
        current_app.logger.warning(f"Rejected sign-in attempt for {username!r}")
        return (
            render_template(
                "login.html", error="Incorrect username or password.", login=username
            ),
            401,
        )

    session.clear()
    session["username"] = username
    current_app.logger.info(f"Signed in {username}")
    return redirect(url_for("pages.index"))


@bp.route("/logout", methods=["POST"])
def logout():
    session.clear()
    return redirect(url_for(".login"))
