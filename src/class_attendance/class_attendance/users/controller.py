from __future__ import annotations

from flask import Flask, redirect, render_template, request, session, url_for

from ..common import notifications
from ..core.exceptions import AuthenticationError, StoreError, ValidationError
from ..container import Container
from .guards import remember_session


def _safe_next(value: str | None) -> str | None:
    # Only same-site relative paths.
    if value and value.startswith("/") and not value.startswith("//"):
        return value
    return None


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if "teacher_id" in session:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")
            remember = request.form.get("remember_me")

            try:
                store_session = container.auth_service.authenticate(email, password)
                session.clear()
                session.permanent = bool(remember)
                remember_session(store_session)
                app.logger.info("teacher %s logged in", store_session.teacher_id)
                return redirect(_safe_next(request.args.get("next")) or url_for("dashboard"))
            except AuthenticationError as e:
                notifications.flash_notification(notifications.error(str(e)))
            except StoreError:
                app.logger.exception("login failed")
                notifications.flash_notification(notifications.error("Login failed. Please try again."))

        return render_template("auth/login.html", active_page="login")

    @app.route("/signup", methods=["GET", "POST"], endpoint="signup")
    def signup():
        if "teacher_id" in session:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            try:
                store_session = container.auth_service.register(
                    full_name=request.form.get("full_name", ""),
                    email=request.form.get("email", ""),
                    password=request.form.get("password", ""),
                )
                session.clear()
                remember_session(store_session)
                notifications.flash_notification(notifications.success("Account created successfully."))
                return redirect(url_for("dashboard"))
            except ValidationError as e:
                notifications.flash_notification(notifications.error(str(e)))
            except StoreError:
                app.logger.exception("signup failed")
                notifications.flash_notification(notifications.error("Failed to create account. Please try again."))

        return render_template("auth/signup.html", active_page="signup")

    @app.route("/logout", methods=["POST", "GET"], endpoint="logout")
    def logout():
        board_id = session.get("board_id")
        if board_id and "teacher_id" in session:
            container.boards.discard(f"{session['teacher_id']}:{board_id}")
        session.clear()
        notifications.flash_notification(notifications.success("You have been logged out."))
        return redirect(url_for("home"))
