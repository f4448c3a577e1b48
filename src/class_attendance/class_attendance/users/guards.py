from __future__ import annotations

from functools import wraps

from flask import jsonify, redirect, request, session, url_for

from ..common import notifications
from ..core.exceptions import AuthorizationError
from ..core.session import StoreSession


def remember_session(store_session: StoreSession) -> None:
    session["teacher_id"] = store_session.teacher_id
    session["name"] = store_session.full_name
    session["email"] = store_session.email


def current_store_session() -> StoreSession:
    """Rebuild the explicit store context from the Flask session cookie."""
    if "teacher_id" not in session:
        raise AuthorizationError("No teacher is logged in")
    return StoreSession(
        teacher_id=int(session["teacher_id"]),
        full_name=session.get("name") or "",
        email=session.get("email") or "",
    )


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "teacher_id" not in session:
            notifications.flash_notification(
                notifications.warning("Sign in required", "Please log in to continue.")
            )
            return redirect(url_for("login", next=request.path))
        return view(*args, **kwargs)

    return wrapper


def api_login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "teacher_id" not in session:
            note = notifications.error("You must be logged in to do that.")
            return jsonify({"success": False, "notification": note.to_dict()}), 401
        return view(*args, **kwargs)

    return wrapper
