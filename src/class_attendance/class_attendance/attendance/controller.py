from __future__ import annotations

import uuid
from datetime import date

from flask import Flask, jsonify, redirect, render_template, request, session, url_for

from ..common import notifications
from ..common.datetime_utils import add_months, format_iso_date, month_grid, parse_iso_date, today_local
from ..core.exceptions import NotFoundError, StaleSelectionError, StoreError, ValidationError
from ..container import Container
from ..records.export import day_export_filename, rows_from_view, to_csv
from ..users.guards import api_login_required, current_store_session, login_required
from .board import AttendanceBoard
from .merger import count_statuses
from .model import AttendanceView
from .service import parse_status


def _view_payload(view: AttendanceView, generation: int) -> dict:
    counts = count_statuses(view)
    return {
        "class_id": view.class_id,
        "date": format_iso_date(view.day),
        "generation": generation,
        "entries": [
            {
                "student_id": e.student_id,
                "date": format_iso_date(e.day),
                "status": e.status.value,
                "record_id": e.record_id,
            }
            for e in view.entries
        ],
        "counts": {"present": counts.present, "absent": counts.absent, "unmarked": counts.unmarked},
    }


def _error_response(description: str, status_code: int):
    note = notifications.error(description)
    return jsonify({"success": False, "notification": note.to_dict()}), status_code


def _month_link(day: date, months: int) -> str | None:
    # None at the ends of the calendar, where the shift cannot leave this month.
    target = add_months(day, months)
    if (target.year, target.month) == (day.year, day.month):
        return None
    return format_iso_date(target)


def register(app: Flask, container: Container) -> None:
    def _selected_day(value: str | None) -> date:
        if not value:
            return today_local()
        try:
            return parse_iso_date(value)
        except ValidationError as e:
            notifications.flash_notification(notifications.error(str(e)))
            return today_local()

    def _board() -> AttendanceBoard:
        board_id = session.get("board_id")
        if not board_id:
            board_id = uuid.uuid4().hex
            session["board_id"] = board_id
        return container.boards.get_or_create(f"{session['teacher_id']}:{board_id}")

    @app.route("/classes/<int:class_id>", endpoint="class_detail")
    @login_required
    def class_detail(class_id: int):
        store_session = current_store_session()
        day = _selected_day(request.args.get("date"))
        tab = request.args.get("tab") or "attendance"

        try:
            classroom = container.class_service.find(store_session, class_id)
        except StoreError:
            app.logger.exception("fetching class %s failed", class_id)
            notifications.flash_notification(notifications.error("Failed to fetch class data. Please try again."))
            classroom = None
        if classroom is None:
            return render_template("classes/not_found.html"), 404

        try:
            roster = container.student_service.roster(store_session, class_id)
        except StoreError:
            app.logger.exception("fetching students of class %s failed", class_id)
            notifications.flash_notification(notifications.error("Failed to fetch students. Please try again."))
            roster = []

        view = None
        try:
            view = container.attendance_service.load_view(store_session, class_id, day, roster=roster)
        except StoreError:
            app.logger.exception("fetching attendance of class %s on %s failed", class_id, day)
            notifications.flash_notification(
                notifications.error("Failed to fetch attendance data. Please try again.")
            )

        return render_template(
            "classes/detail.html",
            classroom=classroom,
            students=roster,
            view=view,
            counts=count_statuses(view) if view is not None else None,
            day=day,
            day_iso=format_iso_date(day),
            grid=month_grid(day),
            prev_month=_month_link(day, -1),
            next_month=_month_link(day, 1),
            tab=tab,
            active_page="dashboard",
        )

    @app.route("/classes/<int:class_id>/attendance/<int:student_id>", methods=["POST"], endpoint="mark_attendance")
    @login_required
    def mark_attendance(class_id: int, student_id: int):
        store_session = current_store_session()
        # An unparseable date aborts the toggle; nothing is written.
        try:
            day = parse_iso_date(request.form.get("date", ""))
        except ValidationError as e:
            notifications.flash_notification(notifications.error(str(e)))
            return redirect(url_for("class_detail", class_id=class_id))

        try:
            target = parse_status(request.form.get("status", ""))
            view = container.attendance_service.load_view(store_session, class_id, day)
            container.attendance_service.set_status(store_session, view, student_id, target)
        except ValidationError as e:
            notifications.flash_notification(notifications.error(str(e)))
        except StoreError:
            app.logger.exception("updating attendance of student %s failed", student_id)
            notifications.flash_notification(notifications.error("Failed to update attendance. Please try again."))
        return redirect(url_for("class_detail", class_id=class_id, date=format_iso_date(day)))

    @app.route("/classes/<int:class_id>/attendance.csv", endpoint="class_day_csv")
    @login_required
    def class_day_csv(class_id: int):
        store_session = current_store_session()
        day = _selected_day(request.args.get("date"))
        try:
            classroom = container.class_service.get(store_session, class_id)
            roster = container.student_service.roster(store_session, class_id)
            view = container.attendance_service.load_view(store_session, class_id, day, roster=roster)
        except StoreError:
            app.logger.exception("exporting class %s on %s failed", class_id, day)
            notifications.flash_notification(notifications.error("Failed to export attendance. Please try again."))
            return redirect(url_for("class_detail", class_id=class_id, date=format_iso_date(day)))

        rows = rows_from_view(classroom, roster, view)
        if not rows:
            notifications.flash_notification(notifications.warning("No Data", "There is no data to export"))
            return redirect(url_for("class_detail", class_id=class_id, date=format_iso_date(day)))

        return app.response_class(
            to_csv(rows).encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={day_export_filename(classroom, day)}"},
        )

    # ===== JSON API (interactive attendance widget) =====

    @app.route("/api/classes/<int:class_id>/attendance", methods=["GET"], endpoint="api_attendance_view")
    @api_login_required
    def api_attendance_view(class_id: int):
        store_session = current_store_session()
        try:
            day = parse_iso_date(request.args.get("date") or format_iso_date(today_local()))
        except ValidationError as e:
            return _error_response(str(e), 400)

        board = _board()
        ticket = board.select(class_id, day)
        try:
            view = container.attendance_service.load_view(store_session, class_id, day)
        except StoreError:
            app.logger.exception("fetching attendance of class %s on %s failed", class_id, day)
            return _error_response("Failed to fetch attendance data. Please try again.", 500)

        if not board.load(ticket, view):
            # A newer selection was made while this one was loading.
            return jsonify({"success": False, "stale": True}), 409

        return jsonify({"success": True, "view": _view_payload(view, ticket.generation)})

    @app.route(
        "/api/classes/<int:class_id>/attendance/<int:student_id>",
        methods=["POST"],
        endpoint="api_set_attendance",
    )
    @api_login_required
    def api_set_attendance(class_id: int, student_id: int):
        """Apply one tri-state toggle for the selected class and day.

        A failed toggle clears the board's view, so the client must fetch the
        view again before the next toggle is accepted.
        """
        store_session = current_store_session()
        payload = request.get_json(silent=True) or {}
        board = _board()

        try:
            day = parse_iso_date(str(payload.get("date") or ""))
            target = parse_status(payload.get("status"))
            ticket = board.ticket_for(class_id, day, int(payload.get("generation") or 0))
            seq, base = board.begin_toggle(ticket, student_id)
        except StaleSelectionError as e:
            return jsonify({"success": False, "stale": True, "message": str(e)}), 409
        except ValidationError as e:
            return _error_response(str(e), 400)
        except (TypeError, ValueError):
            return _error_response("Invalid selection generation", 400)

        try:
            updated = container.attendance_service.set_status(store_session, base, student_id, target)
        except ValidationError as e:
            board.abandon_toggle(ticket, student_id, seq)
            return _error_response(str(e), 400)
        except NotFoundError:
            board.abandon_toggle(ticket, student_id, seq)
            return _error_response("Failed to update attendance. Please try again.", 404)
        except StoreError:
            app.logger.exception("updating attendance of student %s failed", student_id)
            board.abandon_toggle(ticket, student_id, seq)
            return _error_response("Failed to update attendance. Please try again.", 500)

        entry = updated.entry_for(student_id)
        applied = entry is not None and board.finish_toggle(ticket, student_id, seq, entry)
        current = board.view or updated
        return jsonify(
            {
                "success": True,
                "applied": applied,
                "view": _view_payload(current, ticket.generation),
            }
        )
