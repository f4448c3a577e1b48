from __future__ import annotations

from flask import Flask, redirect, render_template, request, url_for

from ..common import notifications
from ..common.datetime_utils import format_iso_date, today_local
from ..core.exceptions import StoreError, ValidationError
from ..container import Container
from ..users.guards import current_store_session, login_required
from .export import export_filename, to_csv
from .service import RecordFilters


def register(app: Flask, container: Container) -> None:
    def _filters() -> RecordFilters:
        today = today_local()
        try:
            return container.records_service.parse_filters(request.args, today=today)
        except ValidationError as e:
            notifications.flash_notification(notifications.error(str(e)))
            return container.records_service.default_filters(today=today)

    @app.route("/attendance-records", endpoint="attendance_records")
    @login_required
    def attendance_records():
        store_session = current_store_session()
        filters = _filters()

        classes, students, rows = [], [], []
        try:
            classes = container.class_service.list_classes(store_session)
            if filters.class_id is not None:
                students = container.student_service.roster_by_name(store_session, filters.class_id)
            rows = container.records_service.list_rows(store_session, filters)
        except StoreError:
            app.logger.exception("fetching attendance records failed")
            notifications.flash_notification(notifications.error("Failed to fetch attendance data"))

        return render_template(
            "records/index.html",
            classes=classes,
            students=students,
            rows=rows,
            filters=filters,
            query=filters.to_query(),
            format_iso_date=format_iso_date,
            active_page="attendance_records",
        )

    @app.route("/attendance-records.csv", endpoint="attendance_records_csv")
    @login_required
    def attendance_records_csv():
        filters = _filters()
        try:
            rows = container.records_service.list_rows(current_store_session(), filters)
        except StoreError:
            app.logger.exception("exporting attendance records failed")
            notifications.flash_notification(notifications.error("Failed to fetch attendance data"))
            return redirect(url_for("attendance_records", **filters.to_query()))

        if not rows:
            notifications.flash_notification(notifications.warning("No Data", "There is no data to export"))
            return redirect(url_for("attendance_records", **filters.to_query()))

        return app.response_class(
            to_csv(rows).encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={export_filename(today_local())}"},
        )
