from __future__ import annotations

from flask import Flask, redirect, request, url_for

from ..common import notifications
from ..core.exceptions import NotFoundError, StoreError, ValidationError
from ..container import Container
from ..users.guards import current_store_session, login_required


def register(app: Flask, container: Container) -> None:
    def _back(class_id: int):
        return redirect(url_for("class_detail", class_id=class_id, tab="students"))

    @app.route("/classes/<int:class_id>/students", methods=["POST"], endpoint="add_student")
    @login_required
    def add_student(class_id: int):
        try:
            container.student_service.add_student(
                current_store_session(),
                class_id=class_id,
                name=request.form.get("name", ""),
                email=request.form.get("email", ""),
            )
            notifications.flash_notification(notifications.success("Student added successfully."))
        except ValidationError as e:
            notifications.flash_notification(notifications.error(str(e)))
        except StoreError:
            app.logger.exception("adding student to class %s failed", class_id)
            notifications.flash_notification(notifications.error("Failed to add student. Please try again."))
        return _back(class_id)

    @app.route(
        "/classes/<int:class_id>/students/<int:student_id>/delete",
        methods=["POST"],
        endpoint="delete_student",
    )
    @login_required
    def delete_student(class_id: int, student_id: int):
        try:
            container.student_service.delete_student(current_store_session(), student_id)
            notifications.flash_notification(notifications.success("Student deleted successfully."))
        except NotFoundError:
            notifications.flash_notification(notifications.error("Failed to delete student. Please try again."))
        except StoreError:
            app.logger.exception("deleting student %s failed", student_id)
            notifications.flash_notification(notifications.error("Failed to delete student. Please try again."))
        return _back(class_id)
