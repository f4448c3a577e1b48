from __future__ import annotations

from flask import Flask, redirect, render_template, request, url_for

from ..common import notifications
from ..core.exceptions import NotFoundError, StoreError, ValidationError
from ..container import Container
from ..users.guards import current_store_session, login_required


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        store_session = current_store_session()
        try:
            classes = container.class_service.list_summaries(store_session)
        except StoreError:
            app.logger.exception("fetching classes failed")
            notifications.flash_notification(notifications.error("Failed to fetch classes. Please try again."))
            classes = []

        return render_template(
            "classes/dashboard.html",
            name=store_session.full_name or "User",
            classes=classes,
            active_page="dashboard",
        )

    @app.route("/classes", methods=["POST"], endpoint="create_class")
    @login_required
    def create_class():
        try:
            container.class_service.create(
                current_store_session(),
                name=request.form.get("name", ""),
                description=request.form.get("description", ""),
            )
            notifications.flash_notification(notifications.success("Class created successfully."))
        except ValidationError as e:
            notifications.flash_notification(notifications.error(str(e)))
        except StoreError as e:
            app.logger.exception("creating class failed")
            notifications.flash_notification(notifications.error(f"Failed to create class: {e}"))
        return redirect(url_for("dashboard"))

    @app.route("/classes/<int:class_id>/edit", methods=["POST"], endpoint="update_class")
    @login_required
    def update_class(class_id: int):
        try:
            container.class_service.update(
                current_store_session(),
                class_id,
                name=request.form.get("name", ""),
                description=request.form.get("description", ""),
            )
            notifications.flash_notification(notifications.success("Class updated successfully."))
        except ValidationError as e:
            notifications.flash_notification(notifications.error(str(e)))
        except StoreError:
            app.logger.exception("updating class %s failed", class_id)
            notifications.flash_notification(notifications.error("Failed to update class. Please try again."))
        return redirect(url_for("dashboard"))

    @app.route("/classes/<int:class_id>/delete", methods=["POST"], endpoint="delete_class")
    @login_required
    def delete_class(class_id: int):
        try:
            container.class_service.delete(current_store_session(), class_id)
            notifications.flash_notification(notifications.success("Class deleted successfully."))
        except NotFoundError:
            notifications.flash_notification(notifications.error("Failed to delete class. Please try again."))
        except StoreError:
            app.logger.exception("deleting class %s failed", class_id)
            notifications.flash_notification(notifications.error("Failed to delete class. Please try again."))
        return redirect(url_for("dashboard"))
