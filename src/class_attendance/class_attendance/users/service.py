from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_email, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.exceptions import AuthenticationError, ValidationError
from ..core.session import StoreSession
from .repository import TeacherRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use cases: sign up and log in a teacher."""

    def __init__(self, teachers: TeacherRepository):
        self._teachers = teachers

    def authenticate(self, email: str, password: str) -> StoreSession:
        teacher = self._teachers.get_by_email((email or "").strip().lower())
        if not teacher:
            raise AuthenticationError("Invalid email or password")

        # Malformed hashes (the 'CHANGE_ME' placeholder in seed.sql) simply fail the check.
        if not check_password_hash(teacher.password_hash, password or ""):
            raise AuthenticationError("Invalid email or password")

        return StoreSession(teacher_id=teacher.teacher_id, full_name=teacher.full_name, email=teacher.email)

    def register(self, *, full_name: str, email: str, password: str) -> StoreSession:
        full_name = require_non_empty(full_name, "Full name")
        email = require_email(email)
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._teachers.get_by_email(email):
            raise ValidationError("An account with this email already exists")

        teacher_id = self._teachers.create(
            full_name=full_name,
            email=email,
            password_hash=generate_password_hash(password),
        )
        logger.info("registered teacher %s", teacher_id)
        return StoreSession(teacher_id=teacher_id, full_name=full_name, email=email)
