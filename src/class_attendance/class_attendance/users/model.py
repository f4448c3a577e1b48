from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Teacher:
    """Domain entity: a teacher account that owns classes.

    Plain data object; no database access here.
    """

    teacher_id: int
    full_name: str
    email: str
    password_hash: str
