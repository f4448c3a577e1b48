from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StoreSession:
    """Credential context handed to every store operation.

    Repositories scope their queries with ``teacher_id``; nothing reads the
    logged-in teacher from global state.
    """

    teacher_id: int
    full_name: str
    email: str
