"""Per-browser attendance state for the interactive API.

A board holds the view for the currently selected (class, day) and guards it
against out-of-order responses:

* every selection bumps a generation counter; a fetch or toggle issued for an
  older generation is discarded instead of applied;
* every toggle on a student takes a sequence token; only the latest issued
  token for that student may patch its entry.
"""
from __future__ import annotations

import threading
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.constants import DEFAULT_MAX_BOARDS
from ..core.exceptions import StaleSelectionError
from .model import AttendanceEntry, AttendanceView


@dataclass(frozen=True)
class SelectionTicket:
    class_id: int
    day: date
    generation: int


class AttendanceBoard:
    def __init__(self):
        self._lock = threading.Lock()
        self._generation = 0
        self._ticket: Optional[SelectionTicket] = None
        self._view: Optional[AttendanceView] = None
        self._issued: dict[int, int] = {}

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def view(self) -> Optional[AttendanceView]:
        return self._view

    def select(self, class_id: int, day: date) -> SelectionTicket:
        with self._lock:
            self._generation += 1
            self._ticket = SelectionTicket(class_id=int(class_id), day=day, generation=self._generation)
            self._view = None
            self._issued.clear()
            return self._ticket

    def is_current(self, ticket: SelectionTicket) -> bool:
        return ticket == self._ticket

    def ticket_for(self, class_id: int, day: date, generation: int) -> SelectionTicket:
        ticket = SelectionTicket(class_id=int(class_id), day=day, generation=int(generation))
        if not self.is_current(ticket):
            raise StaleSelectionError("The selected class or date has changed; reload the attendance list")
        return ticket

    def load(self, ticket: SelectionTicket, view: AttendanceView) -> bool:
        """Install a freshly fetched view unless a newer selection was made meanwhile."""
        with self._lock:
            if ticket != self._ticket:
                return False
            self._view = view
            return True

    def begin_toggle(self, ticket: SelectionTicket, student_id: int) -> tuple[int, AttendanceView]:
        """Reserve the next sequence token for ``student_id``.

        Returns the token and the view to mutate from.
        """
        with self._lock:
            if ticket != self._ticket or self._view is None:
                raise StaleSelectionError("The selected class or date has changed; reload the attendance list")
            seq = self._issued.get(int(student_id), 0) + 1
            self._issued[int(student_id)] = seq
            return seq, self._view

    def finish_toggle(self, ticket: SelectionTicket, student_id: int, seq: int, entry: AttendanceEntry) -> bool:
        """Patch one entry if this toggle is still the latest for its student."""
        with self._lock:
            if ticket != self._ticket or self._view is None:
                return False
            if self._issued.get(int(student_id)) != seq:
                return False
            self._view = self._view.with_entry(entry)
            return True

    def abandon_toggle(self, ticket: SelectionTicket, student_id: int, seq: int) -> bool:
        """Drop the view after the latest toggle for ``student_id`` failed.

        Results of earlier toggles for that student were discarded in its
        favour, so the entry can no longer be trusted; the next toggle is
        rejected as stale until the client selects again.
        """
        with self._lock:
            if ticket != self._ticket or self._issued.get(int(student_id)) != seq:
                return False
            self._view = None
            return True


class BoardRegistry:
    """Boards keyed by an opaque id kept in the Flask session.

    Bounded; the least recently used board is evicted first.
    """

    def __init__(self, max_boards: int = DEFAULT_MAX_BOARDS):
        self._max_boards = max(1, int(max_boards))
        self._boards: "OrderedDict[str, AttendanceBoard]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._boards)

    def get_or_create(self, board_id: str) -> AttendanceBoard:
        with self._lock:
            board = self._boards.get(board_id)
            if board is None:
                board = AttendanceBoard()
                self._boards[board_id] = board
                while len(self._boards) > self._max_boards:
                    self._boards.popitem(last=False)
            else:
                self._boards.move_to_end(board_id)
            return board

    def get(self, board_id: str) -> Optional[AttendanceBoard]:
        with self._lock:
            board = self._boards.get(board_id)
            if board is not None:
                self._boards.move_to_end(board_id)
            return board

    def discard(self, board_id: str) -> None:
        with self._lock:
            self._boards.pop(board_id, None)
