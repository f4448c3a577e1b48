from __future__ import annotations

import pytest

from src.class_attendance.class_attendance.common.validators import optional_email, parse_id, require_email
from src.class_attendance.class_attendance.core.exceptions import ValidationError


def test_require_email_lowercases():
    assert require_email(" Ada@Example.COM ") == "ada@example.com"


def test_optional_email_allows_blank():
    assert optional_email("  ") == ""
    assert optional_email(None) == ""


@pytest.mark.parametrize("value", ["", "abc", "0", "-4", None])
def test_parse_id_rejects_non_positive_or_garbage(value):
    with pytest.raises(ValidationError):
        parse_id(value, "Class")


def test_parse_id_ok():
    assert parse_id("12", "Class") == 12
