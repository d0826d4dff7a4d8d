from __future__ import annotations

import pytest

from hr_console.common.validators import as_count, optional_int, require_positive_int
from hr_console.core.exceptions import ValidationError


def test_as_count_accepts_whole_numbers():
    assert as_count(None, "total") == 0
    assert as_count("", "total") == 0
    assert as_count("7", "total") == 7
    assert as_count(2.0, "total") == 2


@pytest.mark.parametrize("value", [1.9, "1.9", "many", True, [3]])
def test_as_count_rejects_fractional_or_non_numeric(value):
    with pytest.raises(ValidationError):
        as_count(value, "total")


def test_optional_int():
    assert optional_int(None, "id") is None
    assert optional_int("12", "id") == 12
    with pytest.raises(ValidationError):
        optional_int("abc", "id")


def test_require_positive_int():
    assert require_positive_int("90", "target_days") == 90
    with pytest.raises(ValidationError):
        require_positive_int(0, "target_days")
