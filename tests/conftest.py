from __future__ import annotations

from datetime import date

import pytest


@pytest.fixture
def fixed_today() -> date:
    return date(2026, 2, 1)
