from __future__ import annotations

from copy import deepcopy
from datetime import UTC, datetime

import pytest

BASE_CONFIG: dict = {
    "name": "service",
    "port": 8080,
    "tags": ["a", "b"],
    "db": {
        "host": "localhost",
        "options": {"timeout": 30, "retries": 3},
    },
    "servers": [
        {"host": "s1", "weight": 1},
        {"host": "s2", "weight": 2},
    ],
}


@pytest.fixture()
def base_config() -> dict:
    return deepcopy(BASE_CONFIG)


@pytest.fixture()
def config_factory() -> callable:
    def make(**overrides: object) -> dict:
        data = deepcopy(BASE_CONFIG)
        data.update(deepcopy(overrides))
        return data

    return make


@pytest.fixture()
def records() -> list[dict]:
    """Records with a repeated 'a' field, in the order the dedup helpers should keep."""
    return [{"a": "110"}, {"a": "111"}, {"a": "113"}, {"a": "111"}]


@pytest.fixture
def sample_datetimes():
    """Common datetimes for date helper tests."""
    return {
        "leap_day": datetime(2012, 2, 29, 16, 4, 0),
        "october": datetime(2017, 10, 18, 16, 4, 0),
        "formatted": datetime(2017, 10, 18, 15, 38, 34),
        # Aware UTC value so the weekday token does not depend on the host timezone
        "wednesday_utc": datetime(2017, 10, 18, 15, 38, 34, tzinfo=UTC),
        "shift_start": datetime(2018, 7, 6, 9, 29, 57),
        "shift_end": datetime(2018, 7, 6, 18, 15, 32),
    }
