from __future__ import annotations

from collections.abc import Generator

import pytest

from calendar_data import timezone_utils
from layout import debug


@pytest.fixture(autouse=True)
def reset_module_state() -> Generator[None, None, None]:
    debug.set_debug(False)
    timezone_utils.set_timezone("Europe/Amsterdam")
    yield
    debug.set_debug(False)
    timezone_utils.set_timezone("Europe/Amsterdam")
