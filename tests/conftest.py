from typing import Generator

import pytest

from config import config


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    monkeypatch.delenv("DECIMAL_DISPLAY_CURRENCY_ROUNDING", raising=False)
    config.cache_clear()
    yield
    config.cache_clear()
