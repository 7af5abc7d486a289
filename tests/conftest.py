import pytest

from textscan.config import reset_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    for name in (
        "TEXTSCAN_CONFIG_FILE",
        "TEXTSCAN_DEFAULT_BASE",
        "TEXTSCAN_DEFAULT_TYPE",
        "TEXTSCAN_DELIMITERS",
        "TEXTSCAN_LOG_PATH",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
