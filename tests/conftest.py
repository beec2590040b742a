import importlib
import pytest

SETTINGS_VARS = (
    "RADIX_WIDGETS_LOG_LEVEL",
    "RADIX_WIDGETS_MAX_DIGITS",
    "RADIX_WIDGETS_DEFAULT_VIEW",
    "RADIX_WIDGETS_DEFAULT_COLOR",
    "RADIX_WIDGETS_DEFAULT_IP",
)

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # set-then-delete so anything a .env load adds is undone at teardown
    for name in SETTINGS_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

@pytest.fixture(scope="session")
def byte_codec():
    return importlib.import_module("radix_widgets.byte_codec")

@pytest.fixture(scope="session")
def bigbase():
    return importlib.import_module("radix_widgets.bigbase")

@pytest.fixture(scope="session")
def color():
    return importlib.import_module("radix_widgets.color")
