import pytest

from paintcolor.config import DEBUG_CHECKS_ENV, set_debug_checks


@pytest.fixture(autouse=True)
def debug_checks_on(monkeypatch):
    """Run every test with debug checks enabled and no env override."""
    monkeypatch.delenv(DEBUG_CHECKS_ENV, raising=False)
    set_debug_checks(True)
    yield
    set_debug_checks(None)
