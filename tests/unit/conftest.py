import pytest

from pagecheck.utils.config import CheckOptions

from fakes import FakePage


@pytest.fixture
def page() -> FakePage:
    return FakePage()


@pytest.fixture
def options() -> CheckOptions:
    # keep polls short so failing checks resolve quickly
    return CheckOptions(timeout_ms=150, poll_interval_ms=5)
