import pytest

from primval.backend.platform_detect import TARGET_TRIPLE_ENV, parse_triple
from primval.internals.report import Reporter


@pytest.fixture
def target64():
    return parse_triple("x86_64-pc-linux-gnu")


@pytest.fixture
def target32():
    return parse_triple("i686-pc-windows-msvc")


@pytest.fixture
def reporter():
    return Reporter(filename="literals.json")


@pytest.fixture
def host_is_64bit(monkeypatch):
    """Pin the 'host' to a 64-bit triple so host-dependent results are stable."""
    monkeypatch.setenv(TARGET_TRIPLE_ENV, "x86_64-unknown-linux-gnu")
