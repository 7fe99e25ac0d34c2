"""
Pytest fixtures and configuration for the test suite.
"""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add project root to path so tests can import writeable_tuple package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from writeable_tuple.components.tuples.tuple_comp import ExtendedTuple, WriteableTuple  # noqa: E402

# === TUPLE FIXTURES ===


@pytest.fixture
def pair() -> WriteableTuple:
    """A 2-tuple (1, "a")."""
    return WriteableTuple(1, "a")


@pytest.fixture
def octuple() -> ExtendedTuple:
    """Extended tuple 1..7 with a 1-tuple (8) as rest."""
    return ExtendedTuple(1, 2, 3, 4, 5, 6, 7, WriteableTuple(8))


@pytest.fixture
def fifteen_chain() -> ExtendedTuple:
    """Two nested extended links holding 1..15."""
    inner = ExtendedTuple(8, 9, 10, 11, 12, 13, 14, WriteableTuple(15))
    return ExtendedTuple(1, 2, 3, 4, 5, 6, 7, inner)


# === CONFIG FIXTURES ===


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """
    Run config tests in an empty working directory with no WRITEABLE_TUPLE_* env vars.

    Yields the working directory so tests can drop config files into it.
    """
    import os

    for key in list(os.environ):
        if key.startswith("WRITEABLE_TUPLE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


# === PYTEST MARKERS ===


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a fast unit test")
    config.addinivalue_line("markers", "slow: mark test as slow running")
