"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from lintstyle.core.rules import Rule, default_rules
from lintstyle.readers import InMemoryReader

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def rules() -> list[Rule]:
    """Return the default rule set."""
    return default_rules()


@pytest.fixture
def memory_reader() -> InMemoryReader:
    return InMemoryReader()
