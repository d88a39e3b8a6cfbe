"""Global pytest fixtures and hooks for userreg."""

from __future__ import annotations

from pathlib import Path

import pytest

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.users",
]

TESTS_ROOT = Path(__file__).parent.resolve()

# Top-level test directory -> marker added to every test collected from it
DIRECTORY_MARKERS = {
    "unit": "unit",
    "contract": "contract",
    "integration": "integration",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Mark tests by the top-level directory they live in (e.g. `tests/unit/`)."""
    for item in items:
        path = item.path.resolve()
        if TESTS_ROOT not in path.parents:
            continue  # pragma: no cover
        top = path.relative_to(TESTS_ROOT).parts[0]
        if (marker_name := DIRECTORY_MARKERS.get(top)) is None:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))
