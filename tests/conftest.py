from __future__ import annotations

from pathlib import Path

import pytest

# tests/<group>/... -> marker
_GROUP_MARKERS = {
    "unit": "unit",
    "parser": "unit",
}


def _top_level_tests_group(path: Path) -> str | None:
    parts = path.parts
    try:
        tests_index = parts.index("tests")
    except ValueError:
        return None
    if tests_index + 1 >= len(parts):
        return None
    return parts[tests_index + 1]


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    for item in items:
        path = Path(str(item.fspath))
        if path.name.endswith("_integration.py"):
            item.add_marker(pytest.mark.integration)
            continue
        marker = _GROUP_MARKERS.get(_top_level_tests_group(path) or "")
        if marker:
            item.add_marker(getattr(pytest.mark, marker))
