from __future__ import annotations

from pathlib import Path

import pytest

_MARKED_DIRECTORIES = frozenset({"unit", "integration", "end2end"})


def _directory_marker(item: pytest.Item, tests_dir: Path) -> str | None:
    try:
        relative = Path(item.path).resolve().relative_to(tests_dir)
    except ValueError:
        return None

    if len(relative.parts) < 2:  # noqa: PLR2004
        return None
    top = relative.parts[0]
    return top if top in _MARKED_DIRECTORIES else None


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    tests_dir = (Path(config.rootpath) / "tests").resolve()

    for item in items:
        marker = _directory_marker(item, tests_dir)
        if marker is not None:
            item.add_marker(getattr(pytest.mark, marker))
