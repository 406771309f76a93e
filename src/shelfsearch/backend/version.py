"""Expose the installed ShelfSearch version."""

from __future__ import annotations

from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Final

PACKAGE_NAME: Final = "shelfsearch"
PYPROJECT_FILE: Final = Path(__file__).resolve().parents[3] / "pyproject.toml"


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """Return the distribution version, or the ``pyproject.toml`` value in a checkout."""

    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:
        return _read_pyproject_version(PYPROJECT_FILE)


def _read_pyproject_version(path: Path) -> str:
    if not path.exists():  # pragma: no cover - repository invariant
        raise RuntimeError(f"Unable to locate project metadata at {path}")

    in_project_table = False
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if line.startswith("["):
            in_project_table = line == "[project]"
            continue
        if in_project_table and line.startswith("version"):
            version = line.partition("=")[2].strip().strip('"')
            if version:
                return version

    raise RuntimeError(f"No [project] version declared in {path.name}")


__all__ = ["get_project_version"]
