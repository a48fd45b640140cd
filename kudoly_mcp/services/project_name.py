"""Default project name from the manifest in the working directory."""

import json
import tomllib
from pathlib import Path
from typing import Any, Optional, Union

import structlog

logger = structlog.get_logger(__name__)


def _name_from_package_json(path: Path) -> Optional[Any]:
    content = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(content, dict):
        return content.get("name")
    return None


def _name_from_pyproject(path: Path) -> Optional[Any]:
    content = tomllib.loads(path.read_text(encoding="utf-8"))
    project = content.get("project") or {}
    poetry = content.get("tool", {}).get("poetry") or {}
    return project.get("name") or poetry.get("name")


_MANIFESTS = (
    ("package.json", _name_from_package_json),
    ("pyproject.toml", _name_from_pyproject),
)


def get_project_name_from_manifest(
    directory: Optional[Union[str, Path]] = None,
) -> Optional[str]:
    """
    Read the project name from the local manifest.

    Looks at package.json, then pyproject.toml, in ``directory`` (the
    current working directory by default).

    Returns:
        The manifest's name, or None when no manifest yields a non-empty
        string name. Never raises.
    """
    base = Path(directory) if directory is not None else Path.cwd()

    for filename, read_name in _MANIFESTS:
        path = base / filename
        if not path.is_file():
            continue
        try:
            name = read_name(path)
        except (OSError, ValueError, AttributeError) as e:
            logger.debug("Unreadable manifest", path=str(path), error=str(e))
            continue
        if isinstance(name, str) and name.strip():
            return name
    return None
