from pathlib import Path
from typing import Any
import json

from modcheck.errors import NotFoundError, ParseError

import logging
logger = logging.getLogger(__name__)

_DEPENDENCY_KEYS = ("dependencies", "devDependencies")


def read_manifest(path: Path | str) -> dict[str, Any]:
    """Read a package.json file and parse it into a dict.

    Args:
        path (Path | str): Path to the manifest file.

    Raises:
        NotFoundError: If the file does not exist or cannot be read.
        ParseError: If the content is not a valid JSON object.

    Returns:
        dict[str, Any]: The full parsed manifest.
    """
    path = Path(path) # works for both str and Path
    logger.debug(f"Reading manifest {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise NotFoundError(f"Could not read manifest {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Manifest {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(f"Manifest {path} must contain a JSON object, got {type(data).__name__}")

    return data


def get_dependency_groups(manifest: dict[str, Any]) -> tuple[dict[str, str], dict[str, str]]:
    """Extract the runtime and development dependency mappings.

    Missing groups (or groups set to null) default to an empty dict.

    Args:
        manifest (dict[str, Any]): Parsed manifest.

    Raises:
        ParseError: If a dependency group is present but is not a JSON object.

    Returns:
        tuple[dict[str, str], dict[str, str]]: (dependencies, devDependencies)
    """
    groups = []
    for key in _DEPENDENCY_KEYS:
        group = manifest.get(key)
        if group is None:
            group = {}
        if not isinstance(group, dict):
            raise ParseError(f"'{key}' must be a JSON object, got {type(group).__name__}")
        groups.append(group)

    dependencies, dev_dependencies = groups
    return dependencies, dev_dependencies
