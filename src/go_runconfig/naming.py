"""
Name and path derivation for Go run configurations.

Every helper takes the separator explicitly so behaviour does not depend on the
host platform. Paths are handled as plain strings: nothing here touches the
filesystem or normalizes its input.
"""

from __future__ import annotations

import os
from typing import List

from .errors import InvalidInputError, PathDerivationOutOfBoundsError

PROJECT_DIR_MACRO = "$PROJECT_DIR$"
FOLDER_DEPTH = 3


def _segments(path: str, required: int, sep: str) -> List[str]:
    if not sep:
        raise InvalidInputError("Path separator must not be empty")
    parts = path.split(sep)
    if len(parts) < required:
        raise PathDerivationOutOfBoundsError(path, required, len(parts))
    return parts


def derive_config_name(path: str, n: int = 2, sep: str = os.sep) -> str:
    """Return the last ``n`` segments of ``path`` joined with ``sep``.

    ``cmd/server`` for ``/home/user/proj/cmd/server`` with ``n=2``.
    """
    if n < 1:
        raise InvalidInputError(f"Name depth must be at least 1, got {n}")
    parts = _segments(path, n, sep)
    return sep.join(parts[-n:])


def derive_file_name(config_name: str, sep: str = os.sep) -> str:
    """Turn a configuration name into a filesystem-safe file stem."""
    return config_name.replace(sep, "_")


def derive_folder_name(path: str, sep: str = os.sep) -> str:
    """Return the 3rd-from-last segment, used as the IDE folder grouping."""
    parts = _segments(path, FOLDER_DEPTH, sep)
    return parts[-FOLDER_DEPTH]


def prefix_project_root(directory: str, sep: str = os.sep, placeholder: str = PROJECT_DIR_MACRO) -> str:
    # the IDE substitutes the placeholder at load time
    return f"{placeholder}{sep}{directory}"


def compose_package_path(package_root: str, module: str, working_dir: str, sep: str = os.sep) -> str:
    """Build the package path the IDE launches.

    One trailing separator is dropped from ``package_root`` before the three
    parts are joined; no check is made that the result is importable.
    """
    if sep and package_root.endswith(sep):
        package_root = package_root[: -len(sep)]
    return sep.join([package_root, module, working_dir])
