"""Filesystem side of the generator: output directory, cleanup and write."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

from .errors import DirectoryCreationError, FileWriteError, OutputDirectoryError

logger = logging.getLogger(__name__)

CURRENT_PREFIX = "current_"
RUN_CONFIG_MARKERS = (
    "ProjectRunConfigurationManager",
    "GoApplicationRunConfiguration",
    'component name="ProjectRunConfigurationManager"',
)


@dataclass
class CleanupReport:
    """Outcome of a current-mode purge."""

    removed: List[Path] = field(default_factory=list)
    failures: List[Tuple[Path, OSError]] = field(default_factory=list)

    @property
    def removed_count(self) -> int:
        return len(self.removed)


def ensure_output_dir(directory: Path) -> Path:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationError(f"Error creating directory {directory}: {exc}") from exc
    return directory


def looks_like_run_configuration(text: str) -> bool:
    return any(marker in text for marker in RUN_CONFIG_MARKERS)


def remove_current_configurations(directory: Path, prefix: str = CURRENT_PREFIX) -> CleanupReport:
    """Delete ``<prefix>*.xml`` run configurations directly under ``directory``.

    Files that cannot be read, or that do not carry a run configuration marker,
    are left alone. A failed deletion is logged and recorded but does not stop
    the scan.
    """
    report = CleanupReport()
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise OutputDirectoryError(f"failed to read directory {directory}: {exc}") from exc

    for path in entries:
        if not path.is_file():
            continue
        if not (path.name.startswith(prefix) and path.name.endswith(".xml")):
            continue
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.debug("Skipping unreadable %s: %s", path, exc)
            continue
        if not looks_like_run_configuration(content):
            continue
        try:
            path.unlink()
        except OSError as exc:
            logger.warning("Warning: failed to remove %s: %s", path, exc)
            report.failures.append((path, exc))
            continue
        logger.info("Removed existing current configuration: %s", path.name)
        report.removed.append(path)

    if report.removed:
        logger.info("Removed %d existing current run configuration(s)", report.removed_count)
    return report


def write_configuration(directory: Path, file_stem: str, payload: bytes) -> Path:
    """Write ``payload`` to ``<directory>/<file_stem>.xml``, replacing any existing file."""
    target = directory / f"{file_stem}.xml"
    try:
        target.write_bytes(payload)
    except OSError as exc:
        raise FileWriteError(f"Error writing run configuration file {target}: {exc}") from exc
    return target


def absolute_or_relative(path: Path) -> Path:
    try:
        return path.absolute()
    except OSError:
        return path
