"""Exceptions raised while generating a run configuration."""

from __future__ import annotations


class RunConfigError(Exception):
    """Base class for every go-runconfig failure."""


class InvalidInputError(RunConfigError, ValueError):
    """The caller supplied values the generator cannot work with."""


class MissingRequiredInputError(InvalidInputError):
    """One or more required flags were left empty."""

    def __init__(self, missing):
        self.missing = tuple(missing)
        super().__init__(f"Missing required input(s): {', '.join(self.missing)}")


class PathDerivationOutOfBoundsError(InvalidInputError):
    """The path has fewer segments than a derivation needs."""

    def __init__(self, path: str, required: int, found: int):
        self.path = path
        self.required = required
        self.found = found
        super().__init__(
            f"Path '{path}' has {found} segment(s), at least {required} required"
        )


class SettingsError(InvalidInputError):
    """Settings file missing, unreadable or holding invalid values."""


class SerializationError(RunConfigError):
    """The descriptor could not be rendered as XML."""


class OutputError(RunConfigError, OSError):
    """Filesystem failure while preparing or writing the output."""


class DirectoryCreationError(OutputError):
    """The output directory could not be created."""


class OutputDirectoryError(OutputError):
    """The output directory could not be listed."""


class FileWriteError(OutputError):
    """The configuration file could not be written."""
