"""Errors raised while planning or executing a mass move.

Every error carries its user-facing message as ``str(error)``. The CLI is the
only place where they are turned into an exit code.
"""

from mmove.constants import ERROR_PREFIX


class MassMoveError(Exception):
    """Base class for all mass move failures."""


class DirectoryUnreadableError(MassMoveError):
    """The source directory named by the pattern cannot be listed."""

    def __init__(self, directory: str) -> None:
        self.directory = directory
        super().__init__(f"{ERROR_PREFIX} Not able to read directory '{directory}'")


class NoMatchError(MassMoveError):
    """The source pattern matched no files."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(f"{ERROR_PREFIX} Files for pattern '{pattern}' not found")


class DuplicateDestinationError(MassMoveError):
    """Two different source files would be moved to the same destination."""

    def __init__(self, destination: str, first_source: str, second_source: str) -> None:
        self.destination = destination
        self.first_source = first_source
        self.second_source = second_source
        super().__init__(
            f"{ERROR_PREFIX} Files '{first_source}' and '{second_source}' "
            f"would both be moved to {destination}"
        )


class DestinationExistsError(MassMoveError):
    """A destination already exists and force mode is off."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"{ERROR_PREFIX} Not able to replace existing file: {path}")


class DestinationReplaceFailedError(MassMoveError):
    """Deleting an existing destination in force mode failed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{ERROR_PREFIX} Not able to replace existing file: {path} ({reason})")


class OutputDirectoryCreateError(MassMoveError):
    """The destination directory tree could not be created."""

    def __init__(self, directory: str, reason: str) -> None:
        self.directory = directory
        self.reason = reason
        super().__init__(f"{ERROR_PREFIX} Not able to create directory '{directory}' ({reason})")


class RenameFailedError(MassMoveError):
    """The rename primitive failed for one file."""

    def __init__(self, source: str, destination: str, reason: str) -> None:
        self.source = source
        self.destination = destination
        self.reason = reason
        super().__init__(f"Error: {reason}")
