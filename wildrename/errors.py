"""Error types raised while mapping and applying renames."""

from pathlib import Path


class MappingError(ValueError):
    """A destination filename could not be computed from the pattern pair."""

    def __init__(self, reason: str, pattern: str = "", file: str = "") -> None:
        self.reason = reason
        self.pattern = pattern
        self.file = file
        super().__init__(self._format())

    def _format(self) -> str:
        message = self.reason
        if self.pattern:
            message += f" (pattern '{self.pattern}'"
            message += f", file '{self.file}')" if self.file else ")"
        elif self.file:
            message += f" (file '{self.file}')"
        return message


class EmptyPatternError(MappingError):
    """Raised when a search or replace pattern is empty."""

    def __init__(self, role: str = "pattern") -> None:
        super().__init__(f"{role} must not be empty")


class UnparsableDotPatternError(MappingError):
    """Raised when a `*.*` pattern does not split into exactly a stem and an extension."""


class AmbiguousWildcardError(MappingError):
    """Raised when the position of a wildcard cannot be resolved to a substitution."""


class InvalidDestinationError(MappingError):
    """Raised when a computed destination is not a usable filename."""


class DestinationExistsError(FileExistsError):
    """Raised when a rename would overwrite an existing file or another rename's target."""

    def __init__(self, source: Path | str, destination: Path | str, reason: str = "target file exists") -> None:
        self.source = source
        self.destination = destination
        super().__init__(f"Cannot rename {source}: {reason}: {destination}")


class NoMatchingFilesError(FileNotFoundError):
    """Raised when no file matches the search pattern."""

    def __init__(self, pattern: str, directory: Path | str) -> None:
        self.pattern = pattern
        self.directory = directory
        super().__init__(f"No files matching '{pattern}' found in {directory}")
