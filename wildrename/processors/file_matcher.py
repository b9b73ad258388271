"""Resolution of command-line arguments into a search pattern and candidate files."""

import fnmatch
from pathlib import Path

from wildrename.errors import NoMatchingFilesError
from wildrename.models.pattern import WILDCARD


def _to_fnmatch(pattern: str) -> str:
    """Translate a `*`-only pattern into an fnmatch pattern with `?` and `[` taken literally."""
    escaped = []
    for char in pattern:
        if char in "?[":
            escaped.append(f"[{char}]")
        else:
            escaped.append(char)
    return "".join(escaped)


def matches(pattern: str, filename: str) -> bool:
    """Check whether `filename` matches a pattern in which only `*` is a wildcard."""
    if WILDCARD not in pattern:
        return pattern == filename
    return fnmatch.fnmatchcase(filename, _to_fnmatch(pattern))


def find_candidates(pattern: str, directory: Path) -> list[str]:
    """List regular files in `directory` matching `pattern`, in lexical order."""
    return sorted(path.name for path in directory.iterdir() if path.is_file() and matches(pattern, path.name))


def resolve_arguments(arguments: list[str], directory: Path) -> tuple[str, list[str]]:
    """Turn the search arguments given on the command line into a pattern and candidates.

    A single argument containing a wildcard is matched against the files in
    `directory`. Anything else is taken as a list of filenames already
    expanded by the shell (an unquoted `*.htm`, say); those keep their input
    order and are joined with spaces to form the search pattern.

    Args:
        arguments: Search arguments, i.e. everything but the replace pattern.
        directory: Directory holding the files to rename.

    Returns:
        Tuple of (search_pattern, candidate filenames).

    Raises:
        NoMatchingFilesError: If the arguments select no files.
    """
    search_pattern = " ".join(arguments)

    if len(arguments) == 1 and WILDCARD in arguments[0]:
        candidates = find_candidates(arguments[0], directory)
    else:
        candidates = list(arguments)

    if not candidates:
        raise NoMatchingFilesError(search_pattern, directory)

    return search_pattern, candidates
