"""Batch rename processor driven by wildcard patterns."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from wildrename.errors import DestinationExistsError
from wildrename.models.pattern import Pattern
from wildrename.models.rename import RenameMapping, RenamePlan
from wildrename.processors.name_mapper import NameMapper
from wildrename.processors.pattern_classifier import PatternClassifier


# Console for rich output
console = Console()

DEFAULT_DIRECTORY = Path(".")


def _is_taken(path: Path) -> bool:
    """Check whether `path` is occupied, counting dangling symlinks."""
    return path.exists() or path.is_symlink()


class RenameProcessor:
    """Processor for renaming a batch of files with a search/replace pattern pair."""

    def __init__(
        self,
        directory: Path = DEFAULT_DIRECTORY,
        verbosity: int = 0,
        classifier: PatternClassifier | None = None,
        mapper: NameMapper | None = None,
    ) -> None:
        """Initialize the rename processor.

        Args:
            directory: Directory holding the files to rename.
            verbosity: Output level; messages above it are suppressed.
            classifier: Pattern classifier to use (a default one if None).
            mapper: Name mapper to use (a default one if None).
        """
        self.directory = directory
        self.verbosity = verbosity
        self.classifier = classifier or PatternClassifier()
        self.mapper = mapper or NameMapper()

    def _log(self, level: int, message: str) -> None:
        """Print `message` if the processor's verbosity is at least `level`."""
        if level <= self.verbosity:
            console.print(message)

    def generate_renames(self, search_pattern: str, replace_pattern: str, candidates: list[str]) -> RenamePlan:
        """Compute the rename of every candidate and check the batch for conflicts.

        The pattern pair is classified once and every candidate is mapped in
        order. Nothing is renamed here, so a raised error leaves every file
        untouched.

        Args:
            search_pattern: Pattern the candidates matched.
            replace_pattern: Pattern describing the destination filenames.
            candidates: Source filenames (without directory path), in processing order.

        Returns:
            RenamePlan with one mapping per candidate.

        Raises:
            MappingError: If the pattern pair cannot be mapped for some candidate.
            DestinationExistsError: If a destination already exists or is claimed twice.
        """
        search = Pattern.parse(search_pattern, role="search pattern")
        replace = Pattern.parse(replace_pattern, role="replace pattern")

        self._log(
            1,
            f"Search pattern = [cyan]{escape(search.raw)}[/cyan], replace pattern = [cyan]{escape(replace.raw)}[/cyan]",
        )
        self._log(3, f"Wildcard count: search: {search.wildcard_count} replace: {replace.wildcard_count}")

        shape = self.classifier.classify_patterns(search, replace)
        self._log(2, f"Pattern shape: [magenta]{shape}[/magenta]")
        self._log(2, f"Files to rename ({len(candidates)}): {escape(' '.join(candidates))}")

        mappings = [
            RenameMapping(
                source_name=source_name,
                dest_name=self.mapper.map_patterns(shape, search, replace, source_name),
            )
            for source_name in candidates
        ]
        self._check_conflicts(mappings)

        return RenamePlan(shape=shape, mappings=mappings)

    def _check_conflicts(self, mappings: list[RenameMapping]) -> None:
        """Reject mappings whose destination exists on disk or is shared with an earlier mapping.

        Raises:
            DestinationExistsError: On the first conflict found.
        """
        claimed: dict[str, str] = {}
        for mapping in mappings:
            if mapping.dest_name in claimed:
                raise DestinationExistsError(
                    mapping.source_name,
                    mapping.dest_name,
                    reason=f"target is also the destination of {claimed[mapping.dest_name]}",
                )
            if _is_taken(self.directory / mapping.dest_name):
                raise DestinationExistsError(mapping.source_name, self.directory / mapping.dest_name)
            claimed[mapping.dest_name] = mapping.source_name

    def _resolve_full_paths(self, plan: RenamePlan) -> list[tuple[Path, Path]]:
        """Resolve rename mappings to full source/target paths.

        Args:
            plan: Plan with filename-only mappings.

        Returns:
            List of (source_path, target_path) tuples.
        """
        return [
            (self.directory / mapping.source_name, self.directory / mapping.dest_name) for mapping in plan.mappings
        ]

    def apply_renames(self, renames: list[tuple[Path, Path]], dry_run: bool = False) -> int:
        """Apply rename operations to files.

        Args:
            renames: List of (source_path, target_path) tuples.
            dry_run: If True, only report what would be renamed.

        Returns:
            Number of files renamed (or that would be renamed on a dry run).

        Raises:
            FileNotFoundError: If source file doesn't exist.
            DestinationExistsError: If target file already exists.
        """
        # First validate all operations
        for source, target in renames:
            if not source.exists():
                raise FileNotFoundError(f"Source file not found: {source}")
            if _is_taken(target):
                raise DestinationExistsError(source, target)

        if dry_run:
            for source, target in renames:
                console.print(f"Would rename: {escape(source.name)} → {escape(target.name)}")
            return len(renames)

        for source, target in renames:
            # No clobber: a file may have appeared since validation.
            if _is_taken(target):
                raise DestinationExistsError(source, target)
            source.rename(target)
            self._log(1, f"renamed '{escape(str(source))}' -> '{escape(str(target))}'")

        return len(renames)
