"""Destination filename computation for classified pattern pairs."""

from collections.abc import Callable

from wildrename.errors import AmbiguousWildcardError, InvalidDestinationError, UnparsableDotPatternError
from wildrename.models.pattern import WILDCARD, Pattern, PatternShape


AMBIGUOUS_REASON = "cannot locate wildcard substitution target"
UNPARSABLE_DOT_REASON = "cannot parse wildcard dot pattern"

Handler = Callable[[Pattern, Pattern, str], str]


def split_stem(filename: str) -> tuple[str, str]:
    """Split a filename on its first '.' into (stem, extension)."""
    stem, _, extension = filename.partition(".")
    return stem, extension


def join_stem(stem: str, extension: str) -> str:
    """Inverse of split_stem; a missing extension drops the dot."""
    return f"{stem}.{extension}" if extension else stem


def _fill(template: str, value: str) -> str:
    """Put `value` in place of the first wildcard in `template`, dropping any others."""
    if WILDCARD not in template:
        return template
    head, _, tail = template.partition(WILDCARD)
    return head + value + tail.replace(WILDCARD, "")


def substitute_components(search_parts: list[str], replace_parts: list[str], name: str) -> str:
    """Replace wildcard-delimited search components with their positional replacements.

    Components are located left to right, each at or after the end of the
    previous replacement. An empty leading component prepends its
    replacement and an empty trailing one appends it. Each non-empty
    component is replaced at its first occurrence after the cursor.
    """
    result = name
    cursor = 0
    last = len(search_parts) - 1

    for index, (part, replacement) in enumerate(zip(search_parts, replace_parts)):
        if not part:
            if index == 0:
                position = 0
            elif index == last:
                position = len(result)
            else:
                position = cursor
            result = result[:position] + replacement + result[position:]
            cursor = position + len(replacement)
            continue

        position = result.find(part, cursor)
        if position == -1:
            continue

        result = result[:position] + replacement + result[position + len(part) :]
        cursor = position + len(replacement)

    return result


def _split_dot_pattern(pattern: Pattern, source_name: str) -> tuple[str, str]:
    parts = pattern.raw.split(".")
    if len(parts) != 2:
        raise UnparsableDotPatternError(UNPARSABLE_DOT_REASON, pattern=pattern.raw, file=source_name)
    return parts[0], parts[1]


def _no_wildcard_either(search: Pattern, replace: Pattern, source_name: str) -> str:
    return replace.raw


def _both_single_wildcard(search: Pattern, replace: Pattern, source_name: str) -> str:
    return substitute_components(search.components, replace.components, source_name)


def _search_double_dot_wildcard(search: Pattern, replace: Pattern, source_name: str) -> str:
    search_stem, _ = _split_dot_pattern(search, source_name)
    replace_stem, replace_extension = _split_dot_pattern(replace, source_name)
    stem, extension = split_stem(source_name)

    if WILDCARD not in replace_stem:
        new_stem = replace_stem
    elif search_stem.count(WILDCARD) == replace_stem.count(WILDCARD):
        new_stem = substitute_components(search_stem.split(WILDCARD), replace_stem.split(WILDCARD), stem)
    else:
        new_stem = _fill(replace_stem, stem)

    return join_stem(new_stem, _fill(replace_extension, extension))


def _search_wildcard_with_dot_suffix(search: Pattern, replace: Pattern, source_name: str) -> str:
    stem, _ = split_stem(source_name)
    literal = replace.literal
    new_extension = literal.split(".", 1)[1] if "." in literal else literal
    if not new_extension:
        raise AmbiguousWildcardError(AMBIGUOUS_REASON, pattern=replace.raw, file=source_name)
    return join_stem(stem, new_extension)


def _search_wildcard_at_start(search: Pattern, replace: Pattern, source_name: str) -> str:
    anchor = search.components[-1]
    position = source_name.rfind(anchor) if anchor else -1
    if position == -1:
        raise AmbiguousWildcardError(AMBIGUOUS_REASON, pattern=search.raw, file=source_name)
    return source_name[:position] + replace.literal


def _search_dot_wildcard_suffix(search: Pattern, replace: Pattern, source_name: str) -> str:
    _, extension = split_stem(source_name)
    new_stem = replace.literal.split(".", 1)[0]
    return join_stem(new_stem, extension)


def _search_wildcard_at_end(search: Pattern, replace: Pattern, source_name: str) -> str:
    anchor = search.components[0]
    position = source_name.find(anchor) if anchor else -1
    if position == -1:
        raise AmbiguousWildcardError(AMBIGUOUS_REASON, pattern=search.raw, file=source_name)
    return replace.literal + source_name[position + len(anchor) :]


def _replace_double_dot_wildcard(search: Pattern, replace: Pattern, source_name: str) -> str:
    replace_stem, replace_extension = _split_dot_pattern(replace, source_name)
    stem, extension = split_stem(source_name)
    return join_stem(_fill(replace_stem, stem), _fill(replace_extension, extension))


def _replace_wildcard_with_dot_suffix(search: Pattern, replace: Pattern, source_name: str) -> str:
    stem, _ = split_stem(source_name)
    return join_stem(stem, replace.raw[2:].replace(WILDCARD, ""))


def _replace_wildcard_at_start(search: Pattern, replace: Pattern, source_name: str) -> str:
    stem, _ = split_stem(source_name)
    return stem + replace.raw[1:].replace(WILDCARD, "")


def _replace_dot_wildcard_suffix(search: Pattern, replace: Pattern, source_name: str) -> str:
    _, extension = split_stem(source_name)
    return join_stem(replace.raw[:-2].replace(WILDCARD, ""), extension)


def _replace_wildcard_at_end(search: Pattern, replace: Pattern, source_name: str) -> str:
    return replace.literal + source_name


def _ambiguous(search: Pattern, replace: Pattern, source_name: str) -> str:
    raise AmbiguousWildcardError(AMBIGUOUS_REASON, pattern=replace.raw, file=source_name)


_HANDLERS: dict[PatternShape, Handler] = {
    PatternShape.NO_WILDCARD_EITHER: _no_wildcard_either,
    PatternShape.BOTH_SINGLE_WILDCARD: _both_single_wildcard,
    PatternShape.SEARCH_DOUBLE_DOT_WILDCARD: _search_double_dot_wildcard,
    PatternShape.SEARCH_WILDCARD_WITH_DOT_SUFFIX: _search_wildcard_with_dot_suffix,
    PatternShape.SEARCH_WILDCARD_AT_START: _search_wildcard_at_start,
    PatternShape.SEARCH_DOT_WILDCARD_SUFFIX: _search_dot_wildcard_suffix,
    PatternShape.SEARCH_WILDCARD_AT_END: _search_wildcard_at_end,
    PatternShape.REPLACE_DOUBLE_DOT_WILDCARD: _replace_double_dot_wildcard,
    PatternShape.REPLACE_WILDCARD_WITH_DOT_SUFFIX: _replace_wildcard_with_dot_suffix,
    PatternShape.REPLACE_WILDCARD_AT_START: _replace_wildcard_at_start,
    PatternShape.REPLACE_DOT_WILDCARD_SUFFIX: _replace_dot_wildcard_suffix,
    PatternShape.REPLACE_WILDCARD_AT_END: _replace_wildcard_at_end,
    PatternShape.AMBIGUOUS: _ambiguous,
}

_unhandled = set(PatternShape) - set(_HANDLERS)
if _unhandled:
    raise RuntimeError(f"No name mapping handler for shapes: {sorted(s.value for s in _unhandled)}")


def is_valid_filename(name: str) -> bool:
    """Check that `name` is a single path component usable as a filename."""
    return bool(name) and name not in (".", "..") and "/" not in name and "\0" not in name


class NameMapper:
    """Computes the destination filename of one source file for a classified pattern pair.

    Mapping is a pure function of its inputs; it never touches the filesystem.
    """

    def map(self, shape: PatternShape, search_pattern: str, replace_pattern: str, source_name: str) -> str:
        """Compute the destination filename for `source_name`.

        Args:
            shape: Shape of the pattern pair, as returned by PatternClassifier.
            search_pattern: Pattern the source filename matched.
            replace_pattern: Pattern describing the destination filename.
            source_name: Filename (without directory path) to map.

        Returns:
            The destination filename.

        Raises:
            AmbiguousWildcardError: If the wildcard substitution target cannot be located.
            UnparsableDotPatternError: If a `*.*` pattern is not exactly a stem and an extension.
            InvalidDestinationError: If the result is not a usable filename.
        """
        search = Pattern.parse(search_pattern, role="search pattern")
        replace = Pattern.parse(replace_pattern, role="replace pattern")
        return self.map_patterns(shape, search, replace, source_name)

    def map_patterns(self, shape: PatternShape, search: Pattern, replace: Pattern, source_name: str) -> str:
        """Compute the destination filename from already-parsed patterns."""
        dest_name = _HANDLERS[shape](search, replace, source_name)
        if not is_valid_filename(dest_name):
            raise InvalidDestinationError(
                f"invalid destination filename '{dest_name}'", pattern=replace.raw, file=source_name
            )
        return dest_name


def map_name(shape: PatternShape, search_pattern: str, replace_pattern: str, source_name: str) -> str:
    """Compute a destination filename with a default NameMapper."""
    return NameMapper().map(shape, search_pattern, replace_pattern, source_name)
