"""Classification of search/replace pattern pairs into substitution shapes."""

from collections.abc import Callable

from wildrename.models.pattern import Pattern, PatternShape


EdgeTest = Callable[[str], bool]

# Edge tests applied to one side of the pair; first match wins.
_SEARCH_EDGE_SHAPES: list[tuple[EdgeTest, PatternShape]] = [
    (lambda p: "*.*" in p, PatternShape.SEARCH_DOUBLE_DOT_WILDCARD),
    (lambda p: p.startswith("*."), PatternShape.SEARCH_WILDCARD_WITH_DOT_SUFFIX),
    (lambda p: p.startswith("*"), PatternShape.SEARCH_WILDCARD_AT_START),
    (lambda p: p.endswith(".*"), PatternShape.SEARCH_DOT_WILDCARD_SUFFIX),
    (lambda p: p.endswith("*"), PatternShape.SEARCH_WILDCARD_AT_END),
]

_REPLACE_EDGE_SHAPES: list[tuple[EdgeTest, PatternShape]] = [
    (lambda p: "*.*" in p, PatternShape.REPLACE_DOUBLE_DOT_WILDCARD),
    (lambda p: p.startswith("*."), PatternShape.REPLACE_WILDCARD_WITH_DOT_SUFFIX),
    (lambda p: p.startswith("*"), PatternShape.REPLACE_WILDCARD_AT_START),
    (lambda p: p.endswith(".*"), PatternShape.REPLACE_DOT_WILDCARD_SUFFIX),
    (lambda p: p.endswith("*"), PatternShape.REPLACE_WILDCARD_AT_END),
]


def _first_edge_shape(text: str, edge_shapes: list[tuple[EdgeTest, PatternShape]]) -> PatternShape:
    for test, shape in edge_shapes:
        if test(text):
            return shape
    return PatternShape.AMBIGUOUS


class PatternClassifier:
    """Determines which substitution rule applies to a search/replace pattern pair.

    Classification depends only on the two pattern strings, so a pair is
    classified once per batch and the result shared by every file.
    """

    def classify(self, search_pattern: str, replace_pattern: str) -> PatternShape:
        """Classify a pattern pair.

        Args:
            search_pattern: Pattern the source filenames matched.
            replace_pattern: Pattern describing the destination filenames.

        Returns:
            The PatternShape for the pair. Unresolvable combinations yield
            PatternShape.AMBIGUOUS rather than raising.

        Raises:
            EmptyPatternError: If either pattern is empty.
        """
        search = Pattern.parse(search_pattern, role="search pattern")
        replace = Pattern.parse(replace_pattern, role="replace pattern")
        return self.classify_patterns(search, replace)

    def classify_patterns(self, search: Pattern, replace: Pattern) -> PatternShape:
        """Classify already-parsed patterns."""
        if search.wildcard_count == 1 and replace.wildcard_count == 1:
            return PatternShape.BOTH_SINGLE_WILDCARD

        if search.wildcard_count == 0 and replace.wildcard_count == 0:
            return PatternShape.NO_WILDCARD_EITHER

        if search.has_wildcard:
            return _first_edge_shape(search.raw, _SEARCH_EDGE_SHAPES)

        # Only the replace side has a wildcard from here on.
        return _first_edge_shape(replace.raw, _REPLACE_EDGE_SHAPES)


def classify(search_pattern: str, replace_pattern: str) -> PatternShape:
    """Classify a pattern pair with a default PatternClassifier."""
    return PatternClassifier().classify(search_pattern, replace_pattern)
