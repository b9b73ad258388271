"""Wildcard pattern data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from wildrename.errors import EmptyPatternError


WILDCARD = "*"


class PatternShape(Enum):
    """Structural classification of a (search, replace) pattern pair.

    Members are listed in the precedence order used by the classifier.
    """

    NO_WILDCARD_EITHER = "no-wildcard-either"
    BOTH_SINGLE_WILDCARD = "both-single-wildcard"
    SEARCH_DOUBLE_DOT_WILDCARD = "search-double-dot-wildcard"
    SEARCH_WILDCARD_WITH_DOT_SUFFIX = "search-wildcard-with-dot-suffix"
    SEARCH_WILDCARD_AT_START = "search-wildcard-at-start"
    SEARCH_DOT_WILDCARD_SUFFIX = "search-dot-wildcard-suffix"
    SEARCH_WILDCARD_AT_END = "search-wildcard-at-end"
    REPLACE_DOUBLE_DOT_WILDCARD = "replace-double-dot-wildcard"
    REPLACE_WILDCARD_WITH_DOT_SUFFIX = "replace-wildcard-with-dot-suffix"
    REPLACE_WILDCARD_AT_START = "replace-wildcard-at-start"
    REPLACE_DOT_WILDCARD_SUFFIX = "replace-dot-wildcard-suffix"
    REPLACE_WILDCARD_AT_END = "replace-wildcard-at-end"
    AMBIGUOUS = "ambiguous"

    @property
    def is_replace_side(self) -> bool:
        """True for shapes where only the replace pattern carries a wildcard."""
        return self.name.startswith("REPLACE_")

    def __str__(self) -> str:
        return self.value


class Pattern(BaseModel):
    """An immutable search or replace pattern with zero or more `*` tokens."""

    model_config = ConfigDict(frozen=True)

    raw: str = Field(description="Original pattern text", min_length=1)

    @classmethod
    def parse(cls, raw: str, role: str = "pattern") -> "Pattern":
        """Build a Pattern, raising EmptyPatternError for empty text.

        Args:
            raw: Pattern text as given by the user.
            role: Name used in the error message (e.g. "search pattern").
        """
        if not raw:
            raise EmptyPatternError(role)
        return cls(raw=raw)

    @property
    def wildcard_count(self) -> int:
        return self.raw.count(WILDCARD)

    @property
    def has_wildcard(self) -> bool:
        return WILDCARD in self.raw

    @property
    def prefix(self) -> str:
        """Text before the first wildcard, or empty if there is none."""
        if not self.has_wildcard:
            return ""
        return self.raw.split(WILDCARD, 1)[0]

    @property
    def suffix(self) -> str:
        """Text after the first wildcard, or empty if there is none."""
        if not self.has_wildcard:
            return ""
        return self.raw.split(WILDCARD, 1)[1]

    @property
    def components(self) -> list[str]:
        """Pattern text split on every wildcard."""
        return self.raw.split(WILDCARD)

    @property
    def literal(self) -> str:
        """Pattern text with every wildcard removed."""
        return self.raw.replace(WILDCARD, "")

    def __str__(self) -> str:
        return self.raw
