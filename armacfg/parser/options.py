"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum

DEFAULT_MAX_NESTING_DEPTH = 128


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling grammar tolerance and resource limits.

    `max_nesting_depth` bounds nested class bodies plus arrays; each level
    costs a few interpreter frames, so keep it well under the recursion limit.
    """

    mode: ParseMode = ParseMode.STRICT
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH
    allow_empty_class_body: bool = False
    allow_trailing_comma: bool = False
    allow_empty_statements: bool = False

    def __post_init__(self) -> None:
        if self.max_nesting_depth < 1:
            raise ValueError("max_nesting_depth must be >= 1")

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.PERMISSIVE:
            return ParserOptions(
                mode=mode,
                allow_empty_class_body=True,
                allow_trailing_comma=True,
                allow_empty_statements=True,
            )

        return ParserOptions(mode=mode)
