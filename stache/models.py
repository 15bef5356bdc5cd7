"""Data models for the mustache renderer."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

DEFAULT_OPEN = "{{"
DEFAULT_CLOSE = "}}"
DEFAULT_MAX_DEPTH = 128


@dataclass(frozen=True)
class RenderOptions:
    """Delimiters and limits for one render call."""

    delim_open: str = DEFAULT_OPEN
    delim_close: str = DEFAULT_CLOSE
    max_depth: int = DEFAULT_MAX_DEPTH  # nested sections allowed below the root

    def __post_init__(self):
        if not self.delim_open or not self.delim_close:
            raise ValueError(
                f"Delimiters must be non-empty, got "
                f"{self.delim_open!r} / {self.delim_close!r}"
            )
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")

    @property
    def is_default_delimiters(self) -> bool:
        return self.delim_open == DEFAULT_OPEN and self.delim_close == DEFAULT_CLOSE


class TagType(enum.Enum):
    VARIABLE = "variable"
    ESCAPED = "escaped"  # {{&name}}, inserted without HTML escaping
    SECTION = "section"
    INVERTED_SECTION = "inverted_section"
    END_SECTION = "end_section"
    COMMENT = "comment"
    INVALID = "invalid"


# First symbol found inside a tag decides its type.
TAG_SYMBOLS: dict[str, TagType] = {
    "&": TagType.ESCAPED,
    "#": TagType.SECTION,
    "^": TagType.INVERTED_SECTION,
    "/": TagType.END_SECTION,
    "!": TagType.COMMENT,
}


@dataclass(frozen=True)
class Tag:
    """A located tag: [start, end) covers the delimiters too."""

    start: int
    end: int
    text: str
    type: TagType = TagType.VARIABLE
    name: str = ""
    raw_name: str = ""  # name as spelled, whitespace kept


@dataclass
class RenderResult:
    """Outcome of a render call that does not raise."""

    output: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
