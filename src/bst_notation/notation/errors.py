"""ParseError value and ParseErrorCategory StrEnum.

Parse failures are reported as data: the parser returns a ``ParseError``
inside a ``ParseResult`` instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["ParseError", "ParseErrorCategory"]


class ParseErrorCategory(StrEnum):
    """Kinds of notation parse failure.

    - BAD_INDENTATION   : indent is not a multiple of the unit, or uses tabs
    - DUPLICATE_KEY     : a key repeated inside one node block
    - INVALID_INTEGER   : a ``value:`` payload that is not an integer
    - EMPTY_BLOCK       : a child block (or the document) without ``value:``
    - UNEXPECTED_INDENT : a line deeper than any open block allows
    - UNRECOGNIZED_LINE : a line that is none of ``value:``, ``left:``, ``right:``
    """

    BAD_INDENTATION = auto()
    DUPLICATE_KEY = auto()
    INVALID_INTEGER = auto()
    EMPTY_BLOCK = auto()
    UNEXPECTED_INDENT = auto()
    UNRECOGNIZED_LINE = auto()


_DESCRIPTIONS: dict[ParseErrorCategory, str] = {
    ParseErrorCategory.BAD_INDENTATION: "bad indentation",
    ParseErrorCategory.DUPLICATE_KEY: "duplicated mapping key",
    ParseErrorCategory.INVALID_INTEGER: "invalid integer",
    ParseErrorCategory.EMPTY_BLOCK: "empty child block",
    ParseErrorCategory.UNEXPECTED_INDENT: "unexpected indentation",
    ParseErrorCategory.UNRECOGNIZED_LINE: "unrecognized line",
}


@dataclass(frozen=True, slots=True)
class ParseError:
    """A notation parse failure.

    Attributes:
        line:     1-based number of the offending line.
        message:  Human-readable description, e.g.
                  ``"duplicated mapping key at line 4: 'left:'"``.
        category: Machine-readable failure kind.
        text:     Raw text of the offending line (empty at end of input).
    """

    line: int
    message: str
    category: ParseErrorCategory
    text: str = ""

    @classmethod
    def at(
        cls, category: ParseErrorCategory, line: int, text: str, detail: str = ""
    ) -> ParseError:
        """Build an error whose message names the category, line and raw text."""
        message = f"{_DESCRIPTIONS[category]} at line {line}: {text.strip()!r}"
        if detail:
            message = f"{message} ({detail})"
        return cls(line=line, message=message, category=category, text=text)

    def __str__(self) -> str:
        return self.message
