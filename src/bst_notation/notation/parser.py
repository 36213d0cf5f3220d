"""NotationParser: indentation-driven parser from notation text to a tree.

Grammar (one entry per non-blank line)::

    value: <int>     sets the value of the current node block
    left:            opens the left child block, one indent unit deeper
    right:           opens the right child block, one indent unit deeper

The parser is a loop over lines with an explicit stack of open blocks
(``_Frame``), one per nesting level.  A shallower line pops frames until its
depth is reached; popping a frame builds its TreeNode and hangs it on the
parent.  Errors are raised internally as ``_SyntaxFault`` and converted to a
``ParseResult`` at the entry point, so callers never see an exception for
malformed text.  A line-level error waits until its line has closed the
blocks it ends, so the error reported is always the one on the earliest
line.
"""

from __future__ import annotations

import itertools
import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum, auto

from bst_notation.notation.config import NotationConfig
from bst_notation.notation.errors import ParseError, ParseErrorCategory
from bst_notation.result import ParseResult
from bst_notation.tree.identity import new_id
from bst_notation.tree.nodes import Tree, TreeNode

__all__ = ["LineKind", "NotationParser", "classify_line", "notation_to_tree"]

logger = logging.getLogger(__name__)

_KEY_LINE = re.compile(r"(value|left|right):[ \t]*(.*)")
_INTEGER = re.compile(r"[+-]?[0-9]+")


class LineKind(StrEnum):
    """The three recognized line forms."""

    VALUE = auto()
    LEFT = auto()
    RIGHT = auto()


def classify_line(content: str) -> tuple[LineKind | None, str]:
    """Split an unindented, right-stripped line into its kind and payload.

    Returns:
        ``(kind, payload)`` where payload is the stripped text after the
        colon, or ``(None, content)`` when the line is not a known form.
    """
    match = _KEY_LINE.fullmatch(content)
    if match is None:
        return None, content
    return LineKind(match.group(1)), match.group(2).strip()


@dataclass(frozen=True, slots=True)
class _Line:
    number: int
    depth: int
    kind: LineKind
    value: int | None
    text: str


@dataclass(frozen=True, slots=True)
class _BadLine:
    """A line with a usable depth whose content failed to classify.

    Its error is raised only after the blocks this line closes are built, so
    an empty block opened on an earlier line is reported first.
    """

    number: int
    depth: int
    text: str
    error: ParseError


@dataclass(slots=True)
class _Frame:
    """An open node block: the fields collected so far for one node."""

    depth: int
    line: int
    text: str
    side: str = ""
    node_id: str = field(default_factory=new_id)
    value: int | None = None
    left: TreeNode | None = None
    right: TreeNode | None = None
    keys: set[LineKind] = field(default_factory=set)


class _SyntaxFault(Exception):
    def __init__(self, error: ParseError) -> None:
        super().__init__(error.message)
        self.error = error


def _fault(
    category: ParseErrorCategory, line: int, text: str, detail: str = ""
) -> _SyntaxFault:
    return _SyntaxFault(ParseError.at(category, line, text, detail))


class NotationParser:
    """Parses notation text into a freshly built tree.

    Every successful parse allocates new ids for all nodes; ids from any
    earlier tree are never reused.

    Example::

        parser = NotationParser()
        result = parser.parse("value: 10\\nleft:\\n  value: 5\\n")
        result.tree.left.value   # 5
    """

    def __init__(self, config: NotationConfig | None = None) -> None:
        self._config: NotationConfig = (
            config if config is not None else NotationConfig()
        )

    @property
    def config(self) -> NotationConfig:
        return self._config

    def parse(self, text: str) -> ParseResult:
        """Parse *text* and return the tree or the first error found.

        Empty or whitespace-only text is a success with an absent tree.
        """
        try:
            tree = self._parse(text)
        except _SyntaxFault as exc:
            logger.debug("Notation parse failed: %s", exc.error.message)
            return ParseResult(error=exc.error)
        return ParseResult(tree=tree)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def _parse(self, text: str) -> Tree:
        lines = self._scan(text)
        first = next(lines, None)
        if first is None:
            return None
        if first.depth != 0:
            raise _fault(
                ParseErrorCategory.UNEXPECTED_INDENT, first.number, first.text
            )

        stack = [_Frame(depth=0, line=first.number, text=first.text)]
        pending: _Line | None = None  # introducer still waiting for its block

        for entry in itertools.chain([first], lines):
            top = stack[-1]
            if pending is not None:
                if entry.depth == top.depth + 1:
                    stack.append(
                        _Frame(
                            depth=entry.depth,
                            line=pending.number,
                            text=pending.text,
                            side=str(pending.kind),
                        )
                    )
                    pending = None
                elif entry.depth > top.depth + 1:
                    raise _fault(
                        ParseErrorCategory.UNEXPECTED_INDENT, entry.number, entry.text
                    )
                else:
                    raise _fault(
                        ParseErrorCategory.EMPTY_BLOCK, pending.number, pending.text
                    )
            elif entry.depth > top.depth:
                raise _fault(
                    ParseErrorCategory.UNEXPECTED_INDENT, entry.number, entry.text
                )
            else:
                while entry.depth < stack[-1].depth:
                    self._close(stack)

            if isinstance(entry, _BadLine):
                raise _SyntaxFault(entry.error)
            frame = stack[-1]
            if entry.kind in frame.keys:
                raise _fault(
                    ParseErrorCategory.DUPLICATE_KEY, entry.number, entry.text
                )
            frame.keys.add(entry.kind)
            if entry.kind is LineKind.VALUE:
                frame.value = entry.value
            else:
                pending = entry

        if pending is not None:
            raise _fault(ParseErrorCategory.EMPTY_BLOCK, pending.number, pending.text)
        while len(stack) > 1:
            self._close(stack)
        return self._build(stack[0])

    def _close(self, stack: list[_Frame]) -> None:
        frame = stack.pop()
        setattr(stack[-1], frame.side, self._build(frame))

    @staticmethod
    def _build(frame: _Frame) -> TreeNode:
        if frame.value is None:
            raise _fault(
                ParseErrorCategory.EMPTY_BLOCK,
                frame.line,
                frame.text,
                "block has no 'value:' line",
            )
        return TreeNode(
            value=frame.value, id=frame.node_id, left=frame.left, right=frame.right
        )

    # ------------------------------------------------------------------
    # Lines
    # ------------------------------------------------------------------

    def _scan(self, text: str) -> Iterator[_Line | _BadLine]:
        """Yield classified non-blank lines.

        Bad indentation raises at once: the line has no depth to place it.
        Any other line-level error is yielded as a ``_BadLine``.
        """
        unit = self._config.indent_unit
        for number, raw in enumerate(text.splitlines(), start=1):
            line = raw.rstrip()
            if not line:
                continue
            content = line.lstrip(" ")
            indent = len(line) - len(content)
            if content[0].isspace():
                raise _fault(
                    ParseErrorCategory.BAD_INDENTATION,
                    number,
                    raw,
                    "tabs are not allowed in indentation",
                )
            if indent % unit:
                raise _fault(
                    ParseErrorCategory.BAD_INDENTATION,
                    number,
                    raw,
                    f"{indent} spaces is not a multiple of {unit}",
                )

            yield _classify(number, indent // unit, content, raw)


def _classify(number: int, depth: int, content: str, raw: str) -> _Line | _BadLine:
    kind, payload = classify_line(content)
    if kind is None:
        error = ParseError.at(ParseErrorCategory.UNRECOGNIZED_LINE, number, raw)
        return _BadLine(number=number, depth=depth, text=raw, error=error)
    value: int | None = None
    if kind is LineKind.VALUE:
        if not _INTEGER.fullmatch(payload):
            error = ParseError.at(ParseErrorCategory.INVALID_INTEGER, number, raw)
            return _BadLine(number=number, depth=depth, text=raw, error=error)
        value = int(payload)
    elif payload:
        error = ParseError.at(
            ParseErrorCategory.UNRECOGNIZED_LINE,
            number,
            raw,
            f"'{kind}:' takes no inline value",
        )
        return _BadLine(number=number, depth=depth, text=raw, error=error)
    return _Line(number=number, depth=depth, kind=kind, value=value, text=raw)


def notation_to_tree(text: str, config: NotationConfig | None = None) -> ParseResult:
    """Parse notation *text* into a tree; see ``NotationParser.parse``."""
    return NotationParser(config).parse(text)
