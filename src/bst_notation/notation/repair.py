"""IndentationRepairer: best-effort normalizer for hand-edited notation.

Fixes the common manual-editing mistakes before parsing:
- tabs used instead of spaces in the indentation,
- trailing whitespace,
- indentation written in a different (but consistent) unit, e.g. 4 spaces.

Processing pipeline (applied per line, in order):
1. Expand leading tabs to ``tab_width`` columns and strip trailing whitespace.
2. Detect the step: the smallest nonzero indentation in the text.
3. Level = indentation / step, rounded half up.
4. Clamp the level to ``[0, previous + 1]``, where ``previous`` is the level
   of the nearest preceding ``value:``/``left:``/``right:`` line.  The first
   non-blank line is forced to level 0.
5. Re-indent with ``level * indent_unit`` spaces.

The output is advisory.  It is not guaranteed to parse and must always be
fed back through the parser.
"""

from __future__ import annotations

import logging

from bst_notation.notation.config import NotationConfig
from bst_notation.notation.parser import classify_line

__all__ = ["IndentationRepairer", "repair_indentation"]

logger = logging.getLogger(__name__)


class IndentationRepairer:
    """Re-indents notation text onto the configured indent unit.

    Never raises for any input string.

    Example::

        repairer = IndentationRepairer()
        repairer.repair("value: 1\\nleft:\\n    value: 0\\n")
        # "value: 1\\nleft:\\n  value: 0\\n"
    """

    def __init__(self, config: NotationConfig | None = None) -> None:
        self._config: NotationConfig = (
            config if config is not None else NotationConfig()
        )

    @property
    def config(self) -> NotationConfig:
        return self._config

    def repair(self, text: str) -> str:
        """Return a re-indented copy of *text*.

        Blank lines are kept (as empty lines) so line numbers in a later
        parse error still point at the user's original line.
        """
        lines = [self._expand_tabs(raw).rstrip() for raw in text.splitlines()]
        indents = [_indent_of(line) for line in lines if line]
        step = min((i for i in indents if i > 0), default=0)
        logger.debug("Detected indentation step of %d column(s)", step)

        unit = " " * self._config.indent_unit
        repaired: list[str] = []
        previous: int | None = None
        for line in lines:
            if not line:
                repaired.append("")
                continue
            content = line.lstrip(" ")
            if previous is None:
                level = 0
            else:
                level = _round_half_up(_indent_of(line), step) if step else 0
                level = min(level, previous + 1)
            if classify_line(content)[0] is not None:
                previous = level
            elif previous is None:
                # Unrecognized first line: keep the document anchored at 0.
                previous = 0
            repaired.append(unit * level + content)

        result = "\n".join(repaired)
        if text.endswith(("\n", "\r")) and repaired:
            result += "\n"
        return result

    def _expand_tabs(self, line: str) -> str:
        content = line.lstrip(" \t")
        leading = line[: len(line) - len(content)]
        return leading.expandtabs(self._config.tab_width) + content


def _indent_of(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def _round_half_up(indent: int, step: int) -> int:
    return (2 * indent + step) // (2 * step)


def repair_indentation(text: str, config: NotationConfig | None = None) -> str:
    """Re-indent notation *text*; see ``IndentationRepairer.repair``."""
    return IndentationRepairer(config).repair(text)
