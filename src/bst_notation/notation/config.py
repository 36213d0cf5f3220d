"""NotationConfig: layout parameters of the indentation notation.

NotationConfig is a frozen (immutable) dataclass shared by the serializer,
the parser and the indentation repairer.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NotationConfig:
    """Immutable configuration for the notation codec.

    Attributes:
        indent_unit: Spaces per nesting level (>= 1).  Child blocks sit one
            unit deeper than their ``left:``/``right:`` introducer.
            Default 2.
        tab_width: Columns a leading tab expands to during indentation
            repair (>= 1).  The parser itself never accepts tabs.  Default 4.
    """

    indent_unit: int = 2
    tab_width: int = 4

    def __post_init__(self) -> None:
        if self.indent_unit < 1:
            msg = f"indent_unit must be >= 1, got {self.indent_unit}"
            raise ValueError(msg)
        if self.tab_width < 1:
            msg = f"tab_width must be >= 1, got {self.tab_width}"
            raise ValueError(msg)
