"""Token: the minimal text unit fed into style reconciliation."""

from dataclasses import dataclass
from typing import FrozenSet, Optional

# Labels active for one token; unordered, duplicate-free
StyleSet = FrozenSet[str]


@dataclass(frozen=True)
class Token:
    """
    One character (or minimal text unit) with its font.

    Only the first token of a run needs the positional fields; they feed the
    run's line-origin annotation.

    Attributes:
        text: Unicode text to emit
        font_name: Font descriptor name (e.g., "ABCDEE+Arial-BoldItalic")
        x: Horizontal position in points
        y: Vertical position in points
        font_size: Font size in points
    """

    text: str
    font_name: str = ""
    x: Optional[float] = None
    y: Optional[float] = None
    font_size: Optional[float] = None

    @property
    def has_position(self) -> bool:
        return self.x is not None and self.y is not None and self.font_size is not None
