"""Screen rectangles and hit testing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rect:
    """An axis-aligned rectangle in window pixels."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, point: tuple[int, int]) -> bool:
        """Whether a mouse position lies inside, edges included.

        The far edges are truncated to whole pixels.
        """
        px, py = point
        max_x = int(self.x + self.width)
        max_y = int(self.y + self.height)
        return self.x <= px <= max_x and self.y <= py <= max_y