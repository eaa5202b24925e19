"""Fixed screen layout of the menus, the settings page and the game."""

from __future__ import annotations

from dataclasses import dataclass, field

from sansrpg.geometry import Rect

WINDOW_SIZE = (1920, 1080)
WINDOW_TITLE = "My_rpg"
FONT_PATH = "fonts/rev.otf"
FONT_SIZE = 70

HOVER_SHIFT = 5

ALPHA_BUTTON = Rect(800, 600, 300, 127)

_BAR_WIDTH = 68

# (level, left, top, height, colour) of every bar on the volume gauge.
_VOLUME_BARS = (
    (10, 903, 610, 20, (0, 128, 0)),
    (20, 971, 590, 40, (50, 205, 50)),
    (30, 1039, 570, 60, (173, 255, 47)),
    (40, 1107, 550, 80, (230, 255, 10)),
    (50, 1175, 530, 100, (255, 255, 0)),
    (60, 1243, 510, 120, (255, 215, 0)),
    (70, 1311, 490, 140, (255, 200, 0)),
    (80, 1379, 470, 160, (255, 165, 0)),
    (90, 1447, 450, 180, (255, 140, 0)),
    (100, 1515, 430, 200, (255, 0, 0)),
)


@dataclass(frozen=True)
class VolumeBar:
    """One clickable step of the volume gauge."""

    level: int
    rect: Rect
    color: tuple[int, int, int]


def volume_bars() -> list[VolumeBar]:
    """The ten gauge bars, from the quietest to the loudest."""
    return [
        VolumeBar(level, Rect(x, y, _BAR_WIDTH, height), color)
        for level, x, y, height, color in _VOLUME_BARS
    ]


def volume_for_click(point: tuple[int, int]) -> int | None:
    """Volume chosen by a click on the gauge, or None when no bar is hit.

    Where two bars share an edge the louder one wins.
    """
    chosen = None
    for bar in volume_bars():
        if bar.rect.contains(point):
            chosen = bar.level
    return chosen


def _button(x: float, y: float, width: float, height: float) -> Rect:
    return Rect(x, y, width, height)


@dataclass
class MenuButtons:
    """Buttons of the main menu and the settings page."""

    play: Rect = field(default_factory=lambda: _button(170, 220, 210, 50))
    howto: Rect = field(default_factory=lambda: _button(170, 420, 310, 50))
    settings: Rect = field(default_factory=lambda: _button(170, 620, 410, 50))
    quit: Rect = field(default_factory=lambda: _button(170, 820, 183, 50))
    prev: Rect = field(default_factory=lambda: _button(1820, 0, 100, 73))
    exit: Rect = field(default_factory=lambda: _button(1620, 953, 300, 127))
    home: Rect = field(default_factory=lambda: _button(0, 0, 298, 133))
    _rest_y: dict[str, float] = field(
        default_factory=lambda: {"play": 220, "howto": 420, "settings": 620, "quit": 820},
        repr=False,
    )

    def hover(self, point: tuple[int, int]) -> None:
        """Lower the main menu buttons under the mouse, raise the others."""
        for name, rest_y in self._rest_y.items():
            rect: Rect = getattr(self, name)
            rect.y = rest_y + HOVER_SHIFT if rect.contains(point) else rest_y