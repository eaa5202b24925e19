"""Game state: scenes, player, mobs, boss and the world around them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Scene(IntEnum):
    """Screens the game loop can show."""

    MENU = 0
    SETTINGS = 1
    GAME = 3
    MOB_ONE = 4
    MOB_TWO = 5
    MOB_THREE = 6
    MOB_FOUR = 7
    WIN = 8
    LOSE = 9
    BOSS = 10
    LOSE_END = 11
    WIN_END = 12
    HOW_TO = 13


@dataclass
class SpriteRect:
    """Integer texture rectangle selecting an animation frame."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0


WALK_FRAME_WIDTH = 43
WALK_FRAME_HEIGHT = 73


@dataclass
class Player:
    """The player's statistics."""

    xp: int = 0
    chance: int = 0
    tp: int = 200
    hp: int = 100
    armor: int = 100
    dmg: int = 100
    name: str = "Unknow"
    upgrades: list[int] = field(default_factory=lambda: [0, 0, 0])


@dataclass
class Mob:
    """The currently selected opponent."""

    name: str = "Unknow"
    xp: int = 0
    tp: int = 0
    hp: int = 0
    armor: int = 0
    dmg: int = 0


@dataclass
class Boss:
    """The final boss fight."""

    hp: int = 5000
    dmg: int = 150
    heal: int = 300
    frame: SpriteRect = field(
        default_factory=lambda: SpriteRect(0, 0, 872, 632)
    )
    walk: SpriteRect = field(
        default_factory=lambda: SpriteRect(0, 0, WALK_FRAME_WIDTH, WALK_FRAME_HEIGHT)
    )
    topmap: SpriteRect = field(
        default_factory=lambda: SpriteRect(960, 0, 1920, 1080)
    )
    player_texture: str = "files/sans_right.png"


@dataclass
class GameState:
    """Everything the game loop reads and changes."""

    volume: int = 0
    scene: Scene = Scene.MENU
    prev: Scene = Scene.MENU
    tele: int = 0
    active: bool = False
    finish: bool = False
    view_angle: int = 0
    droids: int = 0
    ozefs: int = 0
    apples: int = 0
    golems: int = 0
    player_pos: tuple[float, float] = (100.0, 650.0)
    player_scale: tuple[float, float] = (2.0, 2.0)
    left_frame: SpriteRect = field(
        default_factory=lambda: SpriteRect(0, 0, WALK_FRAME_WIDTH, WALK_FRAME_HEIGHT)
    )
    right_frame: SpriteRect = field(
        default_factory=lambda: SpriteRect(0, 0, WALK_FRAME_WIDTH, WALK_FRAME_HEIGHT)
    )
    player_texture: str | None = None
    player: Player = field(default_factory=lambda: new_player())
    mob: Mob = field(default_factory=Mob)
    boss: Boss = field(default_factory=lambda: new_boss())


def new_player() -> Player:
    """A player with starting statistics."""
    return Player()


def new_boss() -> Boss:
    """A boss at full strength."""
    return Boss()


def new_game(volume: int) -> GameState:
    """A fresh game starting on the menu with the given volume."""
    return GameState(volume=volume)