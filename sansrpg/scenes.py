"""Input handling for every screen of the game, one frame at a time."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

from sansrpg.combat import MobKind, boss_click, fight_won, handle_mob_click
from sansrpg.layout import ALPHA_BUTTON, MenuButtons, volume_for_click
from sansrpg.state import Boss, GameState, Scene
from sansrpg.world import (
    boss_move_left,
    boss_move_right,
    interact,
    move_left,
    move_right,
    portal_click,
    refresh_quest,
    shop_click,
    spin_view,
)

KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_ESCAPE = "escape"
KEY_SPACE = "space"
KEY_C = "c"
KEY_D = "d"
KEY_E = "e"
KEY_K = "k"
KEY_Q = "q"
KEY_T = "t"

PORTAL_MAP = 1
INVENTORY = 6

BOSS_FRAME_WIDTH = 872
BOSS_FRAME_HEIGHT = 632
BOSS_SHEET_WIDTH = 4360
BOSS_SHEET_HEIGHT = 2528


class RandomSource(Protocol):
    """The part of ``random.Random`` the scenes rely on."""

    def randrange(self, stop: int) -> int: ...


class EventKind(Enum):
    """Kinds of window events the game reacts to."""

    CLOSED = auto()
    MOUSE_RELEASED = auto()
    TEXT_ENTERED = auto()
    KEY_PRESSED = auto()
    OTHER = auto()


@dataclass(frozen=True)
class InputEvent:
    """One polled window event with the keyboard and mouse state at that time."""

    kind: EventKind
    position: tuple[int, int] = (0, 0)
    keys: frozenset[str] = field(default_factory=frozenset)
    text: str = ""

    def pressed(self, key: str) -> bool:
        """Whether ``key`` is held down."""
        return key in self.keys


@dataclass
class Outcome:
    """What the frame asks of the window, sound and view."""

    close: bool = False
    start_game_music: bool = False
    echo: bytes = b""
    panel: tuple[str, tuple[int, int]] | None = None
    view_angle: int | None = None


def _merge(first: Outcome, second: Outcome) -> Outcome:
    return Outcome(
        close=first.close or second.close,
        start_game_music=first.start_game_music or second.start_game_music,
        echo=first.echo + second.echo,
        panel=second.panel if second.panel is not None else first.panel,
        view_angle=(
            second.view_angle if second.view_angle is not None else first.view_angle
        ),
    )


def _pause(state: GameState, origin: Scene) -> None:
    state.prev = origin
    state.scene = Scene.SETTINGS


def handle_menu(
    state: GameState, buttons: MenuButtons, event: InputEvent | None
) -> Outcome:
    """Main menu: hover effects, the four buttons and typed text echo."""
    outcome = Outcome()
    if event is None:
        return outcome
    if event.kind is EventKind.CLOSED:
        outcome.close = True
    point = event.position
    buttons.hover(point)
    if event.kind is EventKind.MOUSE_RELEASED:
        if buttons.play.contains(point):
            outcome.start_game_music = True
            state.prev = Scene.MENU
            state.scene = Scene.GAME
        if buttons.quit.contains(point):
            outcome.close = True
        if buttons.howto.contains(point):
            state.scene = Scene.HOW_TO
            state.prev = Scene.MENU
        if buttons.settings.contains(point):
            state.prev = Scene.MENU
            state.scene = Scene.SETTINGS
    if event.kind is EventKind.TEXT_ENTERED and event.text:
        outcome.echo = bytes([ord(event.text[0]) & 0xFF])
    return outcome


def handle_settings(
    state: GameState, buttons: MenuButtons, event: InputEvent | None
) -> Outcome:
    """Settings page: volume gauge, back, home and exit buttons."""
    outcome = Outcome()
    if event is None:
        return outcome
    if event.kind is EventKind.CLOSED:
        outcome.close = True
    if event.kind is EventKind.MOUSE_RELEASED:
        point = event.position
        level = volume_for_click(point)
        if level is not None:
            state.volume = level
        if buttons.prev.contains(point):
            state.scene, state.prev = state.prev, state.scene
        if buttons.exit.contains(point):
            outcome.close = True
        if buttons.home.contains(point):
            state.scene = Scene.MENU
    return outcome


def _cheat(state: GameState) -> None:
    state.droids = 20
    state.ozefs = 15
    state.apples = 10
    state.golems = 5
    state.player.xp = 10000


def handle_game(
    state: GameState, event: InputEvent | None, rng: RandomSource
) -> Outcome:
    """The world map: movement, NPCs, portals, then quest and view updates."""
    outcome = Outcome()
    if event is not None:
        if event.kind is EventKind.CLOSED:
            outcome.close = True
        if event.pressed(KEY_ESCAPE):
            _pause(state, Scene.GAME)
        if event.kind is EventKind.MOUSE_RELEASED:
            if state.tele == PORTAL_MAP:
                portal_click(state, event.position)
            shop_click(state, event.position)
        if event.pressed(KEY_D):
            state.active = True
        if event.pressed(KEY_SPACE):
            state.active = False
        if state.tele == 0 and event.pressed(KEY_C):
            state.tele = INVENTORY
        if state.tele == 0 and event.pressed(KEY_E):
            outcome.panel = interact(state)
        if state.tele == 0 and event.pressed(KEY_T):
            state.tele = PORTAL_MAP
        if state.tele == 0:
            if event.pressed(KEY_LEFT):
                move_left(state)
            if event.pressed(KEY_RIGHT):
                move_right(state)
        if event.pressed(KEY_K):
            _cheat(state)
    refresh_quest(state)
    outcome.view_angle = spin_view(state, rng) if state.active else 0
    return outcome


def handle_mob(
    state: GameState, kind: MobKind, event: InputEvent | None, rng: RandomSource
) -> Outcome:
    """A mob's fight screen: browse opponents or start the fight."""
    outcome = Outcome()
    if event is None:
        return outcome
    if event.kind is EventKind.CLOSED:
        outcome.close = True
    if event.pressed(KEY_ESCAPE):
        _pause(state, kind.scene)
    if kind is MobKind.DROID and event.pressed(KEY_SPACE):
        fight_won(state.player, rng)
    if event.kind is EventKind.MOUSE_RELEASED:
        handle_mob_click(state, kind, event.position, rng)
    return outcome


def handle_boss(
    state: GameState, event: InputEvent | None, rng: RandomSource
) -> Outcome:
    """The boss arena: scrolling, pausing and the attack and heal buttons."""
    outcome = Outcome()
    if event is None:
        return outcome
    if event.pressed(KEY_LEFT):
        boss_move_left(state.boss)
    if event.pressed(KEY_RIGHT):
        boss_move_right(state.boss)
    if event.pressed(KEY_ESCAPE):
        _pause(state, Scene.BOSS)
    if event.kind is EventKind.MOUSE_RELEASED:
        boss_click(state, event.position, rng)
    return outcome


def handle_result(state: GameState, event: InputEvent | None) -> Outcome:
    """Win or lose screen after a mob fight: back to the world map."""
    outcome = Outcome()
    if event is None:
        return outcome
    if event.kind is EventKind.CLOSED:
        outcome.close = True
    if event.kind is EventKind.MOUSE_RELEASED and ALPHA_BUTTON.contains(
        event.position
    ):
        state.scene = Scene.GAME
        state.tele = 0
    return outcome


def handle_end(state: GameState, event: InputEvent | None) -> Outcome:
    """Final win or lose screen: Q closes the game."""
    return Outcome(close=event is not None and event.pressed(KEY_Q))


def handle_howto(state: GameState, event: InputEvent | None) -> Outcome:
    """How-to page: escape leads to the settings page."""
    outcome = Outcome()
    if event is None:
        return outcome
    if event.pressed(KEY_ESCAPE):
        state.scene = Scene.SETTINGS
        state.prev = Scene.HOW_TO
    if event.kind is EventKind.CLOSED:
        outcome.close = True
    return outcome


def advance_boss_animation(boss: Boss) -> None:
    """Move the boss sprite to its next frame on the sprite sheet."""
    frame = boss.frame
    frame.left += BOSS_FRAME_WIDTH
    if frame.left >= BOSS_SHEET_WIDTH:
        frame.left = 0
        frame.top += BOSS_FRAME_HEIGHT
    if frame.top >= BOSS_SHEET_HEIGHT:
        frame.top = 0


_SCENE_ORDER = (
    Scene.MENU,
    Scene.SETTINGS,
    Scene.GAME,
    Scene.MOB_ONE,
    Scene.MOB_TWO,
    Scene.MOB_THREE,
    Scene.MOB_FOUR,
    Scene.WIN,
    Scene.LOSE,
    Scene.BOSS,
    Scene.LOSE_END,
    Scene.WIN_END,
    Scene.HOW_TO,
)


def _run_scene(
    scene: Scene,
    state: GameState,
    buttons: MenuButtons,
    event: InputEvent | None,
    rng: RandomSource,
) -> Outcome:
    if scene is Scene.MENU:
        return handle_menu(state, buttons, event)
    if scene is Scene.SETTINGS:
        return handle_settings(state, buttons, event)
    if scene is Scene.GAME:
        return handle_game(state, event, rng)
    if scene in (Scene.MOB_ONE, Scene.MOB_TWO, Scene.MOB_THREE, Scene.MOB_FOUR):
        return handle_mob(state, MobKind.from_scene(scene), event, rng)
    if scene in (Scene.WIN, Scene.LOSE):
        return handle_result(state, event)
    if scene is Scene.BOSS:
        return handle_boss(state, event, rng)
    if scene in (Scene.LOSE_END, Scene.WIN_END):
        return handle_end(state, event)
    return handle_howto(state, event)


def dispatch(
    state: GameState,
    buttons: MenuButtons,
    event: InputEvent | None,
    rng: RandomSource,
) -> Outcome:
    """Run one frame of input handling.

    Screens are visited in a fixed order; a screen switched to during the
    frame is handled in the same frame when it comes later in that order.
    Only the first screen sees the event.
    """
    outcome = Outcome()
    for scene in _SCENE_ORDER:
        if state.scene != scene:
            continue
        outcome = _merge(outcome, _run_scene(scene, state, buttons, event, rng))
        event = None
    return outcome