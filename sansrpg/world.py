"""Walking on the map, talking to NPCs, portals and the inventory."""

from __future__ import annotations

from typing import Protocol

from sansrpg.combat import MobKind, buy_upgrade, select_mob
from sansrpg.geometry import Rect
from sansrpg.options import format_number
from sansrpg.state import Boss, GameState, Player, Scene

LEFT_TEXTURE = "./files/sans_left.png"
RIGHT_TEXTURE = "./files/sans_right.png"
BOSS_LEFT_TEXTURE = "files/sans_left.png"
BOSS_RIGHT_TEXTURE = "files/sans_right.png"

STEP = 10
FRAME_STEP = 43
FRAME_LIMIT = 120
SCALE_STEP = 0.01
MAP_WIDTH = 1920

MOB_PORTAL = Rect(505, 400, 470, 166)
BOSS_PORTAL = Rect(985, 400, 475, 166)
SHOP_AREA = Rect(750, 190, 500, 560)
BUY_BUTTON = Rect(868, 620, 169, 32)
INVENTORY_CLOSE = Rect(866, 218, 53, 40)

INVENTORY = 6

# NPC number -> (tele value, panel texture, panel position)
NPC_PANELS = {
    1: (2, "files/dmg_shop.png", (750, 190)),
    2: (3, "files/armor_shop.png", (750, 190)),
    3: (4, "files/quest.png", (650, 50)),
    4: (5, "files/life_shop.png", (750, 190)),
}

_NPC_SPANS = ((1, 744, 921), (2, 1074, 1197), (3, 1308, 1468), (4, 1611, 1804))

QUEST_GOALS = {"droids": 20, "ozefs": 15, "apples": 10, "golems": 5}


class RandomSource(Protocol):
    """The part of ``random.Random`` the view spin relies on."""

    def randrange(self, stop: int) -> int: ...


def _advance_frame(left: int) -> int:
    return (0 if left >= FRAME_LIMIT else left) + FRAME_STEP


def move_left(state: GameState) -> None:
    """Walk one step to the left, moving away from the camera."""
    x, y = state.player_pos
    sx, sy = state.player_scale
    if x >= 300:
        y -= 2
    if x >= 100:
        x -= STEP
    state.left_frame.left = _advance_frame(state.left_frame.left)
    if 600 <= x <= 1800:
        y += 0.5
        sx -= SCALE_STEP
        sy -= SCALE_STEP
    state.player_pos = (x, y)
    state.player_scale = (sx, sy)
    state.player_texture = LEFT_TEXTURE


def move_right(state: GameState) -> None:
    """Walk one step to the right, moving towards the camera."""
    x, y = state.player_pos
    sx, sy = state.player_scale
    if 300 <= x <= 1800:
        y += 2
    if x <= 1800:
        x += STEP
    state.right_frame.left = _advance_frame(state.right_frame.left)
    if 600 <= x <= 1800:
        y -= 0.5
        sx += SCALE_STEP
        sy += SCALE_STEP
    state.player_pos = (x, y)
    state.player_scale = (sx, sy)
    state.player_texture = RIGHT_TEXTURE


def npc_at(x: float) -> int:
    """Number of the NPC standing at horizontal position ``x``, 0 if none."""
    return next((npc for npc, low, high in _NPC_SPANS if low <= x <= high), 0)


def interact(state: GameState) -> tuple[str, tuple[int, int]] | None:
    """Open the panel of the NPC next to the player.

    Returns the panel texture and position, or None with nobody near.
    """
    panel = NPC_PANELS.get(npc_at(state.player_pos[0]))
    if panel is None:
        return None
    tele, texture, position = panel
    state.tele = tele
    return texture, position


def portal_click(state: GameState, point: tuple[int, int]) -> None:
    """React to a click on the open portal map."""
    if MOB_PORTAL.contains(point):
        select_mob(state, MobKind.DROID)
        state.prev = Scene.GAME
        state.scene = Scene.MOB_ONE
    elif BOSS_PORTAL.contains(point):
        if state.finish:
            state.scene = Scene.BOSS
        else:
            state.tele = 0
    else:
        state.tele = 0


def inventory_click(state: GameState, point: tuple[int, int]) -> None:
    """Close the inventory when its close mark is clicked."""
    if INVENTORY_CLOSE.contains(point):
        state.tele = 0


def shop_click(state: GameState, point: tuple[int, int]) -> None:
    """React to a click while a shop, the quest board or the inventory is open."""
    if SHOP_AREA.contains(point) and state.tele != INVENTORY:
        if BUY_BUTTON.contains(point):
            buy_upgrade(state)
    elif state.tele == INVENTORY:
        inventory_click(state, point)
    else:
        state.tele = 0


def refresh_quest(state: GameState) -> bool:
    """Mark the quest finished once every kill goal is met exactly."""
    if all(getattr(state, name) == goal for name, goal in QUEST_GOALS.items()):
        state.finish = True
    return state.finish


def spin_view(state: GameState, rng: RandomSource) -> int:
    """Return the view angle to apply now and turn it a little further."""
    angle = state.view_angle
    state.view_angle += rng.randrange(3)
    if state.view_angle >= 360:
        state.view_angle = 0
    return angle


def boss_move_left(boss: Boss) -> None:
    """Scroll the boss arena to the left."""
    if boss.topmap.left <= 0:
        boss.topmap.left = MAP_WIDTH
    boss.topmap.left -= STEP
    boss.walk.left = _advance_frame(boss.walk.left)
    boss.player_texture = BOSS_LEFT_TEXTURE


def boss_move_right(boss: Boss) -> None:
    """Scroll the boss arena to the right."""
    if boss.topmap.left >= MAP_WIDTH:
        boss.topmap.left = 0
    boss.topmap.left += STEP
    boss.walk.left = _advance_frame(boss.walk.left)
    boss.player_texture = BOSS_RIGHT_TEXTURE


def chance_label(player: Player) -> tuple[str, tuple[int, int]]:
    """Text and position of the win chance shown on the fight screen."""
    if player.chance < 0:
        return "Too low", (760, 850)
    return format_number(player.chance), (900, 850)