"""Fights against mobs and the boss, quest progress and the upgrade shop."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from sansrpg.geometry import Rect
from sansrpg.state import GameState, Player, Scene

FIGHT_BUTTON = Rect(800, 200, 300, 127)
NEXT_BUTTON = Rect(1820, 540, 100, 73)
PREV_BUTTON = Rect(0, 540, 100, 73)
ATTACK_BUTTON = Rect(0, 947, 298, 133)
HEAL_BUTTON = Rect(1622, 947, 298, 133)

BOSS_HEAL = 300
BOSS_HIT = 250
PLAYER_HEAL = 50
UPGRADE_COST = 150
UPGRADE_BONUS = 50

# Mob xp reward -> (quest counter on the game state, kills required).
QUEST_TARGETS = {
    50: ("droids", 20),
    100: ("ozefs", 15),
    150: ("apples", 10),
    300: ("golems", 5),
}


class RandomSource(Protocol):
    """The part of ``random.Random`` the fights rely on."""

    def randrange(self, stop: int) -> int: ...


class MobKind(Enum):
    """The four opponents reachable through the portal, in cycling order."""

    DROID = ("DROID", 100, 50, Scene.MOB_ONE)
    OZEF = ("OZEF", 150, 100, Scene.MOB_TWO)
    APPLE = ("APPLE", 200, 150, Scene.MOB_THREE)
    GOLEM = ("GOLEM", 250, 300, Scene.MOB_FOUR)

    def __init__(self, label: str, strength: int, xp: int, scene: Scene) -> None:
        self.label = label
        self.strength = strength
        self.xp = xp
        self.scene = scene

    @property
    def next(self) -> MobKind:
        """The mob shown by the "next" arrow."""
        kinds = list(MobKind)
        return kinds[(kinds.index(self) + 1) % len(kinds)]

    @property
    def previous(self) -> MobKind:
        """The mob shown by the "previous" arrow."""
        kinds = list(MobKind)
        return kinds[(kinds.index(self) - 1) % len(kinds)]

    @classmethod
    def from_scene(cls, scene: Scene) -> MobKind:
        """The mob whose fight screen is ``scene``."""
        for kind in cls:
            if kind.scene == scene:
                return kind
        raise ValueError(f"{scene!r} is not a mob scene")


def boss_heals(rng: RandomSource) -> bool:
    """One chance in four that the boss heals instead of striking."""
    return rng.randrange(4) == 0


def fight_won(player: Player, rng: RandomSource) -> bool:
    """Roll 0..100 and win when the roll does not exceed the player's chance."""
    roll = rng.randrange(101)
    return 0 <= roll <= player.chance


def select_mob(state: GameState, kind: MobKind) -> None:
    """Make ``kind`` the current opponent and work out the player's chance."""
    player, mob = state.player, state.mob
    player.tp = player.armor + player.dmg
    mob.name = kind.label
    mob.hp = kind.strength
    mob.dmg = kind.strength
    mob.armor = kind.strength
    mob.xp = kind.xp
    mob.tp = mob.dmg + mob.armor
    player.chance = int(100.0 - (mob.tp * (50.0 / 100.0)) / player.tp * 100.0)


def update_quest(state: GameState) -> None:
    """Count a victory against the current mob towards the quest."""
    target = QUEST_TARGETS.get(state.mob.xp)
    if target is None:
        return
    counter, required = target
    kills = getattr(state, counter)
    if kills < required:
        setattr(state, counter, kills + 1)


def gain_xp(state: GameState) -> None:
    """Reward the player with the current mob's experience."""
    state.player.xp += state.mob.xp


def lose_xp(state: GameState) -> None:
    """Take the current mob's experience from the player, down to zero."""
    player = state.player
    player.xp = max(player.xp - state.mob.xp, 0) if player.xp >= state.mob.xp else 0


def launch_fight(state: GameState, point: tuple[int, int], rng: RandomSource) -> bool:
    """Fight the current mob if ``point`` hits the fight button.

    Returns whether a fight took place.
    """
    if not FIGHT_BUTTON.contains(point):
        return False
    if fight_won(state.player, rng):
        update_quest(state)
        state.scene = Scene.WIN
        gain_xp(state)
    else:
        state.scene = Scene.LOSE
        lose_xp(state)
    return True


def handle_mob_click(
    state: GameState, kind: MobKind, point: tuple[int, int], rng: RandomSource
) -> None:
    """React to a mouse release on the fight screen of ``kind``."""
    if NEXT_BUTTON.contains(point):
        select_mob(state, kind.next)
        state.prev = kind.scene
        state.scene = kind.next.scene
    if PREV_BUTTON.contains(point):
        select_mob(state, kind.previous)
        state.prev = kind.scene
        state.scene = kind.previous.scene
    launch_fight(state, point, rng)


def _boss_turn(state: GameState, rng: RandomSource, death_scene: Scene) -> None:
    if boss_heals(rng):
        state.boss.hp += BOSS_HEAL
    elif state.player.hp <= BOSS_HIT:
        state.player.hp = 0
        state.scene = death_scene
    else:
        state.player.hp -= BOSS_HIT


def boss_attack(state: GameState, rng: RandomSource) -> None:
    """The player strikes the boss, then the boss answers."""
    boss, player = state.boss, state.player
    if boss.hp <= player.dmg:
        boss.hp = 0
        state.scene = Scene.WIN_END
    boss.hp -= player.dmg
    _boss_turn(state, rng, Scene.LOSE_END)


def boss_heal(state: GameState, rng: RandomSource) -> None:
    """The player heals, then the boss answers."""
    state.player.hp += PLAYER_HEAL
    _boss_turn(state, rng, Scene.WIN_END)


def boss_click(state: GameState, point: tuple[int, int], rng: RandomSource) -> None:
    """React to a mouse release during the boss fight."""
    if ATTACK_BUTTON.contains(point):
        boss_attack(state, rng)
    if HEAL_BUTTON.contains(point):
        boss_heal(state, rng)


def buy_upgrade(state: GameState) -> bool:
    """Spend experience on the upgrade of the open shop.

    Returns whether the experience was spent.
    """
    player = state.player
    if player.xp < UPGRADE_COST:
        return False
    player.xp -= UPGRADE_COST
    if state.tele == 2:
        player.upgrades[0] += 1
        player.dmg += UPGRADE_BONUS
    if state.tele == 3:
        player.upgrades[1] += 1
        player.armor += UPGRADE_BONUS
    if state.tele == 5:
        player.upgrades[2] += 1
        player.hp += UPGRADE_BONUS
    return True