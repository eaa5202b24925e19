import random

import pytest

from sansrpg.combat import (
    MobKind,
    boss_attack,
    boss_click,
    boss_heal,
    boss_heals,
    buy_upgrade,
    fight_won,
    gain_xp,
    handle_mob_click,
    launch_fight,
    lose_xp,
    select_mob,
    update_quest,
)
from sansrpg.state import Scene, new_game

FIGHT = (900, 260)
NEXT = (1850, 570)
PREV = (50, 570)
ATTACK = (100, 1000)
HEAL = (1700, 1000)
NOWHERE = (500, 500)


class FixedRng:
    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return self.values.pop(0)


@pytest.fixture
def state():
    return new_game(50)


@pytest.mark.parametrize("kind", list(MobKind))
def test_select_mob_sets_stats(state, kind):
    select_mob(state, kind)
    assert state.mob.name == kind.label
    assert state.mob.hp == kind.strength
    assert state.mob.xp == kind.xp
    assert state.mob.tp == state.mob.dmg + state.mob.armor
    assert state.player.tp == state.player.armor + state.player.dmg


def test_mob_stats_from_source(state):
    select_mob(state, MobKind.DROID)
    assert (state.mob.name, state.mob.hp, state.mob.xp) == ("DROID", 100, 50)
    assert state.mob.tp == 200
    select_mob(state, MobKind.GOLEM)
    assert (state.mob.name, state.mob.hp, state.mob.xp) == ("GOLEM", 250, 300)
    assert state.mob.tp == 500


def test_droid_chance_with_starting_stats(state):
    select_mob(state, MobKind.DROID)
    assert state.player.chance == 50


def test_chance_falls_with_stronger_mobs(state):
    chances = []
    for kind in MobKind:
        select_mob(state, kind)
        chances.append(state.player.chance)
    assert chances == sorted(chances, reverse=True)
    assert chances[-1] < 0


def test_kind_cycle(state):
    for kind in MobKind:
        assert MobKind.from_scene(kind.next.scene).previous is kind
    handle_mob_click(state, MobKind.GOLEM, NEXT, FixedRng())
    assert state.scene == Scene.MOB_ONE
    assert state.mob.name == "DROID"
    handle_mob_click(state, MobKind.DROID, PREV, FixedRng())
    assert state.scene == Scene.MOB_FOUR
    assert state.mob.name == "GOLEM"


def test_from_scene_round_trip():
    for kind in MobKind:
        assert MobKind.from_scene(kind.scene) is kind
    with pytest.raises(ValueError):
        MobKind.from_scene(Scene.MENU)


def test_boss_heals_one_in_four():
    rng = FixedRng(0, 1, 2, 3)
    assert [boss_heals(rng) for _ in range(4)] == [True, False, False, False]
    assert rng.calls == [4, 4, 4, 4]


def test_fight_won_rolls_against_chance(state):
    state.player.chance = 30
    rng = FixedRng(30, 31)
    assert fight_won(state.player, rng) is True
    assert fight_won(state.player, rng) is False
    assert rng.calls == [101, 101]


def test_negative_chance_never_wins(state):
    select_mob(state, MobKind.GOLEM)
    rng = random.Random(7)
    assert not any(fight_won(state.player, rng) for _ in range(300))


def test_update_quest_caps_counter(state):
    select_mob(state, MobKind.GOLEM)
    for _ in range(10):
        update_quest(state)
    assert state.golems == 5
    assert state.droids == 0


def test_update_quest_counts_droid(state):
    select_mob(state, MobKind.DROID)
    update_quest(state)
    assert state.droids == 1


def test_gain_and_lose_xp(state):
    select_mob(state, MobKind.APPLE)
    gain_xp(state)
    gain_xp(state)
    assert state.player.xp == 2 * MobKind.APPLE.xp
    lose_xp(state)
    assert state.player.xp == MobKind.APPLE.xp
    state.player.xp = 10
    lose_xp(state)
    assert state.player.xp == 0


def test_launch_fight_win(state):
    select_mob(state, MobKind.DROID)
    assert launch_fight(state, FIGHT, FixedRng(0)) is True
    assert state.scene == Scene.WIN
    assert state.player.xp == MobKind.DROID.xp
    assert state.droids == 1


def test_launch_fight_loss(state):
    select_mob(state, MobKind.DROID)
    state.player.xp = 20
    assert launch_fight(state, FIGHT, FixedRng(100)) is True
    assert state.scene == Scene.LOSE
    assert state.player.xp == 0
    assert state.droids == 0


def test_launch_fight_missed_button(state):
    rng = FixedRng()
    assert launch_fight(state, NOWHERE, rng) is False
    assert rng.calls == []
    assert state.scene == Scene.MENU


def test_mob_click_next(state):
    select_mob(state, MobKind.DROID)
    handle_mob_click(state, MobKind.DROID, NEXT, FixedRng())
    assert state.scene == Scene.MOB_TWO
    assert state.prev == Scene.MOB_ONE
    assert state.mob.name == "OZEF"


def test_mob_click_prev_wraps(state):
    handle_mob_click(state, MobKind.DROID, PREV, FixedRng())
    assert state.scene == Scene.MOB_FOUR
    assert state.prev == Scene.MOB_ONE
    assert state.mob.name == "GOLEM"


def test_mob_click_fight(state):
    select_mob(state, MobKind.OZEF)
    handle_mob_click(state, MobKind.OZEF, FIGHT, FixedRng(0))
    assert state.scene == Scene.WIN
    assert state.ozefs == 1


def test_boss_attack_player_survives(state):
    state.player.hp = 1000
    boss_attack(state, FixedRng(1))
    assert state.boss.hp == 5000 - state.player.dmg
    assert state.player.hp == 1000 - 250


def test_boss_attack_boss_heals(state):
    boss_attack(state, FixedRng(0))
    assert state.boss.hp == 5000 - state.player.dmg + 300
    assert state.player.hp == 100


def test_boss_attack_kills_player(state):
    boss_attack(state, FixedRng(2))
    assert state.player.hp == 0
    assert state.scene == Scene.LOSE_END


def test_boss_attack_kills_boss(state):
    state.boss.hp = state.player.dmg
    state.player.hp = 1000
    boss_attack(state, FixedRng(3))
    assert state.scene == Scene.WIN_END
    assert state.boss.hp == -state.player.dmg


def test_boss_heal(state):
    state.player.hp = 1000
    boss_heal(state, FixedRng(1))
    assert state.player.hp == 1000 + 50 - 250
    assert state.boss.hp == 5000


def test_boss_heal_death_ends_with_win_scene(state):
    boss_heal(state, FixedRng(1))
    assert state.player.hp == 0
    assert state.scene == Scene.WIN_END


def test_boss_click_dispatch(state):
    state.player.hp = 1000
    boss_click(state, ATTACK, FixedRng(0))
    assert state.boss.hp == 5000 - state.player.dmg + 300
    boss_click(state, HEAL, FixedRng(1))
    assert state.player.hp == 1000 + 50 - 250
    rng = FixedRng()
    boss_click(state, NOWHERE, rng)
    assert rng.calls == []


@pytest.mark.parametrize(
    "tele, slot, attribute",
    [(2, 0, "dmg"), (3, 1, "armor"), (5, 2, "hp")],
)
def test_buy_upgrade(state, tele, slot, attribute):
    state.tele = tele
    state.player.xp = 150
    before = getattr(state.player, attribute)
    assert buy_upgrade(state) is True
    assert state.player.xp == 0
    assert state.player.upgrades[slot] == 1
    assert getattr(state.player, attribute) == before + 50


def test_buy_upgrade_needs_xp(state):
    state.tele = 2
    state.player.xp = 149
    assert buy_upgrade(state) is False
    assert state.player.xp == 149
    assert state.player.upgrades == [0, 0, 0]


def test_buy_upgrade_in_quest_board_spends_xp_only(state):
    state.tele = 4
    state.player.xp = 300
    assert buy_upgrade(state) is True
    assert state.player.xp == 150
    assert state.player.upgrades == [0, 0, 0]