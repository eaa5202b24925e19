from sansrpg.state import Scene, new_boss, new_game, new_player


def test_new_game_starts_on_menu_with_volume():
    state = new_game(40)
    assert state.volume == 40
    assert state.scene is Scene.MENU
    assert state.tele == 0
    assert state.finish is False


def test_new_player_stats():
    player = new_player()
    assert (player.hp, player.armor, player.dmg, player.tp) == (100, 100, 100, 200)
    assert player.xp == 0
    assert player.chance == 0
    assert player.upgrades == [0, 0, 0]


def test_player_total_power_matches_armor_and_damage():
    player = new_player()
    assert player.tp == player.armor + player.dmg


def test_new_boss_stats():
    boss = new_boss()
    assert (boss.hp, boss.dmg, boss.heal) == (5000, 150, 300)
    assert (boss.frame.width, boss.frame.height) == (872, 632)
    assert boss.topmap.left == 960
    assert boss.topmap.width == 1920


def test_walk_frames_are_truncated_to_whole_pixels():
    state = new_game(0)
    assert state.left_frame.width == 43
    assert state.boss.walk.width == 43
    assert state.right_frame.height == 73


def test_player_starts_at_spawn_point():
    state = new_game(10)
    assert state.player_pos == (100.0, 650.0)
    assert state.player_scale == (2.0, 2.0)


def test_games_do_not_share_mutable_state():
    first = new_game(10)
    second = new_game(10)
    first.player.upgrades[0] += 1
    first.boss.hp -= 100
    assert second.player.upgrades == [0, 0, 0]
    assert second.boss.hp == 5000


def test_quest_counters_start_at_zero():
    state = new_game(0)
    assert (state.droids, state.ozefs, state.apples, state.golems) == (0, 0, 0, 0)


def test_scene_values_follow_numbering():
    assert Scene(10) is Scene.BOSS
    assert Scene(13) is Scene.HOW_TO
    assert sorted(Scene)[0] is Scene.MENU