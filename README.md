# sansrpg

A small full-screen role-playing game built on pygame. Walk through the
village, visit the NPC shops, teleport to the mob arena to farm experience,
complete the hunting quest and then take on the boss.

## Installing

```
pip install .
```

## Running

The game reads its settings from `options.txt` in the current directory
(only its first 200 bytes are read). It must contain a `volume=` line with a
value between 0 and 100:

```
volume=50
```

Images, the font and the music are loaded from the `files/`, `fonts/` and
`sounds/` directories relative to the current directory. A missing image is
simply not drawn (buttons are drawn as plain white rectangles instead), a
missing font falls back to pygame's default font, and missing music or an
unavailable audio device leaves the game silent.

Start the game with:

```
sansrpg
```

It opens a 1920x1080 full-screen window titled `My_rpg`.

Exit status 84 is returned when:

- `options.txt` cannot be opened (an error message is printed),
- it has no `volume=` line (a syntax error message is printed),
- the volume is outside 0..100 (nothing is printed).

To print the key bindings and exit:

```
sansrpg -h
```

## Controls

| Key / action      | Effect                                              |
|-------------------|-----------------------------------------------------|
| Left / Right      | Move the player (also scrolls the boss arena)       |
| T                 | Open the portal map                                 |
| E                 | Open the panel of the NPC you stand next to         |
| C                 | Open the player inventory                           |
| Escape            | Open the settings page                              |
| K                 | Complete the quest counters and set experience to 10000 |
| D / Space         | Turn the spinning view on / off                     |
| Q                 | Close the game on the final win or lose screen      |
| Mouse click       | Press on-screen buttons                             |

On the settings page, clicking one of the ten bars sets the music volume in
steps of 10; the back arrow returns to the previous screen, the home button
goes to the main menu and the exit button closes the game.

## How the game plays

- The four NPCs in the village are the damage shop, the armor shop, the
  quest board and the life shop. Each shop sells +50 of its statistic for
  150 experience.
- The left portal leads to the mob arena. The arrows cycle through DROID,
  OZEF, APPLE and GOLEM. Your chance to win is
  `100 - (mob power / 2) / (your damage + armor) * 100`; a chance below zero
  is shown as "Too low".
- Winning a fight grants the mob's experience (50, 100, 150 or 300) and
  counts towards the quest; losing takes that much experience away, never
  below zero.
- When the quest counters reach exactly 20 droids, 15 ozefs, 10 apples and
  5 golems, the right portal leads to the boss (5000 life).
- In the boss fight, *attack* deals your damage and *heal* restores 50 life.
  After either, the boss heals 300 with one chance in four, otherwise hits
  you for 250.

There is no save system: all progress is lost when the window closes.

## Using it as a library

The game rules can be driven without a window:

- `sansrpg.state.new_game(volume)` builds a fresh `GameState` (with its
  `Player`, `Mob` and `Boss`); `Scene` lists the screens.
- `sansrpg.combat` holds the fight and shop rules: `MobKind`, `select_mob`,
  `launch_fight`, `boss_attack`, `boss_heal`, `buy_upgrade`, and more.
- `sansrpg.world` holds movement (`move_left`, `move_right`), NPC lookup
  (`npc_at`, `interact`), `portal_click`, `shop_click` and `refresh_quest`.
- `sansrpg.scenes.dispatch(state, buttons, event, rng)` feeds an
  `InputEvent` to the current screen and returns an `Outcome`; `buttons` is
  a `sansrpg.layout.MenuButtons` and `rng` anything with `randrange`, such as
  `random.Random`.
- `sansrpg.options` reads and checks `options.txt` (`validate_options`,
  `load_volume`), raising `OptionsError` or `MissingOptionsFile`.

```python
import random
from sansrpg.layout import MenuButtons
from sansrpg.scenes import EventKind, InputEvent, dispatch
from sansrpg.state import Scene, new_game

state = new_game(50)
dispatch(state, MenuButtons(), InputEvent(EventKind.MOUSE_RELEASED, (200, 240)), random.Random())
assert state.scene is Scene.GAME
```