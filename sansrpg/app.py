"""Command-line entry point: option checks, the window and the frame loop."""

from __future__ import annotations

import os
import random
import sys
from pathlib import Path
from typing import Any, Sequence

from sansrpg.combat import (
    ATTACK_BUTTON,
    FIGHT_BUTTON,
    HEAL_BUTTON,
    NEXT_BUTTON,
    PREV_BUTTON,
    MobKind,
)
from sansrpg.geometry import Rect
from sansrpg.layout import (
    ALPHA_BUTTON,
    FONT_PATH,
    FONT_SIZE,
    WINDOW_SIZE,
    WINDOW_TITLE,
    MenuButtons,
    volume_bars,
)
from sansrpg.options import OPTIONS_FILE, OptionsError, format_number, validate_options
from sansrpg.scenes import (
    EventKind,
    InputEvent,
    Outcome,
    advance_boss_animation,
    dispatch,
)
from sansrpg.state import GameState, Scene, SpriteRect, new_game
from sansrpg.world import LEFT_TEXTURE, chance_label, npc_at

EXIT_FAILURE = 84

MENU_MUSIC = "sounds/menu.ogg"
GAME_MUSIC = "sounds/game.ogg"

BOSS_FRAME_DELAY_MS = 50

WHITE = (255, 255, 255)
GREEN = (0, 255, 0)
BLACK = (0, 0, 0)

PRESS_POSITIONS = {1: (744, 600), 2: (1074, 600), 3: (1308, 570), 4: (1611, 600)}

_HELP = (
    "RPG HELP\n\tUsage\nT : Open the portals\nE : Open NPC shop\n"
    "C : Open Player inventory\nESC : Open Pause menu\n"
    "Left arroy : move player\nRight Arrow : Move player\n"
    "K : Speed the game\nD : Activate stuffing mode\n"
    "Space : Turns off stuffed mode\n"
)


def help_text() -> str:
    """The usage text printed for ``-h``."""
    return _HELP


def check_files(path: str | Path = OPTIONS_FILE) -> int:
    """Check the options file and return its volume.

    Raises ``OptionsError`` (or ``MissingOptionsFile``) when it is unusable.
    """
    return validate_options(path)


class _Screen:
    """Draws images and text onto a surface, caching what it loads."""

    def __init__(self, pygame: Any, surface: Any) -> None:
        self.pg = pygame
        self.surface = surface
        self._images: dict[str, Any] = {}
        self._fonts: dict[int, Any] = {}

    def image(self, path: str) -> Any:
        if path not in self._images:
            try:
                loaded = self.pg.image.load(path).convert_alpha()
            except (self.pg.error, OSError):
                loaded = None
            self._images[path] = loaded
        return self._images[path]

    def font(self, size: int) -> Any:
        if size not in self._fonts:
            try:
                self._fonts[size] = self.pg.font.Font(FONT_PATH, size)
            except (self.pg.error, OSError):
                self._fonts[size] = self.pg.font.Font(None, size)
        return self._fonts[size]

    def sprite(
        self,
        path: str,
        position: tuple[float, float],
        scale: tuple[float, float] = (1.0, 1.0),
        frame: SpriteRect | None = None,
    ) -> None:
        img = self.image(path)
        if img is None:
            return
        if frame is not None:
            area = self.pg.Rect(frame.left, frame.top, frame.width, frame.height)
            area = area.clip(img.get_rect())
            if area.width == 0 or area.height == 0:
                return
            img = img.subsurface(area)
        if scale != (1.0, 1.0):
            size = (
                max(1, int(img.get_width() * abs(scale[0]))),
                max(1, int(img.get_height() * abs(scale[1]))),
            )
            img = self.pg.transform.smoothscale(img, size)
        self.surface.blit(img, (int(position[0]), int(position[1])))

    def button(self, path: str, rect: Rect) -> None:
        area = self.pg.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))
        img = self.image(path)
        if img is None:
            self.pg.draw.rect(self.surface, WHITE, area)
            return
        self.surface.blit(self.pg.transform.smoothscale(img, area.size), area.topleft)

    def bar(self, rect: Rect, color: tuple[int, int, int]) -> None:
        area = self.pg.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))
        self.pg.draw.rect(self.surface, color, area)

    def text(
        self,
        string: str,
        position: tuple[float, float],
        size: int = FONT_SIZE,
        color: tuple[int, int, int] = WHITE,
    ) -> None:
        rendered = self.font(size).render(string, True, color)
        self.surface.blit(rendered, (int(position[0]), int(position[1])))


class _Sound:
    """A looping piece of music that may be missing."""

    def __init__(self, pygame: Any, path: str, enabled: bool) -> None:
        self._sound = None
        if enabled:
            try:
                self._sound = pygame.mixer.Sound(path)
            except (pygame.error, OSError):
                self._sound = None

    def play(self) -> None:
        if self._sound is not None:
            self._sound.play(loops=-1)

    def stop(self) -> None:
        if self._sound is not None:
            self._sound.stop()

    def set_volume(self, volume: int) -> None:
        if self._sound is not None:
            self._sound.set_volume(max(0, min(volume, 100)) / 100)


def _draw_menu(screen: _Screen, buttons: MenuButtons) -> None:
    screen.sprite("files/menu.png", (0, 0), (1.54, 1.54))
    screen.button("files/play.png", buttons.play)
    screen.button("files/howto.png", buttons.howto)
    screen.button("files/settings.png", buttons.settings)
    screen.button("files/exit_text.png", buttons.quit)


def _draw_settings(screen: _Screen, state: GameState, buttons: MenuButtons) -> None:
    screen.sprite("files/menu.png", (0, 0), (1.54, 1.54))
    screen.sprite("files/setting.png", (300, 50))
    for bar in reversed(volume_bars()):
        if state.volume >= bar.level:
            screen.bar(bar.rect, bar.color)
    screen.button("files/prev.png", buttons.prev)
    screen.button("files/exit.png", buttons.exit)
    screen.button("files/home.png", buttons.home)


def _draw_stats(screen: _Screen, state: GameState) -> None:
    player = state.player
    screen.sprite("files/stats.png", (500, 200), (0.6, 0.6))
    screen.text(format_number(player.xp), (700, 760))
    screen.text(format_number(player.dmg), (700, 600))
    screen.text(format_number(player.armor), (700, 680))
    screen.text(format_number(player.hp), (700, 430))
    screen.text(format_number(player.dmg + player.armor), (700, 520))
    badges = (
        ("files/dmg_logo.png", (997, 265), (1100, 320)),
        ("files/armor_logo.png", (1225, 265), (1325, 320)),
        ("files/life_logo.png", (1118, 416), (1220, 465)),
    )
    for count, (logo, logo_pos, text_pos) in zip(player.upgrades, badges):
        if count:
            screen.sprite(logo, logo_pos, (1.5, 1.5))
            screen.text(format_number(count), text_pos, 50)


def _draw_game(
    screen: _Screen, state: GameState, panel: tuple[str, tuple[int, int]] | None
) -> None:
    screen.sprite("files/back_game.png", (0, 0))
    if state.player_texture is not None:
        frame = (
            state.left_frame
            if state.player_texture == LEFT_TEXTURE
            else state.right_frame
        )
        screen.sprite(state.player_texture, state.player_pos, state.player_scale, frame)
    if state.tele == 1:
        screen.sprite("files/world.png", (500, 400), (0.5, 0.5))
    if 1 < state.tele < 6 and panel is not None:
        screen.sprite(panel[0], panel[1])
    if state.tele == 6:
        _draw_stats(screen, state)
    screen.text(format_number(state.player.xp), (0, 0))
    if state.tele == 4:
        counters = (state.droids, state.ozefs, state.apples, state.golems)
        for count, top in zip(counters, (600, 685, 770, 865)):
            screen.text(format_number(count), (800, top), 40)
    npc = npc_at(state.player_pos[0])
    if npc and state.tele == 0:
        screen.text("PRESS E", PRESS_POSITIONS[npc], 40)


def _draw_mob(screen: _Screen, state: GameState, kind: MobKind) -> None:
    number = list(MobKind).index(kind) + 1
    screen.sprite(f"files/mob_{number}.jpg", (0, 0))
    screen.button("files/prev.png", PREV_BUTTON)
    screen.button("files/next.png", NEXT_BUTTON)
    mob, player = state.mob, state.player
    screen.text(format_number(mob.tp), (1500, 860))
    screen.text(mob.name, (1400, 80))
    screen.text(format_number(mob.hp), (1500, 760), color=GREEN)
    screen.button("files/fight.png", FIGHT_BUTTON)
    screen.text(player.name, (300, 80))
    screen.text(format_number(player.hp), (300, 760), color=GREEN)
    screen.text(format_number(player.armor + player.dmg), (300, 860))
    label, position = chance_label(player)
    screen.text(label, position)


def _draw_result(screen: _Screen, won: bool) -> None:
    if won:
        screen.sprite("files/win.png", (0, 0), (1.2, 1.0))
    else:
        screen.sprite("files/lose.png", (0, 0), (1.5, 1.5))
    screen.button("files/back_to_alpha.png", ALPHA_BUTTON)


def _draw_boss(screen: _Screen, state: GameState) -> None:
    boss = state.boss
    screen.sprite("files/back.png", (0, 0), frame=boss.topmap)
    screen.sprite("files/front.png", (0, 0), frame=boss.topmap)
    screen.sprite(boss.player_texture, (900, 850), (2.0, 2.0), boss.walk)
    screen.sprite("files/boss.png", (500, 0), frame=boss.frame)
    screen.sprite("files/life_layout.png", (0, 0))
    screen.text(format_number(boss.hp), (120, 40), 50)
    screen.text(format_number(state.player.dmg), (580, 905))
    screen.text(format_number(state.player.hp), (1120, 905))
    screen.button("files/attack.png", ATTACK_BUTTON)
    screen.button("files/heal.png", HEAL_BUTTON)


def _draw(
    screen: _Screen,
    state: GameState,
    buttons: MenuButtons,
    panel: tuple[str, tuple[int, int]] | None,
) -> None:
    scene = state.scene
    if scene is Scene.MENU:
        _draw_menu(screen, buttons)
    elif scene is Scene.SETTINGS:
        _draw_settings(screen, state, buttons)
    elif scene is Scene.GAME:
        _draw_game(screen, state, panel)
    elif scene in (Scene.MOB_ONE, Scene.MOB_TWO, Scene.MOB_THREE, Scene.MOB_FOUR):
        _draw_mob(screen, state, MobKind.from_scene(scene))
    elif scene in (Scene.WIN, Scene.LOSE):
        _draw_result(screen, scene is Scene.WIN)
    elif scene is Scene.BOSS:
        _draw_boss(screen, state)
    elif scene is Scene.LOSE_END:
        screen.sprite("files/lose-end.png", (0, 0))
    elif scene is Scene.WIN_END:
        screen.sprite("files/win_end.png", (0, 0))
    else:
        screen.sprite("files/how_to_page.png", (0, 0))


def _key_names(pygame: Any) -> dict[int, str]:
    return {
        pygame.K_LEFT: "left",
        pygame.K_RIGHT: "right",
        pygame.K_ESCAPE: "escape",
        pygame.K_SPACE: "space",
        pygame.K_c: "c",
        pygame.K_d: "d",
        pygame.K_e: "e",
        pygame.K_k: "k",
        pygame.K_q: "q",
        pygame.K_t: "t",
    }


def _poll(pygame: Any, key_names: dict[int, str]) -> InputEvent | None:
    raw = pygame.event.poll()
    if raw.type == pygame.NOEVENT:
        return None
    kinds = {
        pygame.QUIT: EventKind.CLOSED,
        pygame.MOUSEBUTTONUP: EventKind.MOUSE_RELEASED,
        pygame.TEXTINPUT: EventKind.TEXT_ENTERED,
        pygame.KEYDOWN: EventKind.KEY_PRESSED,
    }
    pressed = pygame.key.get_pressed()
    keys = frozenset(name for code, name in key_names.items() if pressed[code])
    text = raw.text if raw.type == pygame.TEXTINPUT else ""
    return InputEvent(
        kinds.get(raw.type, EventKind.OTHER), pygame.mouse.get_pos(), keys, text
    )


def run(state: GameState, buttons: MenuButtons) -> None:
    """Open the full-screen window and run frames until it is closed."""
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        audio = True
        try:
            pygame.mixer.init()
        except pygame.error:
            audio = False
        display = pygame.display.set_mode(WINDOW_SIZE, pygame.FULLSCREEN)
        pygame.display.set_caption(WINDOW_TITLE)
        canvas = pygame.Surface(WINDOW_SIZE)
        screen = _Screen(pygame, canvas)
        menu_music = _Sound(pygame, MENU_MUSIC, audio)
        game_music = _Sound(pygame, GAME_MUSIC, audio)
        menu_music.set_volume(state.volume)
        game_music.set_volume(state.volume)
        menu_music.play()

        rng = random.Random()
        key_names = _key_names(pygame)
        panel: tuple[str, tuple[int, int]] | None = None
        last_boss_frame = pygame.time.get_ticks()
        clock = pygame.time.Clock()

        while True:
            if state.scene is Scene.SETTINGS:
                menu_music.set_volume(state.volume)
                game_music.set_volume(state.volume)
            outcome: Outcome = dispatch(state, buttons, _poll(pygame, key_names), rng)
            if outcome.start_game_music:
                menu_music.stop()
                game_music.play()
            if outcome.echo:
                sys.stdout.buffer.write(outcome.echo)
                sys.stdout.flush()
            if outcome.panel is not None:
                panel = outcome.panel
            if outcome.close:
                break

            now = pygame.time.get_ticks()
            if state.scene is Scene.BOSS and now - last_boss_frame >= BOSS_FRAME_DELAY_MS:
                advance_boss_animation(state.boss)
                last_boss_frame = now

            canvas.fill(BLACK)
            _draw(screen, state, buttons, panel)
            display.fill(BLACK)
            angle = outcome.view_angle or 0
            if angle:
                rotated = pygame.transform.rotate(canvas, -angle)
                display.blit(rotated, rotated.get_rect(center=display.get_rect().center))
            else:
                display.blit(canvas, (0, 0))
            pygame.display.flip()
            clock.tick(60)

        menu_music.stop()
        game_music.stop()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 1 and args[0].startswith("-h"):
        sys.stdout.write(help_text())
        return 0
    try:
        volume = check_files()
    except OptionsError as error:
        sys.stdout.write(error.report)
        return EXIT_FAILURE
    run(new_game(volume), MenuButtons())
    return 0


if __name__ == "__main__":
    sys.exit(main())