"""The application window: menus, settings and the game loop."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, FrozenSet, Optional, Sequence, Tuple, Union

import pygame

from crossguard.config import (
    DEFAULT_HEIGHT,
    FOUR_TEXT_WIDTH,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Screen,
)
from crossguard.game import FRAME_MS, Game, Outcome
from crossguard.render import BACKGROUND, BLACK, BROWN, PAUSE_BUTTON, YELLOW, Renderer

WHITE = (255, 255, 255)
BUTTON_TEXT_SIZE = 36
NOTICE_TEXT_SIZE = 50
FPS_LIMIT = 60
MUSIC_FILE = "bgm1.mp3"


class Choice(Enum):
    """A button the user can press."""

    START = "start"
    SETTINGS = "settings"
    HELP = "help"
    ABOUT = "about"
    QUIT = "quit"
    BACK = "back"
    CONTINUE = "continue"
    MENU = "menu"
    RESTART = "restart"
    PAUSE = "pause"
    MUSIC = "music"


_TRANSITIONS: Dict[Screen, Dict[Choice, Screen]] = {
    Screen.MENU: {
        Choice.START: Screen.GAME,
        Choice.SETTINGS: Screen.SETTING,
        Choice.HELP: Screen.HELP,
        Choice.ABOUT: Screen.ABOUT,
        Choice.QUIT: Screen.OVER,
    },
    Screen.PAUSE: {
        Choice.CONTINUE: Screen.GAME,
        Choice.SETTINGS: Screen.SETTING,
        Choice.HELP: Screen.HELP,
        Choice.ABOUT: Screen.ABOUT,
        Choice.MENU: Screen.MENU,
        Choice.QUIT: Screen.OVER,
    },
    Screen.GAME: {Choice.PAUSE: Screen.PAUSE},
    Screen.WIN: {Choice.MENU: Screen.MENU, Choice.QUIT: Screen.OVER},
    Screen.LOSE: {Choice.MENU: Screen.MENU, Choice.RESTART: Screen.GAME},
    Screen.SETTING: {Choice.MUSIC: Screen.SETTING},
}

_RETURNING: FrozenSet[Screen] = frozenset({Screen.SETTING, Screen.HELP, Screen.ABOUT})

# Choices that start the round afresh before switching screens.
_RESETS: FrozenSet[Tuple[Screen, Choice]] = frozenset(
    {
        (Screen.MENU, Choice.START),
        (Screen.LOSE, Choice.RESTART),
        (Screen.WIN, Choice.QUIT),
    }
)

_BACKGROUNDS: Dict[Screen, str] = {
    Screen.MENU: "menubk.jpg",
    Screen.HELP: "游戏帮助.png",
    Screen.ABOUT: "成员介绍.jpg",
    Screen.PAUSE: "game_bk.jpg",
    Screen.WIN: "win.png",
    Screen.LOSE: "lose.jpg",
}

_KEYS = (("j", pygame.K_j), ("k", pygame.K_k), ("a", pygame.K_a), ("d", pygame.K_d))


def transition(screen: Screen, choice: Choice, previous: Screen) -> Screen:
    """Return the screen that pressing ``choice`` on ``screen`` leads to.

    ``previous`` is the menu or pause screen that a "back" button returns to.
    """
    screen = Screen(screen)
    choice = Choice(choice)
    if choice is Choice.BACK and screen in _RETURNING:
        return Screen(previous)
    try:
        return _TRANSITIONS[screen][choice]
    except KeyError:
        raise ValueError(f"no {choice.value!r} button on the {screen.name} screen") from None


@dataclass(frozen=True)
class _Button:
    choice: Choice
    rect: Tuple[int, int, int, int]
    label: str
    colour: Tuple[int, int, int] = BROWN


def _column(entries: Sequence[Tuple[Choice, str]], first_row: int) -> Tuple[_Button, ...]:
    x = WINDOW_WIDTH // 2 - FOUR_TEXT_WIDTH // 2
    top = WINDOW_HEIGHT // 2 - DEFAULT_HEIGHT // 2
    return tuple(
        _Button(choice, (x, top + row * DEFAULT_HEIGHT, FOUR_TEXT_WIDTH, DEFAULT_HEIGHT), label)
        for row, (choice, label) in enumerate(entries, start=first_row)
    )


def _buttons(screen: Screen, music_on: bool) -> Tuple[_Button, ...]:
    bottom = WINDOW_HEIGHT - 50
    if screen is Screen.MENU:
        return _column(
            (
                (Choice.START, "开始游戏"),
                (Choice.SETTINGS, "设置"),
                (Choice.HELP, "帮助"),
                (Choice.ABOUT, "关于"),
                (Choice.QUIT, "退出游戏"),
            ),
            1,
        )
    if screen is Screen.PAUSE:
        return _column(
            (
                (Choice.CONTINUE, "继续游戏"),
                (Choice.SETTINGS, "设置"),
                (Choice.HELP, "帮助"),
                (Choice.ABOUT, "关于"),
                (Choice.MENU, "返回菜单"),
                (Choice.QUIT, "退出游戏"),
            ),
            0,
        )
    if screen is Screen.SETTING:
        music = (
            _Button(Choice.MUSIC, (500, 450, 150, 50), "音乐开", BROWN)
            if music_on
            else _Button(Choice.MUSIC, (500, 450, 150, 50), "音乐关", YELLOW)
        )
        return (_Button(Choice.BACK, (1000, 650, 100, 50), "返回"), music)
    if screen is Screen.HELP:
        return (_Button(Choice.BACK, (1000, 650, 100, 50), "返回"),)
    if screen is Screen.ABOUT:
        return (_Button(Choice.BACK, (1000, 50, 100, 50), "返回"),)
    if screen is Screen.WIN:
        return (
            _Button(Choice.MENU, (0, bottom, 200, 50), "返回菜单"),
            _Button(Choice.QUIT, (WINDOW_WIDTH - 200, bottom, 200, 50), "退出游戏"),
        )
    if screen is Screen.LOSE:
        return (
            _Button(Choice.MENU, (0, bottom, 200, 50), "返回菜单"),
            _Button(Choice.RESTART, (WINDOW_WIDTH - 200, bottom, 200, 50), "重新开始"),
        )
    if screen is Screen.GAME:
        return (_Button(Choice.PAUSE, PAUSE_BUTTON, "暂停"),)
    return ()


class App:
    """The game window and the screens shown in it."""

    def __init__(
        self,
        surface: Optional[pygame.Surface] = None,
        assets: Optional[Union[str, Path]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        pygame.init()
        if surface is None:
            surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption("Crossguard")
        self.surface = surface
        self.assets = Path(assets) if assets is not None else None
        self.game = Game(rng)
        self.renderer = Renderer(surface, self.assets)
        self.screen = Screen.MENU
        self.previous = Screen.MENU
        self.music_on = True
        self._clock = pygame.time.Clock()
        self._last_frame: Optional[int] = None
        self._font = pygame.font.Font(None, BUTTON_TEXT_SIZE)
        self._notice_font = pygame.font.Font(None, NOTICE_TEXT_SIZE)
        self._backgrounds: Dict[str, Optional[pygame.Surface]] = {}

    def run(self) -> None:
        """Show screens until the user quits."""
        self._start_music()
        try:
            while self.screen is not Screen.OVER:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.screen = Screen.OVER
                    elif event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", 1) == 1:
                        self._click(event.pos)
                    if self.screen is Screen.OVER:
                        break
                if self.screen is Screen.OVER:
                    break
                if self.screen is Screen.GAME:
                    self._play()
                self._draw()
                pygame.display.flip()
                self._clock.tick(FPS_LIMIT)
        finally:
            self._stop_music()

    def _enter(self, screen: Screen) -> None:
        self.screen = screen
        if screen in (Screen.MENU, Screen.PAUSE):
            self.previous = screen
        if screen is Screen.GAME:
            self._last_frame = None

    def _click(self, pos: Tuple[int, int]) -> None:
        choice = next(
            (
                button.choice
                for button in _buttons(self.screen, self.music_on)
                if pygame.Rect(button.rect).collidepoint(pos)
            ),
            None,
        )
        if choice is None:
            return
        if choice is Choice.MUSIC:
            self._toggle_music()
        target = transition(self.screen, choice, self.previous)
        if (self.screen, choice) in _RESETS:
            self.game.reset()
        self._enter(target)

    def _held_keys(self) -> FrozenSet[str]:
        pressed = pygame.key.get_pressed()
        return frozenset(name for name, code in _KEYS if pressed[code])

    def _play(self) -> None:
        now = pygame.time.get_ticks()
        if self._last_frame is not None and now - self._last_frame < FRAME_MS:
            return
        self._last_frame = now
        outcome = self.game.tick(now, self._held_keys())
        if outcome is Outcome.WIN:
            self._enter(Screen.WIN)
        elif outcome is Outcome.LOSE:
            self._enter(Screen.LOSE)

    def _background(self, name: str) -> Optional[pygame.Surface]:
        if name not in self._backgrounds:
            image = None
            if self.assets is not None and (self.assets / name).is_file():
                try:
                    image = pygame.transform.scale(
                        pygame.image.load(str(self.assets / name)), (WINDOW_WIDTH, WINDOW_HEIGHT)
                    )
                except pygame.error:
                    image = None
            self._backgrounds[name] = image
        return self._backgrounds[name]

    def _draw(self) -> None:
        if self.screen is Screen.GAME:
            self.renderer.draw(self.game)
            return
        name = _BACKGROUNDS.get(self.screen)
        image = self._background(name) if name is not None else None
        if image is not None:
            self.surface.blit(image, (0, 0))
        else:
            self.surface.fill(BACKGROUND)
        mouse = pygame.mouse.get_pos()
        for button in _buttons(self.screen, self.music_on):
            rect = pygame.Rect(button.rect)
            hovering = button.choice is not Choice.MUSIC and rect.collidepoint(mouse)
            pygame.draw.rect(self.surface, YELLOW if hovering else button.colour, rect)
            label = self._font.render(button.label, True, BLACK)
            self.surface.blit(label, label.get_rect(center=rect.center))
        if self.screen is Screen.SETTING:
            notice = self._notice_font.render("敬请期待", True, WHITE)
            self.surface.blit(notice, (500, 500))

    def _music_path(self) -> Optional[Path]:
        if self.assets is None:
            return None
        path = self.assets / MUSIC_FILE
        return path if path.is_file() else None

    def _start_music(self) -> None:
        path = self._music_path()
        if not self.music_on or path is None:
            return
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.play(-1)
        except pygame.error:
            pass

    def _stop_music(self) -> None:
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()

    def _toggle_music(self) -> None:
        self.music_on = not self.music_on
        if self.music_on:
            self._start_music()
        else:
            self._stop_music()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run until the user quits."""
    parser = argparse.ArgumentParser(prog="crossguard", description="Guide children across the road.")
    parser.add_argument("--assets", type=Path, default=None, help="directory holding images and music")
    args = parser.parse_args(argv)
    try:
        App(assets=args.assets).run()
    finally:
        pygame.quit()
    return 0