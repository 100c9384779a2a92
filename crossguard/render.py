"""Drawing the game onto a pygame surface."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import pygame

from crossguard.car import Car
from crossguard.config import (
    DEATH_POS,
    GOAL,
    KID_Y,
    PASS_POS,
    SCORE_POS,
    TOTAL_SCORE_POS,
    WAIT_POS,
    WINDOW_WIDTH,
)
from crossguard.game import Game, format_counter
from crossguard.kid import Kid, KidAction, KidStatus
from crossguard.player import Player, PlayerAction

Colour = Tuple[int, int, int]

BLACK: Colour = (0, 0, 0)
BROWN: Colour = (170, 85, 0)
YELLOW: Colour = (255, 255, 85)
BACKGROUND: Colour = (191, 187, 177)
CAR_COLOUR: Colour = (200, 30, 30)
PLAYER_COLOUR: Colour = (30, 90, 160)
KID_COLOURS: Dict[KidAction, Colour] = {
    KidAction.MOVE: (60, 120, 220),
    KidAction.STOP: (230, 200, 40),
    KidAction.FUSS: (230, 120, 40),
    KidAction.DEAD: (120, 0, 0),
}

KID_SIZE = (60, 80)
PLAYER_SIZE = (100, 130)
CAR_SIZE = (135, 105)
PLAYER_DRAW_Y = 480
PAUSE_LABEL = "暂停"
PAUSE_BUTTON = (WINDOW_WIDTH - 120, 0, 120, 60)
TEXT_SIZE = 30


class Renderer:
    """Draws game state, using images from an asset directory when present."""

    def __init__(self, surface: pygame.Surface, assets: Optional[Union[str, Path]] = None) -> None:
        pygame.font.init()
        self.surface = surface
        self.assets = Path(assets) if assets is not None else None
        self._font = pygame.font.Font(None, TEXT_SIZE)
        self._pause_font = pygame.font.Font(None, 60)
        self._images: Dict[Tuple[str, Optional[Tuple[int, int]]], Optional[pygame.Surface]] = {}

    def _image(self, relative: str, size: Optional[Tuple[int, int]]) -> Optional[pygame.Surface]:
        key = (relative, size)
        if key not in self._images:
            self._images[key] = self._load(relative, size)
        return self._images[key]

    def _load(self, relative: str, size: Optional[Tuple[int, int]]) -> Optional[pygame.Surface]:
        if self.assets is None:
            return None
        path = self.assets / relative
        if not path.is_file():
            return None
        try:
            image = pygame.image.load(str(path))
        except pygame.error:
            return None
        if size is not None:
            image = pygame.transform.scale(image, size)
        # Sprites were drawn on black, which counts as transparent.
        image.set_colorkey(BLACK)
        return image

    def _sprite(self, relative: str, size: Tuple[int, int], pos: Tuple[int, int], fallback: Colour) -> None:
        image = self._image(relative, size)
        if image is not None:
            self.surface.blit(image, pos)
        else:
            pygame.draw.rect(self.surface, fallback, pygame.Rect(pos, size))

    def _text(self, text: str, pos: Tuple[int, int], font: Optional[pygame.font.Font] = None) -> None:
        rendered = (font or self._font).render(text, True, BLACK)
        self.surface.blit(rendered, pos)

    def draw(self, game: Game) -> None:
        """Draw a whole frame of the game."""
        background = self._image("game_bk.jpg", None)
        if background is not None:
            self.surface.blit(background, (0, 0))
        else:
            self.surface.fill(BACKGROUND)
        for car in game.traffic.cars:
            self.draw_car(car)
        self.draw_player(game.player)
        for kid in game.kids:
            if kid.status is KidStatus.LIVE:
                self.draw_kid(kid)
        self.draw_hud(game)

    def draw_hud(self, game: Game) -> None:
        """Draw the counters and the pause button."""
        lines = (
            (f"Score: {game.score}", SCORE_POS),
            (f"目标分数: {GOAL}", TOTAL_SCORE_POS),
            (f"死亡数: {game.dead}", DEATH_POS),
            (format_counter(game.passed), PASS_POS),
            (format_counter(game.waiting), WAIT_POS),
        )
        for text, pos in lines:
            self._text(text, pos)
        button = pygame.Rect(PAUSE_BUTTON)
        pygame.draw.rect(self.surface, BROWN, button)
        label = self._pause_font.render(PAUSE_LABEL, True, YELLOW)
        self.surface.blit(label, label.get_rect(center=button.center))

    def draw_kid(self, kid: Kid) -> None:
        """Draw one child according to what it is doing."""
        suffix = "_s" if kid.selected else ""
        pos = (kid.x, KID_Y)
        if kid.action is KidAction.MOVE:
            name = f"child/child_move/move{kid.frame + 1}{suffix}.png"
        elif kid.action is KidAction.STOP:
            name = f"child/child_stand{suffix}.png"
        elif kid.action is KidAction.FUSS:
            name = f"child/child_scream{suffix}.png"
        else:
            name = "child/child_death.png"
            pos = (kid.x, int(kid.y))
        self._sprite(name, KID_SIZE, pos, KID_COLOURS[kid.action])
        if kid.selected and self._image(name, KID_SIZE) is None:
            pygame.draw.rect(self.surface, YELLOW, pygame.Rect(pos, KID_SIZE), 3)

    def draw_car(self, car: Car) -> None:
        """Draw one car."""
        self._sprite("car/car2.jpg", CAR_SIZE, (car.x, car.y), CAR_COLOUR)

    def draw_player(self, player: Player) -> None:
        """Draw the guard in the pose of his current action."""
        action = player.action
        if action is PlayerAction.LEFT:
            name = f"man/move_left/Guard{46 + player.left_frame}.png"
        elif action is PlayerAction.RIGHT:
            name = f"man/move_right/Guard{54 + player.right_frame}.png"
        elif action is PlayerAction.MOVE_COMMAND:
            name = "man/move_command/Guard71.png"
        elif action is PlayerAction.STOP_COMMAND:
            name = "man/stop_command/Guard1.png"
        elif action is PlayerAction.HIT_LEFT:
            name = f"man/be_hit/be_hit_left/Guard{36 + player.hit_left_frame}.png"
        elif action is PlayerAction.HIT_RIGHT:
            name = f"man/be_hit/be_hit_right/Guard{35 + player.hit_right_frame}.png"
        else:
            name = "man/standing/Guard46.png"
        self._sprite(name, PLAYER_SIZE, (player.x, PLAYER_DRAW_Y), PLAYER_COLOUR)