"""The crossing guard controlled by the player."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Collection, Sequence

from crossguard.config import WIDTH
from crossguard.kid import NEVER, Kid, KidAction, select_kid

PLAYER_START_X = 850
PLAYER_SPEED = 10
HIT_STEP = 20
WALK_FRAMES = 8
HIT_FRAMES = 4
LEFT_LIMIT = 50
RIGHT_LIMIT = 1080


class PlayerAction(IntEnum):
    """What the guard is currently doing."""

    STAND = 0
    MOVE_COMMAND = 1
    STOP_COMMAND = 2
    LEFT = 3
    RIGHT = 4
    HIT_LEFT = 5
    HIT_RIGHT = 6


# Checked in this order: the first held key wins.
KEY_BINDINGS = (
    ("j", PlayerAction.MOVE_COMMAND),
    ("k", PlayerAction.STOP_COMMAND),
    ("a", PlayerAction.LEFT),
    ("d", PlayerAction.RIGHT),
)


@dataclass
class Player:
    """The guard standing at the kerb, waving children across."""

    x: int = PLAYER_START_X
    action: PlayerAction = PlayerAction.STAND
    speed: int = PLAYER_SPEED
    width: int = WIDTH
    left_frame: int = 0
    right_frame: int = 0
    hit_left_frame: int = 0
    hit_right_frame: int = 0

    def read_keys(self, keys: Collection[str]) -> PlayerAction:
        """Set the action from the held keys (j, k, a, d) and return it."""
        held = {key.lower() for key in keys}
        self.action = next(
            (action for key, action in KEY_BINDINGS if key in held),
            PlayerAction.STAND,
        )
        return self.action

    def command_move(self, kids: Sequence[Kid]) -> None:
        """Send the child in reach walking."""
        kid = select_kid(kids, self.x)
        if kid is not None:
            kid.action = KidAction.MOVE
            kid.held = False
            kid.stop_since = NEVER
            kid.fuss_since = NEVER

    def command_stop(self, kids: Sequence[Kid], now: float) -> None:
        """Hold the child in reach and start its waiting clock."""
        kid = select_kid(kids, self.x)
        if kid is not None:
            kid.action = KidAction.STOP
            kid.held = True
            kid.stop_since = now

    def step_hit(self) -> None:
        """Play one frame of being knocked aside by a car."""
        if self.action is PlayerAction.HIT_LEFT:
            self.x -= HIT_STEP
            self.hit_left_frame += 1
            if self.hit_left_frame == HIT_FRAMES:
                self.hit_left_frame = 0
                self.action = PlayerAction.STAND
        else:
            self.x += HIT_STEP
            self.hit_right_frame += 1
            if self.hit_right_frame == HIT_FRAMES:
                self.hit_right_frame = 0
                self.action = PlayerAction.STAND

    def walk(self) -> None:
        """Take one step in the current direction, staying on screen."""
        if self.action is PlayerAction.LEFT:
            if self.x >= LEFT_LIMIT:
                self.x -= self.speed
            self.left_frame = (self.left_frame + 1) % WALK_FRAMES
        else:
            if self.x <= RIGHT_LIMIT:
                self.x += self.speed
            self.right_frame = (self.right_frame + 1) % WALK_FRAMES

    def update(self, kids: Sequence[Kid], now: float) -> None:
        """Carry out the current action for one frame."""
        if self.action is PlayerAction.MOVE_COMMAND:
            self.command_move(kids)
        elif self.action is PlayerAction.STOP_COMMAND:
            self.command_stop(kids, now)
        elif self.action in (PlayerAction.LEFT, PlayerAction.RIGHT):
            self.walk()
        elif self.action in (PlayerAction.HIT_LEFT, PlayerAction.HIT_RIGHT):
            self.step_hit()