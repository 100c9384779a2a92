"""Children crossing the road: their state and queue behaviour."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Sequence

from crossguard.config import CAR_SPEED, KID_Y, WIDTH

KID_STEP = 3
KID_PATIENCE = 3000
DEATH_DURATION = 3000
DEATH_SLIDE = 2 * (CAR_SPEED - 1.3)
SELECT_BEHIND = 10
SELECT_AHEAD = 30
NEVER = math.inf


class KidAction(IntEnum):
    """What a child is currently doing."""

    MOVE = 1
    STOP = 2
    FUSS = 3
    DEAD = 4


class KidStatus(IntEnum):
    """Whether a child is still on the road."""

    LIVE = 0
    DEAD = 1
    ARRIVED = 2


@dataclass
class Kid:
    """A child walking leftwards across the crossing.

    Times are in milliseconds; ``NEVER`` marks a timer that is not running.
    """

    x: int
    action: KidAction = KidAction.MOVE
    status: KidStatus = KidStatus.LIVE
    patience: int = KID_PATIENCE
    y: float = float(KID_Y)
    selected: bool = False
    held: bool = False
    hit_time: float = 0.0
    stop_since: float = NEVER
    fuss_since: float = NEVER
    frame: int = 0

    def is_impatient(self, now: float) -> bool:
        """True once a stopped child has waited longer than its patience."""
        return self.action is KidAction.STOP and now - self.stop_since > self.patience

    def fuss(self, now: float) -> bool:
        """Turn an impatient stopped child into a fussing one; report whether it did."""
        if not self.is_impatient(now):
            return False
        self.action = KidAction.FUSS
        self.held = False
        self.stop_since = NEVER
        self.fuss_since = now
        return True

    def is_blocked_by(self, ahead: Kid) -> bool:
        """True when the child ahead is within one body width."""
        return self.x - ahead.x <= WIDTH

    def advance(self, now: float) -> None:
        """Advance the child by one frame."""
        if self.action is KidAction.MOVE:
            self.frame = 1 - self.frame
            self.x -= KID_STEP
        elif self.action is KidAction.DEAD:
            if now - self.hit_time < DEATH_DURATION:
                self.y += DEATH_SLIDE
            else:
                self.status = KidStatus.DEAD


def select_kid(kids: Sequence[Kid], player_x: int) -> Optional[Kid]:
    """Return the first living child in reach of the player, or None.

    Children passed over on the way lose their selection mark.
    """
    for kid in kids:
        if (
            player_x - SELECT_BEHIND <= kid.x <= player_x + SELECT_AHEAD
            and kid.action is not KidAction.DEAD
        ):
            return kid
        kid.selected = False
    return None


def update_queue(kids: Sequence[Kid], now: float) -> None:
    """Apply one frame of queue rules: following, bunching up and fussing."""
    ahead: Optional[Kid] = None
    for kid in kids:
        if ahead is not None:
            both_live = ahead.status is KidStatus.LIVE and kid.status is KidStatus.LIVE
            if (
                not kid.held
                and kid.action is KidAction.STOP
                and kid.is_blocked_by(ahead)
                and ahead.action is KidAction.MOVE
                and both_live
            ):
                kid.action = KidAction.MOVE
            if (
                kid.action is KidAction.MOVE
                and kid.is_blocked_by(ahead)
                and ahead.action is not KidAction.MOVE
                and ahead.action is not KidAction.DEAD
                and both_live
            ):
                kid.action = KidAction.STOP
                kid.stop_since = now

        kid.fuss(now)

        if kid.action is KidAction.FUSS and now - kid.fuss_since > kid.patience:
            kid.fuss_since = NEVER
            kid.held = False
            kid.action = KidAction.MOVE
        ahead = kid