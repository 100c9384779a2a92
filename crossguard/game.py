"""One round of the crossing game: children, traffic, the guard and the score."""

from __future__ import annotations

import random
from collections import deque
from enum import Enum
from typing import Collection, List, Optional

from crossguard.car import Traffic
from crossguard.config import DEAD_MAX, GOAL, KID_SCORE, KID_X_END
from crossguard.kid import Kid, KidAction, KidStatus, select_kid, update_queue
from crossguard.player import PLAYER_START_X, Player

KIDS_TOTAL = 10
KIDS_PER_BATCH = 5
SPAWN_X = 1200
SPAWN_GAP = 50
SPAWN_PATIENCE = 3000
SCORE_DECAY_EVERY = 10
FRAME_MS = 50


class Outcome(Enum):
    """How the round stands after a frame."""

    PLAYING = "playing"
    WIN = "win"
    LOSE = "lose"


class Game:
    """State of a round and the rules that advance it frame by frame."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.player = Player()
        self.traffic = Traffic(self.rng)
        self.kids: List[Kid] = []
        self.score = 0
        self.waiting = KIDS_TOTAL
        self.passed = 0
        self.dead = 0
        self.frame = 0
        self.reset()

    def reset(self) -> None:
        """Start a fresh round."""
        self.score = 0
        self.waiting = KIDS_TOTAL
        self.passed = 0
        self.dead = 0
        self.frame = 0
        self.kids.clear()
        self.traffic.clear()
        self.player.x = PLAYER_START_X

    def spawn_kids(self) -> None:
        """Send the next batch of children once the road is empty."""
        if self.kids or not self.waiting:
            return
        for offset in range(KIDS_PER_BATCH):
            self.kids.append(
                Kid(SPAWN_X + SPAWN_GAP * offset, KidAction.MOVE, KidStatus.LIVE, SPAWN_PATIENCE)
            )
            self.waiting -= 1

    def update_kids(self, now: float) -> None:
        """Move the queue one frame, scoring arrivals and clearing finished children."""
        if self.kids:
            update_queue(self.kids, now)
        pending = deque(self.kids)
        kept: List[Kid] = []
        while pending:
            kid = pending.popleft()
            if kid.x <= KID_X_END:
                kid.status = KidStatus.ARRIVED
                self.passed += 1
                self.score += KID_SCORE
            if kid.status is not KidStatus.LIVE:
                continue
            chosen = select_kid([*kept, kid, *pending], self.player.x)
            if chosen is not None:
                chosen.selected = True
            kid.advance(now)
            kept.append(kid)
        self.kids = kept

    def tick(self, now: float, keys: Collection[str] = ()) -> Outcome:
        """Run one frame with the given held keys and return the outcome."""
        self.spawn_kids()
        self.player.read_keys(keys)
        self.dead += self.traffic.update(self.player, self.kids, now)
        self.player.update(self.kids, now)
        self.frame += 1
        if self.score > 0 and self.frame % SCORE_DECAY_EVERY == 1:
            self.score -= 1
        result = self.outcome()
        if result is Outcome.PLAYING:
            self.update_kids(now)
        return result

    def outcome(self) -> Outcome:
        """Decide whether the round is won, lost or still going."""
        if self.dead >= DEAD_MAX:
            return Outcome.LOSE
        if not self.kids and not self.waiting:
            return Outcome.LOSE if self.score < GOAL else Outcome.WIN
        return Outcome.PLAYING


def format_counter(value: int) -> str:
    """Show a counter with at least two characters, padding with a zero."""
    text = str(value)
    return text if len(text) >= 2 else "0" + text