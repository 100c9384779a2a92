"""Cars driving down the three lanes and what they run into."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Sequence

from crossguard.config import CAR_SPEED, ROAD_BOTTOM, ROAD_TOP, WIDTH
from crossguard.kid import Kid, KidAction, KidStatus
from crossguard.player import Player, PlayerAction

CAR_WIDTH = WIDTH * 3
CAR_HEIGHT = 40
CAR_HIT_WIDTH = 93
CAR_TIME_MIN = 8000
CAR_TIME_MAX = 12000
CAR_Y0 = 300
CAR_END = 900
ROUTE_TOP = 300
ROUTE_BOTTOM = 550


def _lane_x(offset: int) -> int:
    # Truncates toward zero, as the lane layout was specified.
    return int((100 - CAR_WIDTH) / 2) + offset


CAR_X1 = _lane_x(450)
CAR_X2 = _lane_x(550)
CAR_X3 = _lane_x(650)


class Lane(IntEnum):
    """The three lanes of the road."""

    LEFT = -1
    MID = 0
    RIGHT = 1


_LANE_START = {Lane.LEFT: CAR_X1, Lane.MID: CAR_X2, Lane.RIGHT: CAR_X3}


@dataclass
class Car:
    """A car coming down one lane towards the crossing."""

    lane: Lane
    x: int = field(init=False)
    y: int = CAR_Y0
    active: bool = True
    width: int = CAR_HIT_WIDTH

    def __post_init__(self) -> None:
        self.lane = Lane(self.lane)
        self.x = _LANE_START[self.lane]

    def route(self) -> None:
        """Steer the outer lanes outwards while on the slanted stretch."""
        if not ROUTE_TOP <= self.y <= ROUTE_BOTTOM:
            return
        drift = (self.y - 200) // 5
        if self.lane is Lane.LEFT:
            self.x = CAR_X1 - drift
        elif self.lane is Lane.RIGHT:
            self.x = CAR_X3 + drift

    def move(self) -> None:
        """Drive one frame down the road."""
        self.y += CAR_SPEED

    def is_arriving(self) -> bool:
        """True while the car's front is across the crossing."""
        return ROAD_TOP <= self.y + CAR_HEIGHT <= ROAD_BOTTOM

    def hit_player(self, player: Player) -> bool:
        """Knock the guard aside if the car overlaps him; report whether it did."""
        reach = self.width // 2 + player.width // 2
        gap = self.x - player.x
        if 0 < gap < reach:
            player.action = PlayerAction.HIT_LEFT
            return True
        if 0 < -gap < reach:
            player.action = PlayerAction.HIT_RIGHT
            return True
        return False

    def hit_kids(self, kids: Sequence[Kid], now: float) -> int:
        """Run over living children in the car's path; return how many newly died."""
        deaths = 0
        low = self.x - CAR_WIDTH // 2 + 15
        high = self.x + CAR_WIDTH // 2 + 20
        for kid in kids:
            if kid.status is KidStatus.LIVE and low < kid.x < high:
                if kid.action is not KidAction.DEAD:
                    deaths += 1
                    kid.action = KidAction.DEAD
                kid.hit_time = now
        return deaths


@dataclass
class LaneTimer:
    """Decides when the next car enters a lane.

    The check compares against the time seen on the previous call, so a car
    appears one frame after its interval has run out.
    """

    rng: random.Random = field(default_factory=random.Random)
    last_fire: float = 0.0
    last_seen: float = 0.0
    interval: int = field(init=False)

    def __post_init__(self) -> None:
        self.interval = self._draw()

    def _draw(self) -> int:
        return self.rng.randint(CAR_TIME_MIN, CAR_TIME_MAX)

    def due(self, now: float) -> bool:
        """True when a new car should enter the lane."""
        if self.last_seen - self.last_fire > self.interval:
            self.last_fire = self.last_seen
            self.interval = self._draw()
            return True
        self.last_seen = now
        return False


@dataclass
class Traffic:
    """All cars on the road and the timers that release them."""

    rng: random.Random = field(default_factory=random.Random)
    cars: List[Car] = field(default_factory=list)
    timers: Dict[Lane, LaneTimer] = field(init=False)

    def __post_init__(self) -> None:
        self.timers = {lane: LaneTimer(self.rng) for lane in Lane}

    def update(self, player: Player, kids: Sequence[Kid], now: float) -> int:
        """Advance every car one frame; return how many children died."""
        for lane, timer in self.timers.items():
            if timer.due(now):
                self.cars.append(Car(lane))

        deaths = 0
        remaining: List[Car] = []
        for car in self.cars:
            if car.y > CAR_END:
                car.active = False
            if not car.active:
                continue
            car.move()
            car.route()
            if car.is_arriving():
                car.hit_player(player)
                deaths += car.hit_kids(kids, now)
            remaining.append(car)
        self.cars = remaining
        return deaths

    def clear(self) -> None:
        """Remove every car from the road."""
        self.cars.clear()