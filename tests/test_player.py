import pytest

from crossguard.kid import NEVER, Kid, KidAction
from crossguard.player import (
    HIT_FRAMES,
    HIT_STEP,
    LEFT_LIMIT,
    RIGHT_LIMIT,
    WALK_FRAMES,
    Player,
    PlayerAction,
)


@pytest.mark.parametrize(
    "keys, expected",
    [
        ({"j", "a"}, PlayerAction.MOVE_COMMAND),
        ({"k", "d"}, PlayerAction.STOP_COMMAND),
        ({"a", "d"}, PlayerAction.LEFT),
        ({"d"}, PlayerAction.RIGHT),
        (set(), PlayerAction.STAND),
        ({"x"}, PlayerAction.STAND),
        ({"J"}, PlayerAction.MOVE_COMMAND),
    ],
)
def test_read_keys_priority(keys, expected):
    player = Player(action=PlayerAction.HIT_LEFT)
    assert player.read_keys(keys) is expected
    assert player.action is expected


def test_walk_left_and_right():
    player = Player(x=500, speed=10, action=PlayerAction.LEFT)
    player.walk()
    assert player.x == 490
    player.action = PlayerAction.RIGHT
    player.walk()
    assert player.x == 500


def test_walk_stops_at_edges():
    player = Player(x=LEFT_LIMIT - 1, action=PlayerAction.LEFT)
    player.walk()
    assert player.x == LEFT_LIMIT - 1
    player = Player(x=RIGHT_LIMIT + 1, action=PlayerAction.RIGHT)
    player.walk()
    assert player.x == RIGHT_LIMIT + 1


def test_walk_frames_wrap():
    player = Player(x=500, action=PlayerAction.LEFT)
    for _ in range(WALK_FRAMES):
        player.walk()
    assert player.left_frame == 0
    player.walk()
    assert player.left_frame == 1


def test_hit_left_animation_ends_standing():
    player = Player(x=600, action=PlayerAction.HIT_LEFT)
    for _ in range(HIT_FRAMES):
        assert player.action is PlayerAction.HIT_LEFT
        player.step_hit()
    assert player.action is PlayerAction.STAND
    assert player.x == 600 - HIT_FRAMES * HIT_STEP
    assert player.hit_left_frame == 0


def test_hit_right_moves_right():
    player = Player(x=600, action=PlayerAction.HIT_RIGHT)
    player.step_hit()
    assert player.x == 600 + HIT_STEP
    assert player.hit_right_frame == 1


def test_command_move_releases_kid():
    player = Player(x=700)
    kid = Kid(x=700, action=KidAction.STOP, held=True, stop_since=5.0)
    player.command_move([kid])
    assert kid.action is KidAction.MOVE
    assert kid.held is False
    assert kid.stop_since == NEVER
    assert kid.fuss_since == NEVER


def test_command_stop_holds_kid():
    player = Player(x=700)
    kid = Kid(x=710)
    player.command_stop([kid], 1234.0)
    assert kid.action is KidAction.STOP
    assert kid.held is True
    assert kid.stop_since == 1234.0


def test_command_ignores_kid_out_of_reach():
    player = Player(x=700)
    kid = Kid(x=300)
    player.command_stop([kid], 10.0)
    assert kid.action is KidAction.MOVE
    assert kid.held is False


def test_update_dispatches_stop_command():
    player = Player(x=700, action=PlayerAction.STOP_COMMAND)
    kid = Kid(x=700)
    player.update([kid], 42.0)
    assert kid.action is KidAction.STOP
    assert kid.stop_since == 42.0


def test_update_stand_changes_nothing():
    player = Player(x=700)
    kid = Kid(x=700)
    player.update([kid], 42.0)
    assert player.x == 700
    assert kid.action is KidAction.MOVE