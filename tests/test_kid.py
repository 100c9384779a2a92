import pytest

from crossguard.config import KID_Y, WIDTH
from crossguard.kid import (
    DEATH_DURATION,
    KID_STEP,
    NEVER,
    Kid,
    KidAction,
    KidStatus,
    select_kid,
    update_queue,
)


def test_flag_values_drive_behaviour():
    walker = Kid(600, action=KidAction(1))
    walker.advance(0)
    assert walker.x == 600 - KID_STEP
    assert walker.status.value == 0
    assert select_kid([Kid(500, action=KidAction(4))], 500) is None


def test_new_kid_defaults():
    kid = Kid(1200)
    assert kid.action is KidAction.MOVE
    assert kid.status is KidStatus.LIVE
    assert kid.y == KID_Y
    assert kid.stop_since == NEVER


def test_is_blocked_by_boundary():
    ahead = Kid(500)
    assert Kid(500 + WIDTH).is_blocked_by(ahead)
    assert not Kid(500 + WIDTH + 1).is_blocked_by(ahead)


def test_is_impatient_only_when_stopped_long_enough():
    kid = Kid(500, action=KidAction.STOP, patience=1000, stop_since=0)
    assert not kid.is_impatient(1000)
    assert kid.is_impatient(1001)
    kid.action = KidAction.MOVE
    assert not kid.is_impatient(5000)


def test_is_impatient_false_without_timer():
    kid = Kid(500, action=KidAction.STOP)
    assert not kid.is_impatient(10**9)


def test_fuss_switches_state():
    kid = Kid(500, action=KidAction.STOP, patience=1000, stop_since=0, held=True)
    assert kid.fuss(2000)
    assert kid.action is KidAction.FUSS
    assert kid.held is False
    assert kid.stop_since == NEVER
    assert kid.fuss_since == 2000


def test_fuss_does_nothing_when_patient():
    kid = Kid(500, action=KidAction.STOP, patience=1000, stop_since=0)
    assert not kid.fuss(500)
    assert kid.action is KidAction.STOP


def test_advance_moves_left_and_toggles_frame():
    kid = Kid(600)
    kid.advance(0)
    assert kid.x == 600 - KID_STEP
    assert kid.frame == 1
    kid.advance(0)
    assert kid.x == 600 - 2 * KID_STEP
    assert kid.frame == 0


@pytest.mark.parametrize("action", [KidAction.STOP, KidAction.FUSS])
def test_advance_still_when_not_moving(action):
    kid = Kid(600, action=action)
    kid.advance(0)
    assert kid.x == 600


def test_dead_kid_slides_then_is_removed():
    kid = Kid(600, action=KidAction.DEAD, hit_time=100)
    kid.advance(100)
    assert kid.y > KID_Y
    assert kid.status is KidStatus.LIVE
    kid.advance(100 + DEATH_DURATION)
    assert kid.status is KidStatus.DEAD


def test_select_kid_within_reach():
    kids = [Kid(300), Kid(510), Kid(520)]
    assert select_kid(kids, 500) is kids[1]


def test_select_kid_reach_edges():
    assert select_kid([Kid(490)], 500).x == 490
    assert select_kid([Kid(530)], 500).x == 530
    assert select_kid([Kid(489)], 500) is None
    assert select_kid([Kid(531)], 500) is None


def test_select_kid_skips_dead_and_clears_marks():
    dead = Kid(500, action=KidAction.DEAD, selected=True)
    far = Kid(900, selected=True)
    assert select_kid([dead, far], 500) is None
    assert not dead.selected and not far.selected


def test_queue_follower_stops_behind_stopped_kid():
    front = Kid(500, action=KidAction.STOP, stop_since=0)
    back = Kid(500 + WIDTH)
    update_queue([front, back], 100)
    assert back.action is KidAction.STOP
    assert back.stop_since == 100


def test_queue_follower_keeps_walking_with_space():
    front = Kid(500, action=KidAction.STOP, stop_since=0)
    back = Kid(500 + WIDTH + 1)
    update_queue([front, back], 100)
    assert back.action is KidAction.MOVE


def test_queue_follower_resumes_when_front_moves():
    front = Kid(500)
    back = Kid(510, action=KidAction.STOP, stop_since=0)
    update_queue([front, back], 100)
    assert back.action is KidAction.MOVE


def test_held_kid_does_not_follow():
    front = Kid(500)
    back = Kid(510, action=KidAction.STOP, stop_since=0, held=True)
    update_queue([front, back], 100)
    assert back.action is KidAction.STOP


def test_queue_does_not_stop_behind_dead_kid():
    front = Kid(500, action=KidAction.DEAD)
    back = Kid(510)
    update_queue([front, back], 100)
    assert back.action is KidAction.MOVE


def test_impatient_kid_fusses_then_walks():
    kid = Kid(500, action=KidAction.STOP, patience=1000, stop_since=0, held=True)
    update_queue([kid], 1500)
    assert kid.action is KidAction.FUSS
    update_queue([kid], 2500)
    assert kid.action is KidAction.FUSS
    update_queue([kid], 2501)
    assert kid.action is KidAction.MOVE
    assert kid.fuss_since == NEVER
    assert kid.held is False


def test_update_queue_empty():
    kids: list = []
    update_queue(kids, 0)
    assert kids == []