"""Screen geometry, layout and rule constants shared by the whole game."""

from enum import IntEnum

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 750

TOTAL_SCORE_POS = (275, 20)
SCORE_POS = (50, 20)
WAIT_POS = (850, 452)
DEATH_POS = (550, 20)
PASS_POS = (320, 452)
PAUSE_POS = (900, 400)

GOAL = 800
LEFT = 360
RIGHT = 825

KID_X_START = 1250
KID_X_END = 150
KID_SCORE = 200
KID_SPEED = 30
WIDTH = 45
ROAD_TOP = 590
ROAD_BOTTOM = 640
PLAYER_Y = 610
KID_Y = 560
DEAD_MAX = 5

CAR_SPEED = 3

FOUR_TEXT_WIDTH = 200
TWO_TEXT_WIDTH = 100
DEFAULT_HEIGHT = 50


class Screen(IntEnum):
    """The screens the application can show."""

    OVER = -1
    MENU = 0
    SETTING = 1
    GAME = 2
    LOSE = 3
    WIN = 4
    PAUSE = 5
    HELP = 6
    ABOUT = 7