# crossguard

An arcade game about crossing-guard duty. Children file along the pavement
from right to left and must cross a three-lane road where cars keep appearing
at random intervals. You play the guard: walk along the crossing, wave
children on or hold them back, and keep them out of the way of the traffic.

## Installing

```
pip install .
```

The game draws with pygame.

## Playing

```
crossguard
crossguard --assets path/to/assets
```

`--assets` names a directory of images and music. Files are looked up by
relative name, for example `game_bk.jpg`, `menubk.jpg`, `win.png`,
`lose.jpg`, `car/car2.jpg`, `child/child_stand.png`,
`man/standing/Guard46.png` and `bgm1.mp3`. Any file that is missing is
simply left out: sprites are then drawn as coloured rectangles, screens get
a plain grey background, and no music plays.

The main menu offers start, settings, help, about and quit buttons (their
labels are in Chinese). During a game, click the pause button in the
top-right corner to open the pause menu, which adds "continue" and "back to
menu". The settings screen switches the background music on and off; its
back button returns to the menu or pause screen you came from. After a win
you can go back to the menu or quit; after a loss, go back to the menu or
start again.

Controls:

| Key | Action                                       |
|-----|----------------------------------------------|
| A   | walk left                                    |
| D   | walk right                                   |
| J   | tell the child in front of you to walk       |
| K   | tell the child in front of you to stop       |

If several keys are held, J wins over K, K over A, and A over D.

Rules:

- Children come in waves of five, ten in all. A new wave starts only once
  the road is empty.
- A child who reaches the far side earns 200 points. The score also drops by
  one every ten frames while it is above zero, so keep the line moving.
- A walking child stops when it bunches up behind a child that has stopped,
  and follows again when that child moves on.
- A child kept waiting for more than three seconds gets impatient and
  screams, and three seconds later starts walking again whether it is safe
  or not.
- A car crossing the walkway kills any child in its path; a car that
  reaches the guard knocks the guard aside.
- Five deaths and the game is lost. Once every child is gone, you win if the
  score has reached the goal of 800, and lose otherwise.

The game advances one frame every 50 milliseconds.

## Using the game logic

The rules run without a window. `crossguard.game.Game` holds a round;
`Game.tick(now, keys)` advances it one frame, where `now` is a time in
milliseconds and `keys` the held keys (`"j"`, `"k"`, `"a"`, `"d"`), and
returns an `Outcome` (`PLAYING`, `WIN` or `LOSE`). Pass a `random.Random`
to `Game` for repeatable traffic. `crossguard.render.Renderer` draws a game
onto any pygame surface, and `crossguard.app.transition` gives the screen
that a button leads to.

## What it does not do

- No images, sounds or help text come with the package; the help and about
  screens show only what is in the assets directory.
- The settings screen has nothing besides the music switch.
- Scores are not saved between rounds.

## Running the tests

```
pip install .[test]
pytest
```