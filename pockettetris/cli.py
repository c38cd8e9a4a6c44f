"""Terminal front end: each input line is a batch of key presses followed by one fall step."""

from __future__ import annotations

import argparse
import random
import sys

from .game import BUTTON_DELAY, FALL_INTERVAL, Button, Game

_KEYMAP = {
    "a": Button.LEFT,
    "h": Button.LEFT,
    "d": Button.RIGHT,
    "l": Button.RIGHT,
    "w": Button.ROTATE,
    "k": Button.ROTATE,
    "r": Button.ROTATE,
    "s": Button.DROP,
    "j": Button.DROP,
    " ": Button.DROP,
}

_HELP = "keys: a/h left, d/l right, w/k/r rotate, s/j/space drop, q quit; Enter advances"


def key_to_button(key: str) -> Button | None:
    """Map a single key to a button, or None if the key is not bound."""
    return _KEYMAP.get(key.lower())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pockettetris", description="Play falling blocks.")
    parser.add_argument("--seed", type=int, default=None, help="seed for piece selection")
    args = parser.parse_args(argv)

    game = Game(rng=random.Random(args.seed))
    now = 0
    print(_HELP)
    print(game.render())
    for line in sys.stdin:
        for key in line.rstrip("\r\n"):
            if key.lower() == "q":
                return 0
            button = key_to_button(key)
            if button is None:
                continue
            now += BUTTON_DELAY + 1
            game.press(button, now)
        now += FALL_INTERVAL + 1
        game.tick(now)
        print()
        print(game.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())