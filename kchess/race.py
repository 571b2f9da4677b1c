"""A two-car race drawn as rows of stars, frame by frame."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterator, Sequence

CAR1 = (2, 7, 13, 17, 22, 26, 30)
CAR2 = (3, 4, 9, 16, 21, 27, 30)
_DIVIDER = "-" * 35


def render_cars(car1: int, car2: int) -> str:
    """Return one frame showing how far each car has come."""
    return f"CAR #1: {'*' * car1}\nCAR #2: {'*' * car2}\n{_DIVIDER}\n"


def race_frames(car1: Sequence[int], car2: Sequence[int]) -> Iterator[str]:
    """Yield a frame for each pair of positions; the sequences must match in length."""
    for first, second in zip(car1, car2, strict=True):
        yield render_cars(first, second)


def main(argv: list[str] | None = None) -> int:
    """Play the race on standard output."""
    parser = argparse.ArgumentParser(prog="kchess-race", description="Show a two-car race.")
    parser.add_argument("--delay", type=float, default=0.5, help="seconds between frames")
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must not be negative")
    for frame in race_frames(CAR1, CAR2):
        sys.stdout.write(frame)
        sys.stdout.flush()
        time.sleep(args.delay)
    return 0


if __name__ == "__main__":
    sys.exit(main())