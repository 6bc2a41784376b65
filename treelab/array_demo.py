"""Small demonstration of sequences of numbers and of cubes."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

from .cube import Cube

PRIMES = (2, 3, 5, 7, 11, 13, 15, 17, 21, 23)


def find_target(cubes: Iterable[Cube], target: Cube) -> list[int]:
    """Return the positions of every cube equal to ``target``."""
    return [index for index, cube in enumerate(cubes) if target == cube]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the fourth listed value, then grow a list of cubes and search it."""
    parser = argparse.ArgumentParser(
        prog="array-demo",
        description="Show indexing into sequences and searching a list of cubes.",
    )
    parser.parse_args(argv)

    print(PRIMES[3])

    cubes = [Cube(11), Cube(42), Cube(400)]
    print(f"Initial size: {len(cubes)}")
    cubes.append(Cube(800))
    print(f"Size after adding: {len(cubes)}")

    for index in find_target(cubes, Cube(400)):
        print(f"Found target at [{index}]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())