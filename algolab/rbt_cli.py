"""Command runner for the red-black tree and a random command generator."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Iterable, Iterator, Optional

from .rbtree import RedBlackTree

DEFAULT_INPUT = "input.in"
DEFAULT_OUTPUT = "output.in"
DEFAULT_COUNT = 100000
MAX_VALUE = 1000001


class InvalidCommandError(ValueError):
    """Raised for a command code outside 0..3; carries the output line for it."""

    def __init__(self, line: str) -> None:
        super().__init__(line)
        self.line = line


def run_commands(lines: Iterable[str]) -> Iterator[str]:
    """Run the command stream and yield one output line per input record.

    The first token is the command count; each command is a code and a value:
    0 remove, 1 insert, 2 find, 3 count of smaller keys.
    """
    tokens = iter(" ".join(lines).split())
    try:
        count = int(next(tokens))
    except StopIteration:
        raise ValueError("missing command count") from None
    yield str(count)
    tree = RedBlackTree()
    for _ in range(count):
        try:
            code = int(next(tokens))
            value = int(next(tokens))
        except StopIteration:
            raise ValueError("input ended before all commands were read") from None
        prefix = f"{code} {value} "
        if code == 0:
            yield prefix + str(int(tree.remove(value)))
        elif code == 1:
            yield prefix + str(int(tree.insert(value, value)))
        elif code == 2:
            yield prefix + str(int(tree.find(value)))
        elif code == 3:
            yield prefix + str(tree.count_less(value))
        else:
            raise InvalidCommandError(prefix + "ERROR: Invalid Command")


def generate_commands(count: int, rng: random.Random) -> Iterator[str]:
    """Yield the count line followed by count random commands."""
    yield str(count)
    for _ in range(count):
        code = rng.randrange(4)
        value = 1 + rng.randrange(MAX_VALUE)
        yield f"{code} {value}"


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run red-black tree commands.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    parser.add_argument(
        "--generate",
        type=int,
        metavar="COUNT",
        help="write COUNT random commands to the input file and stop",
    )
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    if args.generate is not None:
        rng = random.Random(args.seed)
        with open(args.input, "w", encoding="utf-8") as out:
            for line in generate_commands(args.generate, rng):
                out.write(line + "\n")
        return 0

    with open(args.input, encoding="utf-8") as src:
        text = src.read().splitlines()
    with open(args.output, "w", encoding="utf-8") as out:
        try:
            for line in run_commands(text):
                out.write(line + "\n")
        except InvalidCommandError as exc:
            out.write(exc.line)
            return 1
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())