"""Shared pieces of the benchmark commands: dataset sizes, array dumps, options."""

from __future__ import annotations

import argparse
from enum import Enum
from typing import Iterable, Sequence, Tuple, Union

DUMP_START = "==BEGIN DUMP_ARRAYS==\n"
DUMP_FINISH = "==END   DUMP_ARRAYS==\n"
VALUES_PER_LINE = 20


class Dataset(Enum):
    """Problem-size classes shared by every kernel."""

    MINI = "MINI"
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"
    EXTRALARGE = "EXTRALARGE"


DEFAULT_DATASET = Dataset.MEDIUM


def parse_dataset(name: Union[str, Dataset]) -> Dataset:
    """Return the dataset named by ``name``, ignoring case."""
    if isinstance(name, Dataset):
        return name
    try:
        return Dataset[str(name).strip().upper()]
    except KeyError:
        choices = ", ".join(member.value for member in Dataset)
        raise ValueError(f"dataset must be one of: {choices}") from None


def format_dump(
    name: str,
    items: Iterable[Tuple[int, Union[float, str]]],
    newline_after: bool,
) -> str:
    """Format one array section of a dump.

    ``items`` yields ``(position, value)`` pairs. A line break is written
    wherever ``position`` is a multiple of 20: before the value, or after it
    when ``newline_after`` is true. Numbers are written with two decimals and
    a trailing space; strings are written as they are.
    """
    parts = [f"begin dump: {name}"]
    for position, value in items:
        text = value if isinstance(value, str) else f"{value:0.2f} "
        newline = "\n" if position % VALUES_PER_LINE == 0 else ""
        parts.append(text + newline if newline_after else newline + text)
    parts.append(f"\nend   dump: {name}\n")
    return "".join(parts)


def parse_args(argv: Sequence[str] | None, prog: str) -> argparse.Namespace:
    """Parse the options common to every benchmark command."""
    parser = argparse.ArgumentParser(
        prog=prog, description=f"Run the {prog} benchmark kernel."
    )
    parser.add_argument(
        "--dataset",
        type=parse_dataset,
        default=DEFAULT_DATASET,
        help="problem size: MINI, SMALL, MEDIUM, LARGE or EXTRALARGE",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="write the live-out arrays to standard error",
    )
    parser.add_argument(
        "--time",
        action="store_true",
        help="print the kernel's execution time in seconds",
    )
    return parser.parse_args(argv)