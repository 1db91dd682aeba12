"""Summaries of cycle or tick counts collected around repeated operations."""

from __future__ import annotations

from collections.abc import Sequence

_U64 = (1 << 64) - 1


def median(values: Sequence[int]) -> int:
    """Integer median; the mean of the two middle values, rounded down, for even counts."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("median of an empty sequence")
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) // 2


def average(values: Sequence[int]) -> int:
    """Integer mean, rounded down."""
    values = list(values)
    if not values:
        raise ValueError("average of an empty sequence")
    return sum(values) // len(values)


def _durations(timestamps: Sequence[int], overhead: int) -> list[int]:
    stamps = list(timestamps)
    if len(stamps) < 2:
        raise ValueError("need at least two cycle counts")
    return [(after - before - overhead) & _U64 for before, after in zip(stamps, stamps[1:])]


def format_results(label: str, timestamps: Sequence[int], overhead: int = 0) -> str:
    """Describe the intervals between successive timestamps, less the measuring overhead."""
    durations = _durations(timestamps, overhead)
    return (
        f"{label}\n"
        f"median: {median(durations)} cycles/ticks\n"
        f"average: {average(durations)} cycles/ticks\n"
        "\n"
    )


def print_results(label: str, timestamps: Sequence[int], overhead: int = 0) -> None:
    """Print the summary produced by :func:`format_results`."""
    print(format_results(label, timestamps, overhead), end="")