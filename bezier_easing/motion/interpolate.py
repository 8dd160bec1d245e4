from __future__ import annotations

from typing import Iterator, Sequence, Tuple, TypeVar

Point = Tuple[float, float]

T = TypeVar("T")


def lerp(a: float, b: float, v: float) -> float:
    return a + v * (b - a)


def interpolate2d(p: Point, q: Point, v: float) -> Point:
    """Linear interpolation between two points, each axis independently."""
    return (lerp(p[0], q[0], v), lerp(p[1], q[1], v))


def pairs(seq: Sequence[T]) -> Iterator[Tuple[T, T]]:
    # (s0, s1), (s1, s2), ...
    return zip(seq, seq[1:])
