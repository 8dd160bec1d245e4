from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from .interpolate import Point, interpolate2d, pairs

# (x1, y1, x2, y2, t) -> (x, y)
PointEvaluator = Callable[[float, float, float, float, float], Point]

START: Point = (0.0, 0.0)
END: Point = (1.0, 1.0)


class UnknownStrategy(KeyError):
    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


def evaluate_point_direct(x1: float, y1: float, x2: float, y2: float, t: float) -> Point:
    """Cubic Bezier through (0,0), (x1,y1), (x2,y2), (1,1), unrolled by hand."""
    p1 = (x1, y1)
    p2 = (x2, y2)

    q0 = interpolate2d(START, p1, t)
    q1 = interpolate2d(p1, p2, t)
    q2 = interpolate2d(p2, END, t)

    r0 = interpolate2d(q0, q1, t)
    r1 = interpolate2d(q1, q2, t)

    return interpolate2d(r0, r1, t)


def de_casteljau(points: Sequence[Point], t: float) -> Point:
    """Evaluate a Bezier curve of any degree at t.

    The control polygon is reduced by pairwise interpolation until a single
    point remains.
    """
    if not points:
        raise ValueError("de_casteljau requires at least one control point")
    level: List[Point] = list(points)
    while len(level) > 1:
        level = [interpolate2d(p, q, t) for p, q in pairs(level)]
    return level[0]


def evaluate_point_de_casteljau(x1: float, y1: float, x2: float, y2: float, t: float) -> Point:
    return de_casteljau([START, (x1, y1), (x2, y2), END], t)


EVALUATORS: Dict[str, PointEvaluator] = {
    "direct": evaluate_point_direct,
    "de_casteljau": evaluate_point_de_casteljau,
}

# Default point evaluator
evaluate_point = evaluate_point_direct


def get_evaluator(name: str) -> PointEvaluator:
    try:
        return EVALUATORS[name]
    except KeyError:
        raise UnknownStrategy(f"Unknown point evaluator: {name!r}") from None
