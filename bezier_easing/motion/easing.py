from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple, Union

from ..config import get_config
from .evaluator import PointEvaluator, UnknownStrategy, evaluate_point, get_evaluator
from .interpolate import Point

log = logging.getLogger(__name__)

STEPS = 8
EPSILON = 0.00075
EPSILON_STEP_LIMIT = 64

EasingFn = Callable[[float], float]

# Named CSS timing functions as (x1, y1, x2, y2)
PRESETS: Dict[str, Tuple[float, float, float, float]] = {
    "linear": (0.0, 0.0, 1.0, 1.0),
    "ease": (0.25, 0.1, 0.25, 1.0),
    "ease-in": (0.42, 0.0, 1.0, 1.0),
    "ease-out": (0.0, 0.0, 0.58, 1.0),
    "ease-in-out": (0.42, 0.0, 0.58, 1.0),
}


class EasingError(ValueError):
    pass


class InvalidControlPoint(EasingError):
    pass


class OutOfRange(EasingError):
    pass


def linear(u: float) -> float:
    if u <= 0.0:
        return 0.0
    if u >= 1.0:
        return 1.0
    return u


@dataclass(frozen=True)
class ControlPoints:
    # Interior control points; start is (0,0) end is (1,1)
    x1: float
    y1: float
    x2: float
    y2: float

    def validate(self) -> "ControlPoints":
        """Raise InvalidControlPoint unless x(t) is guaranteed monotonic."""
        for name, value in (("x1", self.x1), ("x2", self.x2)):
            if not 0.0 <= value <= 1.0:
                raise InvalidControlPoint(f"{name}={value} outside [0, 1]")
        return self

    def point(self, t: float, evaluator: PointEvaluator = evaluate_point) -> Point:
        return evaluator(self.x1, self.y1, self.x2, self.y2, t)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)


@dataclass(frozen=True)
class SearchResult:
    t: float
    x: float
    y: float
    steps: int


def bisect(
    points: ControlPoints,
    time: float,
    evaluator: PointEvaluator = evaluate_point,
    max_steps: Optional[int] = None,
    epsilon: Optional[float] = None,
) -> SearchResult:
    """Bisect t in [0, 1] until x(t) matches ``time``.

    Stops after ``max_steps`` evaluations or once ``|time - x| < epsilon``,
    whichever comes first. At least one limit must be given. Assumes x(t) is
    non-decreasing, which holds when x1 and x2 lie in [0, 1].
    """
    if max_steps is None and epsilon is None:
        raise ValueError("bisect needs max_steps, epsilon or both")

    t_min, t_max = 0.0, 1.0
    steps = 0
    while True:
        t_mid = (t_min + t_max) / 2
        x, y = points.point(t_mid, evaluator)
        steps += 1
        if epsilon is not None and abs(time - x) < epsilon:
            break
        if max_steps is not None and steps >= max_steps:
            break
        if x < time:
            t_min = t_mid
        else:
            t_max = t_mid
    return SearchResult(t_mid, x, y, steps)


@dataclass(frozen=True)
class BezierEasing:
    """Control points plus the search that maps time to progress.

    Instances are callable: ``easing(time) -> y``. ``solve`` returns the full
    SearchResult for callers that need t, x or the step count.
    """

    points: ControlPoints
    evaluator: PointEvaluator = evaluate_point
    strict: bool = False

    def __post_init__(self):
        if self.strict:
            self.points.validate()

    def __call__(self, time: float) -> float:
        return self.solve(time).y

    def solve(self, time: float) -> SearchResult:
        if self.strict and not 0.0 <= time <= 1.0:
            raise OutOfRange(f"time={time} outside [0, 1]")
        return self._search(time)

    def _search(self, time: float) -> SearchResult:
        raise NotImplementedError


@dataclass(frozen=True)
class FixedStepEasing(BezierEasing):
    """Always performs exactly ``steps`` bisections."""

    steps: int = STEPS

    def _search(self, time: float) -> SearchResult:
        return bisect(self.points, time, self.evaluator, max_steps=self.steps)


@dataclass(frozen=True)
class EpsilonEasing(BezierEasing):
    epsilon: float = EPSILON
    step_limit: int = EPSILON_STEP_LIMIT

    def _search(self, time: float) -> SearchResult:
        res = bisect(self.points, time, self.evaluator, max_steps=self.step_limit, epsilon=self.epsilon)
        if abs(time - res.x) >= self.epsilon:
            log.warning(
                f"Epsilon search hit {self.step_limit} steps without converging "
                f"(time={time}, x={res.x}, points={self.points.as_tuple()})"
            )
        return res


@dataclass(frozen=True)
class HybridEasing(BezierEasing):
    """Stops on ``steps`` bisections or ``epsilon`` precision, whichever is first."""

    steps: int = STEPS
    epsilon: float = EPSILON

    def _search(self, time: float) -> SearchResult:
        return bisect(self.points, time, self.evaluator, max_steps=self.steps, epsilon=self.epsilon)


def _resolve_evaluator(evaluator: Union[str, PointEvaluator, None]) -> PointEvaluator:
    if evaluator is None:
        return get_evaluator(get_config().default_evaluator)
    if isinstance(evaluator, str):
        return get_evaluator(evaluator)
    return evaluator


def make_easing_fixed(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    evaluator: Union[str, PointEvaluator, None] = None,
    strict: Optional[bool] = None,
) -> FixedStepEasing:
    cfg = get_config()
    return FixedStepEasing(
        ControlPoints(x1, y1, x2, y2),
        evaluator=_resolve_evaluator(evaluator),
        strict=cfg.strict if strict is None else strict,
        steps=cfg.max_steps,
    )


def make_easing_epsilon(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    evaluator: Union[str, PointEvaluator, None] = None,
    strict: Optional[bool] = None,
) -> EpsilonEasing:
    cfg = get_config()
    return EpsilonEasing(
        ControlPoints(x1, y1, x2, y2),
        evaluator=_resolve_evaluator(evaluator),
        strict=cfg.strict if strict is None else strict,
        epsilon=cfg.epsilon,
        step_limit=cfg.epsilon_step_limit,
    )


def make_easing_hybrid(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    evaluator: Union[str, PointEvaluator, None] = None,
    strict: Optional[bool] = None,
) -> HybridEasing:
    cfg = get_config()
    return HybridEasing(
        ControlPoints(x1, y1, x2, y2),
        evaluator=_resolve_evaluator(evaluator),
        strict=cfg.strict if strict is None else strict,
        steps=cfg.max_steps,
        epsilon=cfg.epsilon,
    )


STRATEGIES: Dict[str, Callable[..., BezierEasing]] = {
    "fixed": make_easing_fixed,
    "epsilon": make_easing_epsilon,
    "hybrid": make_easing_hybrid,
}


def make_easing(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    strategy: Optional[str] = None,
    evaluator: Union[str, PointEvaluator, None] = None,
    strict: Optional[bool] = None,
) -> BezierEasing:
    """Return ``time -> y`` for the given control points.

    ``strategy`` is one of "fixed", "epsilon" or "hybrid" and defaults to the
    configured strategy (hybrid unless overridden).
    """
    name = strategy or get_config().default_strategy
    try:
        ctor = STRATEGIES[name]
    except KeyError:
        raise UnknownStrategy(f"Unknown search strategy: {name!r}") from None
    log.debug(f"Building {name} easing for {(x1, y1, x2, y2)}")
    return ctor(x1, y1, x2, y2, evaluator=evaluator, strict=strict)
