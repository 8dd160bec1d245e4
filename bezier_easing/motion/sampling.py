from __future__ import annotations

from typing import List, Optional, Tuple

from ..config import get_config
from .easing import EasingFn, linear, make_easing
from .models import Ease


def easing_for(
    ease: Ease,
    strategy: Optional[str] = None,
    evaluator: Optional[str] = None,
    strict: Optional[bool] = None,
) -> EasingFn:
    p = ease.control_points()
    if p is None:
        return linear
    x1, y1, x2, y2 = p
    return make_easing(x1, y1, x2, y2, strategy=strategy, evaluator=evaluator, strict=strict)


def sample_easing(fn: EasingFn, samples: Optional[int] = None) -> Tuple[List[float], List[float]]:
    """Sample an easing function at evenly spaced times in [0, 1].

    - samples: number of points including both ends (default from config)
    Returns (times, values)
    """
    n = get_config().sample_count if samples is None else samples
    if n < 2:
        raise ValueError("At least two samples required")

    times: List[float] = []
    values: List[float] = []
    step = 1.0 / (n - 1)
    for i in range(n - 1):
        u = i * step
        times.append(u)
        values.append(fn(u))

    # Ensure last sample is exactly time 1
    times.append(1.0)
    values.append(fn(1.0))
    return times, values
