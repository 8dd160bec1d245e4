from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class EasingConfig:
    # Bisection limits
    max_steps: int = 8                 # fixed-step and hybrid strategies
    epsilon: float = 0.00075           # |time - x| tolerance
    epsilon_step_limit: int = 64       # hard cap for the epsilon strategy

    # Defaults used when a caller does not pick one
    default_strategy: str = "hybrid"
    default_evaluator: str = "direct"

    # Raise on out-of-range control points / time instead of degrading
    strict: bool = False

    # Sampling
    sample_count: int = 101


def load_config() -> EasingConfig:
    cfg = EasingConfig()
    # Allow simple env overrides
    cfg.max_steps = int(os.getenv("EASING_MAX_STEPS", cfg.max_steps))
    cfg.epsilon = float(os.getenv("EASING_EPSILON", cfg.epsilon))
    cfg.epsilon_step_limit = int(os.getenv("EASING_EPSILON_STEP_LIMIT", cfg.epsilon_step_limit))
    cfg.default_strategy = os.getenv("EASING_STRATEGY", cfg.default_strategy)
    cfg.default_evaluator = os.getenv("EASING_EVALUATOR", cfg.default_evaluator)
    cfg.strict = os.getenv("EASING_STRICT", "false").lower() in ("1", "true", "yes")
    cfg.sample_count = int(os.getenv("EASING_SAMPLE_COUNT", cfg.sample_count))
    return cfg


# Singleton getter
_singleton: Optional[EasingConfig] = None


def get_config() -> EasingConfig:
    global _singleton
    if _singleton is None:
        _singleton = load_config()
    return _singleton


def reset_config() -> None:
    global _singleton
    _singleton = None
