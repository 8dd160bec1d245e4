import pytest

from bezier_easing.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the cached config so env overrides set by a test take effect."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def counting_evaluator():
    """Point evaluator that records how many times it was called."""
    from bezier_easing.motion.evaluator import evaluate_point_direct

    calls = []

    def evaluator(x1, y1, x2, y2, t):
        calls.append(t)
        return evaluate_point_direct(x1, y1, x2, y2, t)

    evaluator.calls = calls
    return evaluator
