from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from .easing import PRESETS

EaseType = Literal["linear", "cubic-bezier", "ease", "ease-in", "ease-out", "ease-in-out"]
StrategyName = Literal["fixed", "epsilon", "hybrid"]
EvaluatorName = Literal["direct", "de_casteljau"]


class Ease(BaseModel):
    type: EaseType = "linear"
    p: Optional[list[float]] = Field(default=None, description="Bezier control points [x1,y1,x2,y2]")

    @model_validator(mode="after")
    def validate_bezier(self):
        if self.type == "cubic-bezier":
            if not self.p or len(self.p) != 4:
                raise ValueError("cubic-bezier requires p=[x1,y1,x2,y2]")
        return self

    def control_points(self) -> Optional[List[float]]:
        """Explicit or preset control points; None for the clamped linear ease."""
        if self.type == "cubic-bezier":
            return list(self.p)  # type: ignore
        if self.type == "linear":
            return None
        return list(PRESETS[self.type])


class PointRequest(BaseModel):
    p: list[float] = Field(..., min_length=4, max_length=4, description="[x1,y1,x2,y2]")
    t: float = Field(..., ge=0.0, le=1.0)
    evaluator: EvaluatorName = "direct"


class EaseRequest(BaseModel):
    ease: Ease = Field(default_factory=Ease)
    time: float
    strategy: Optional[StrategyName] = None
    evaluator: Optional[EvaluatorName] = None


class SampleRequest(BaseModel):
    ease: Ease = Field(default_factory=Ease)
    samples: Optional[int] = Field(default=None, ge=2, le=10_000)
    strategy: Optional[StrategyName] = None
    evaluator: Optional[EvaluatorName] = None
