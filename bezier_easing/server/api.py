from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from ..motion.easing import PRESETS, EasingError, make_easing
from ..motion.evaluator import UnknownStrategy, get_evaluator
from ..motion.models import EaseRequest, PointRequest, SampleRequest
from ..motion.sampling import easing_for, sample_easing

log = logging.getLogger(__name__)


app = FastAPI(title="Bezier Easing API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/presets")
def api_presets():
    return {name: list(p) for name, p in PRESETS.items()}


@app.post("/api/point")
def api_point(req: PointRequest):
    x1, y1, x2, y2 = req.p
    x, y = get_evaluator(req.evaluator)(x1, y1, x2, y2, req.t)
    return {"x": x, "y": y}


@app.post("/api/ease")
def api_ease(req: EaseRequest):
    """Map a time in [0, 1] to eased progress.

    Linear eases clamp to [0, 1] and report zero search steps.
    """
    log.debug(f"Ease request: {req}")
    p = req.ease.control_points()
    if p is None:
        if not 0.0 <= req.time <= 1.0:
            raise HTTPException(422, detail=f"time={req.time} outside [0, 1]")
        return {"y": req.time, "t": req.time, "x": req.time, "steps": 0}
    x1, y1, x2, y2 = p
    try:
        easing = make_easing(x1, y1, x2, y2, strategy=req.strategy, evaluator=req.evaluator, strict=True)
        res = easing.solve(req.time)
    except UnknownStrategy as e:
        raise HTTPException(404, detail=str(e))
    except EasingError as e:
        raise HTTPException(422, detail=str(e))
    return {"y": res.y, "t": res.t, "x": res.x, "steps": res.steps}


@app.post("/api/sample")
def api_sample(req: SampleRequest):
    try:
        fn = easing_for(req.ease, strategy=req.strategy, evaluator=req.evaluator, strict=True)
        times, values = sample_easing(fn, req.samples)
    except UnknownStrategy as e:
        raise HTTPException(404, detail=str(e))
    except EasingError as e:
        raise HTTPException(422, detail=str(e))
    return {"times": times, "values": values}
