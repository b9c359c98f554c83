# api/v1/plans.py
from __future__ import annotations

import logging
import math
from functools import lru_cache
from typing import Any

from fastapi import APIRouter, HTTPException, status

from config import settings
from engine import EnginePolicy, calculate, evaluate
from engine.domain import check_profile
from engine.models import InputRejection
from api.v1.schemas import FaultOut, MetricsOut, PlanOut, ProfileIn

_LOG = logging.getLogger(__name__)

router = APIRouter()


@lru_cache
def engine_policy() -> EnginePolicy:
    return EnginePolicy(
        condition_priority=settings.condition_priority_order,
        max_alternative_depth=settings.max_alternative_depth,
    )


def _json_safe(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return value


def _reject(rejection: InputRejection) -> HTTPException:
    faults = [
        FaultOut(field=f.field, value=_json_safe(f.value), message=f.message).model_dump(mode="json")
        for f in rejection.faults
    ]
    _LOG.info("profile rejected: %s", rejection.fields)
    return HTTPException(
        status_code=422,
        detail={"faults": faults},
    )


# ───────────────────────── full evaluation ──────────────────
@router.post("/evaluate", response_model=PlanOut, status_code=status.HTTP_200_OK)
async def evaluate_plan(body: ProfileIn) -> PlanOut:
    outcome = evaluate(body.to_profile(), engine_policy())
    if isinstance(outcome, InputRejection):
        raise _reject(outcome)
    return PlanOut.model_validate(outcome, from_attributes=True)


# ───────────────────────── numbers only ─────────────────────
@router.post("/metrics", response_model=MetricsOut, status_code=status.HTTP_200_OK)
async def plan_metrics(body: ProfileIn) -> MetricsOut:
    profile = body.to_profile()
    faults = check_profile(profile)
    if faults:
        raise _reject(InputRejection(tuple(faults)))
    metrics = calculate(profile, engine_policy())
    return MetricsOut.model_validate(metrics, from_attributes=True)
