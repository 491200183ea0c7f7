"""Financial health analysis endpoints"""

import math
import time
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Request

from finance_health.api.v1.schemas import (
    AnalysisResponse,
    MetricsSchema,
    SnapshotFigures,
    SnapshotSchema,
    TipSchema,
    UserAnalysisResponse,
)
from finance_health.api.v1.messages import render_summary, render_tip
from finance_health.api.dependencies import get_locale, get_repository, get_request_id
from finance_health.infrastructure.database.repositories import FinanceRepository
from finance_health.domain.aggregation import build_snapshot
from finance_health.domain.health import evaluate
from finance_health.domain.models import FinancialAnalysis, FinancialSnapshot
from finance_health.domain.exceptions import DataSourceError
from finance_health.infrastructure.observability.metrics import record_analysis, data_source_failures_counter
from finance_health.infrastructure.observability.logging import log_analysis

router = APIRouter()


def _finite(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def build_analysis_response(analysis: FinancialAnalysis, locale: str) -> AnalysisResponse:
    """Attach display text to an analysis"""
    tips = []
    for kind in analysis.tips:
        title, description = render_tip(kind, locale)
        tips.append(TipSchema(kind=kind.value, title=title, description=description))

    metrics = None
    if analysis.metrics is not None:
        metrics = MetricsSchema(
            savings_rate=_finite(analysis.metrics.savings_rate),
            debt_to_asset_ratio=_finite(analysis.metrics.debt_to_asset_ratio),
            emergency_fund_months=_finite(analysis.metrics.emergency_fund_months),
            savings_score=analysis.metrics.savings_score,
            debt_score=analysis.metrics.debt_score,
            emergency_score=analysis.metrics.emergency_score,
        )

    return AnalysisResponse(
        score=analysis.score,
        tier=analysis.tier.value,
        summary=render_summary(analysis.tier, locale),
        tips=tips,
        metrics=metrics,
    )


@router.post("/analysis", response_model=AnalysisResponse)
def analyze_snapshot(snapshot: SnapshotSchema, locale: str = Depends(get_locale)):
    """Score an ad-hoc snapshot supplied by the caller."""
    analysis = evaluate(FinancialSnapshot(**snapshot.model_dump()))
    record_analysis(analysis.score, analysis.tier.value)
    return build_analysis_response(analysis, locale)


@router.get("/users/{user_id}/analysis", response_model=UserAnalysisResponse)
def analyze_user(
    user_id: str,
    request: Request,
    locale: str = Depends(get_locale),
    repository: FinanceRepository = Depends(get_repository),
):
    """
    Score a user's current financial health.

    Flow:
    1. Load the user's records
    2. Aggregate the current-month snapshot
    3. Evaluate score, tier and tips
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        finances = repository.load_user_finances(user_id)
        snapshot = build_snapshot(finances)
        analysis = evaluate(snapshot)

        duration_ms = (time.time() - start_time) * 1000
        record_analysis(analysis.score, analysis.tier.value)
        log_analysis(request_id, user_id, analysis.score, analysis.tier.value, duration_ms)

        return UserAnalysisResponse(
            user_id=user_id,
            snapshot=SnapshotFigures(
                monthly_income=snapshot.monthly_income,
                monthly_expenses=snapshot.monthly_expenses,
                total_debt=snapshot.total_debt,
                total_assets=snapshot.total_assets,
            ),
            analysis=build_analysis_response(analysis, locale),
        )

    except DataSourceError as e:
        data_source_failures_counter.inc()
        logging.error(f"Data source error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Financial records unavailable")

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
