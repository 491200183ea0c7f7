"""Debt payoff ordering endpoints"""

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from finance_health.api.v1.schemas import DebtSchema, PrioritizeRequest, PrioritizedDebtsResponse
from finance_health.api.dependencies import get_repository, get_request_id
from finance_health.infrastructure.database.repositories import FinanceRepository
from finance_health.domain.debts import DebtStrategy, prioritize
from finance_health.domain.models import Debt
from finance_health.domain.exceptions import DataSourceError
from finance_health.infrastructure.observability.metrics import record_prioritization, data_source_failures_counter

router = APIRouter()


def _to_response(debts: List[Debt], strategy: DebtStrategy) -> PrioritizedDebtsResponse:
    ordered = prioritize(debts, strategy)
    record_prioritization(strategy.value)

    return PrioritizedDebtsResponse(
        strategy=strategy,
        debts=[
            DebtSchema(
                id=d.id,
                name=d.name,
                total_amount=d.total_amount,
                interest_rate=d.interest_rate,
                minimum_payment=d.minimum_payment,
            )
            for d in ordered
        ],
        total_amount=sum(d.total_amount for d in ordered),
        total_minimum_payment=sum(d.minimum_payment for d in ordered),
    )


@router.post("/debts/prioritize", response_model=PrioritizedDebtsResponse)
def prioritize_debts(request_body: PrioritizeRequest):
    """Order caller-supplied debts by the chosen payoff strategy."""
    debts = [Debt(**d.model_dump()) for d in request_body.debts]
    return _to_response(debts, request_body.strategy)


@router.get("/users/{user_id}/debts", response_model=PrioritizedDebtsResponse)
def get_prioritized_debts(
    user_id: str,
    request: Request,
    strategy: DebtStrategy = Query(DebtStrategy.AVALANCHE, description="avalanche or snowball"),
    repository: FinanceRepository = Depends(get_repository),
):
    """
    Retrieve a user's debts in payoff order.

    Returns:
        Debts ranked by interest rate (avalanche) or balance (snowball)
    """
    try:
        debts = repository.get_debts(user_id)
    except DataSourceError as e:
        data_source_failures_counter.inc()
        logging.error(f"Data source error: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=503, detail="Financial records unavailable")

    return _to_response(debts, strategy)
