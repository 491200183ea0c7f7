"""GET /v1/users/{user_id}/overview - Dashboard figures for a user"""

import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from finance_health.api.v1.schemas import (
    AchievementSchema,
    BillSchema,
    BudgetSchema,
    CategoryTotalSchema,
    EnvelopeSchema,
    GoalProgressSchema,
    MonthlyFlowSchema,
    OverviewResponse,
    PortfolioSchema,
)
from finance_health.api.dependencies import get_repository, get_request_id
from finance_health.infrastructure.database.repositories import FinanceRepository
from finance_health.domain import aggregation
from finance_health.domain.achievements import evaluate_achievements
from finance_health.domain.exceptions import DataSourceError
from finance_health.infrastructure.observability.metrics import data_source_failures_counter
from finance_health.config import settings

router = APIRouter()


@router.get("/users/{user_id}/overview", response_model=OverviewResponse)
def get_overview(
    user_id: str,
    request: Request,
    timeframe: aggregation.TrendTimeframe = Query(aggregation.TrendTimeframe.SIX_MONTHS, description="6m, 12m or ytd"),
    repository: FinanceRepository = Depends(get_repository),
):
    """
    Net worth, cash flow, spending by category, monthly trend, portfolio,
    budget usage, upcoming bills, goals and achievements in one payload.
    """
    try:
        finances = repository.load_user_finances(user_id)
    except DataSourceError as e:
        data_source_failures_counter.inc()
        logging.error(f"Data source error: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=503, detail="Financial records unavailable")

    today = date.today()
    income, expenses = aggregation.monthly_totals(finances.transactions, today)
    envelopes = aggregation.envelope_spending(finances.envelopes, finances.transactions, today)
    budgeted, spent = aggregation.budget_summary(envelopes)
    portfolio = aggregation.portfolio_summary(finances.investments)
    bills = aggregation.upcoming_bills(finances.bills, today, limit=settings.upcoming_bills_limit)

    return OverviewResponse(
        user_id=user_id,
        cash_balance=aggregation.cash_balance(finances.transactions),
        net_worth=aggregation.net_worth(finances),
        total_assets=aggregation.total_assets(finances),
        total_debt=aggregation.total_debt(finances.debts),
        monthly_income=income,
        monthly_expenses=expenses,
        portfolio=PortfolioSchema(
            market_value=portfolio.market_value,
            cost_basis=portfolio.cost_basis,
            gain_loss=portfolio.gain_loss,
            performance=portfolio.performance,
        ),
        budget=BudgetSchema(
            total_budgeted=budgeted,
            total_spent=spent,
            envelopes=[
                EnvelopeSchema(
                    id=e.id,
                    name=e.name,
                    budgeted_amount=e.budgeted_amount,
                    spent_amount=e.spent_amount,
                )
                for e in envelopes
            ],
        ),
        upcoming_bills=[
            BillSchema(id=b.id, name=b.name, amount=b.amount, due_day=b.due_day)
            for b in bills
        ],
        goals=[
            GoalProgressSchema(
                id=g.id,
                name=g.name,
                target_amount=g.target_amount,
                current_amount=g.current_amount,
                target_date=g.target_date,
                progress_pct=aggregation.goal_progress(g),
            )
            for g in finances.goals
        ],
        expenses_by_category=[
            CategoryTotalSchema(category=c.category, amount=c.amount)
            for c in aggregation.category_breakdown(finances.transactions, today)
        ],
        timeframe=timeframe,
        monthly_trend=[
            MonthlyFlowSchema(month=f.month, income=f.income, expenses=f.expenses)
            for f in aggregation.monthly_trend(finances.transactions, today, timeframe)
        ],
        achievements=[
            AchievementSchema(id=a.id, unlocked=a.unlocked)
            for a in evaluate_achievements(finances)
        ],
    )
