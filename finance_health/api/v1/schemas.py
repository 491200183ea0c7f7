"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import List, Optional

from finance_health.domain.aggregation import TrendTimeframe
from finance_health.domain.debts import DebtStrategy


class SnapshotSchema(BaseModel):
    """Monthly figures for POST /v1/analysis"""

    monthly_income: float = Field(..., ge=0, description="Income for the current month")
    monthly_expenses: float = Field(..., ge=0, description="Expenses for the current month")
    total_debt: float = Field(..., ge=0, description="Sum of outstanding debt balances")
    total_assets: float = Field(..., ge=0, description="Cash + investments + physical assets")


class SnapshotFigures(BaseModel):
    """Aggregated snapshot echoed back with a user analysis"""

    monthly_income: float
    monthly_expenses: float
    total_debt: float
    total_assets: float


class TipSchema(BaseModel):
    kind: str
    title: str
    description: str


class MetricsSchema(BaseModel):
    """Ratios behind the score; null where the ratio is unbounded"""

    savings_rate: Optional[float] = None
    debt_to_asset_ratio: Optional[float] = None
    emergency_fund_months: Optional[float] = None
    savings_score: int
    debt_score: int
    emergency_score: int


class AnalysisResponse(BaseModel):
    """Response for POST /v1/analysis"""

    score: int = Field(..., ge=0, le=100)
    tier: str
    summary: str
    tips: List[TipSchema]
    metrics: Optional[MetricsSchema] = None


class UserAnalysisResponse(BaseModel):
    """Response for GET /v1/users/{user_id}/analysis"""

    user_id: str
    snapshot: SnapshotFigures
    analysis: AnalysisResponse


class DebtSchema(BaseModel):
    id: str = Field(..., min_length=1)
    name: str
    total_amount: float = Field(..., ge=0)
    interest_rate: float = Field(..., ge=0, description="Interest rate in percent per period")
    minimum_payment: float = Field(0, ge=0)


class PrioritizeRequest(BaseModel):
    """Request body for POST /v1/debts/prioritize"""

    strategy: DebtStrategy = DebtStrategy.AVALANCHE
    debts: List[DebtSchema]


class PrioritizedDebtsResponse(BaseModel):
    strategy: DebtStrategy
    debts: List[DebtSchema]
    total_amount: float
    total_minimum_payment: float


class PortfolioSchema(BaseModel):
    market_value: float
    cost_basis: float
    gain_loss: float
    performance: float


class EnvelopeSchema(BaseModel):
    id: str
    name: str
    budgeted_amount: float
    spent_amount: float


class BudgetSchema(BaseModel):
    total_budgeted: float
    total_spent: float
    envelopes: List[EnvelopeSchema]


class BillSchema(BaseModel):
    id: str
    name: str
    amount: float
    due_day: int


class GoalProgressSchema(BaseModel):
    id: str
    name: str
    target_amount: float
    current_amount: float
    target_date: date
    progress_pct: int


class CategoryTotalSchema(BaseModel):
    category: str
    amount: float


class MonthlyFlowSchema(BaseModel):
    month: date = Field(..., description="First day of the month")
    income: float
    expenses: float


class AchievementSchema(BaseModel):
    id: str
    unlocked: bool


class OverviewResponse(BaseModel):
    """Response for GET /v1/users/{user_id}/overview"""

    user_id: str
    cash_balance: float
    net_worth: float
    total_assets: float
    total_debt: float
    monthly_income: float
    monthly_expenses: float
    portfolio: PortfolioSchema
    budget: BudgetSchema
    upcoming_bills: List[BillSchema]
    goals: List[GoalProgressSchema]
    expenses_by_category: List[CategoryTotalSchema]
    timeframe: TrendTimeframe
    monthly_trend: List[MonthlyFlowSchema]
    achievements: List[AchievementSchema]
