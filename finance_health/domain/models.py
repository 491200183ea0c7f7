"""Domain models - pure Python dataclasses representing personal-finance entities"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import List, Optional


class TransactionType(str, Enum):
    """Direction of money for a transaction"""

    INCOME = "income"
    EXPENSE = "expense"


@dataclass
class Transaction:
    """Single income or expense entry"""

    id: str
    amount: float
    date: datetime
    category: str
    type: TransactionType
    description: str = ""
    payment_method: str = ""
    recurrence: str = ""
    tags: List[str] = field(default_factory=list)
    envelope_id: Optional[str] = None


@dataclass
class Debt:
    """Outstanding debt tracked for payoff planning"""

    id: str
    name: str
    total_amount: float
    interest_rate: float  # percent per period
    minimum_payment: float


@dataclass
class Investment:
    """Portfolio position"""

    id: str
    name: str
    type: str
    quantity: float
    purchase_price: float
    current_price: float

    @property
    def market_value(self) -> float:
        return self.quantity * self.current_price

    @property
    def cost_basis(self) -> float:
        return self.quantity * self.purchase_price

    @property
    def performance(self) -> float:
        """Percent gain or loss against cost basis (0 when cost is unknown)"""
        cost = self.cost_basis
        return (self.market_value - cost) / cost * 100 if cost > 0 else 0.0


@dataclass
class Asset:
    """Physical asset such as real estate or a vehicle"""

    id: str
    name: str
    type: str
    purchase_price: float
    current_value: float


@dataclass
class BudgetEnvelope:
    """Monthly spending limit for a category; spent_amount is derived"""

    id: str
    name: str
    budgeted_amount: float
    spent_amount: float = 0.0


@dataclass
class RecurringBill:
    id: str
    name: str
    amount: float
    due_day: int  # 1-31


@dataclass
class Goal:
    id: str
    name: str
    target_amount: float
    current_amount: float
    target_date: date


@dataclass
class UserFinances:
    """Everything the aggregation layer needs for one user"""

    transactions: List[Transaction] = field(default_factory=list)
    debts: List[Debt] = field(default_factory=list)
    investments: List[Investment] = field(default_factory=list)
    assets: List[Asset] = field(default_factory=list)
    envelopes: List[BudgetEnvelope] = field(default_factory=list)
    bills: List[RecurringBill] = field(default_factory=list)
    goals: List[Goal] = field(default_factory=list)


@dataclass(frozen=True)
class FinancialSnapshot:
    """Monthly figures the health score is computed from"""

    monthly_income: float
    monthly_expenses: float
    total_debt: float
    total_assets: float


class HealthTier(str, Enum):
    """Summary kind attached to an analysis"""

    EXCELLENT = "excellent"
    ON_TRACK = "on_track"
    NEEDS_IMPROVEMENT = "needs_improvement"
    NEEDS_ATTENTION = "needs_attention"
    # Short-circuit results when income and expenses are both missing
    INCOMPLETE_DATA = "incomplete_data"
    NO_DATA = "no_data"


class TipKind(str, Enum):
    """Closed set of advice the analyzer can emit"""

    BUILD_BUDGET = "build_budget"
    ACCELERATE_DEBT_PAYOFF = "accelerate_debt_payoff"
    BUILD_EMERGENCY_FUND = "build_emergency_fund"
    AUTOMATE_INVESTMENTS = "automate_investments"
    REVIEW_GOALS = "review_goals"
    INCREASE_INCOME = "increase_income"
    # Onboarding tips
    RECORD_TRANSACTIONS = "record_transactions"
    CREATE_ENVELOPES = "create_envelopes"
    SET_GOAL = "set_goal"
    RECORD_INCOME = "record_income"
    RECORD_EXPENSES = "record_expenses"
    DEFINE_GOAL = "define_goal"


@dataclass(frozen=True)
class HealthMetrics:
    """Ratios and sub-scores behind a computed score"""

    savings_rate: float
    debt_to_asset_ratio: float
    emergency_fund_months: float
    savings_score: int
    debt_score: int
    emergency_score: int


@dataclass(frozen=True)
class FinancialAnalysis:
    """Output of the financial health analyzer"""

    score: int
    tier: HealthTier
    tips: List[TipKind]
    metrics: Optional[HealthMetrics] = None


@dataclass(frozen=True)
class Achievement:
    id: str
    unlocked: bool
