"""Aggregation of raw financial records into snapshot and dashboard figures"""

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from finance_health.domain.models import (
    Asset,
    BudgetEnvelope,
    Debt,
    FinancialSnapshot,
    Goal,
    Investment,
    RecurringBill,
    Transaction,
    TransactionType,
    UserFinances,
)
from finance_health.utils.date_utils import add_months, is_same_month, to_local


class TrendTimeframe(str, Enum):
    """Window for the monthly cash-flow trend"""

    SIX_MONTHS = "6m"
    TWELVE_MONTHS = "12m"
    YEAR_TO_DATE = "ytd"


@dataclass
class CategoryTotal:
    category: str
    amount: float


@dataclass
class MonthlyFlow:
    """Income and expenses for one calendar month"""

    month: date  # first day of the month
    income: float
    expenses: float


@dataclass
class PortfolioSummary:
    """Totals across all investment positions"""

    market_value: float
    cost_basis: float
    gain_loss: float
    performance: float  # percent


def monthly_totals(transactions: Sequence[Transaction], today: Optional[date] = None) -> Tuple[float, float]:
    """
    Sum income and expenses for the calendar month of `today`.

    Returns: (income, expenses)
    """
    today = today or date.today()
    income = 0.0
    expenses = 0.0

    for txn in transactions:
        if not is_same_month(txn.date, today):
            continue
        if txn.type == TransactionType.INCOME:
            income += txn.amount
        else:
            expenses += txn.amount

    return income, expenses


def cash_balance(transactions: Sequence[Transaction]) -> float:
    """All-time income minus expenses"""
    return sum(t.amount if t.type == TransactionType.INCOME else -t.amount for t in transactions)


def investments_value(investments: Sequence[Investment]) -> float:
    return sum(i.market_value for i in investments)


def physical_assets_value(assets: Sequence[Asset]) -> float:
    return sum(a.current_value for a in assets)


def total_debt(debts: Sequence[Debt]) -> float:
    return sum(d.total_amount for d in debts)


def total_assets(finances: UserFinances) -> float:
    """Cash balance + investment market value + physical asset value"""
    return (
        cash_balance(finances.transactions)
        + investments_value(finances.investments)
        + physical_assets_value(finances.assets)
    )


def net_worth(finances: UserFinances) -> float:
    return total_assets(finances) - total_debt(finances.debts)


def build_snapshot(finances: UserFinances, today: Optional[date] = None) -> FinancialSnapshot:
    """Assemble the health-score input from a user's records"""
    income, expenses = monthly_totals(finances.transactions, today)

    return FinancialSnapshot(
        monthly_income=income,
        monthly_expenses=expenses,
        total_debt=total_debt(finances.debts),
        total_assets=total_assets(finances),
    )


def envelope_spending(
    envelopes: Sequence[BudgetEnvelope],
    transactions: Sequence[Transaction],
    today: Optional[date] = None,
) -> List[BudgetEnvelope]:
    """
    Return copies of the envelopes with spent_amount filled in.

    Spent = current-month expense transactions assigned to the envelope.
    """
    today = today or date.today()
    spent: Dict[str, float] = {}

    for txn in transactions:
        if txn.envelope_id is None or txn.type != TransactionType.EXPENSE:
            continue
        if not is_same_month(txn.date, today):
            continue
        spent[txn.envelope_id] = spent.get(txn.envelope_id, 0.0) + txn.amount

    return [replace(env, spent_amount=spent.get(env.id, 0.0)) for env in envelopes]


def budget_summary(envelopes: Sequence[BudgetEnvelope]) -> Tuple[float, float]:
    """Returns: (total budgeted, total spent)"""
    budgeted = sum(e.budgeted_amount for e in envelopes)
    spent = sum(e.spent_amount for e in envelopes)
    return budgeted, spent


def portfolio_summary(investments: Sequence[Investment]) -> PortfolioSummary:
    value = investments_value(investments)
    cost = sum(i.cost_basis for i in investments)
    gain = value - cost

    return PortfolioSummary(
        market_value=value,
        cost_basis=cost,
        gain_loss=gain,
        performance=gain / cost * 100 if cost > 0 else 0.0,
    )


def upcoming_bills(
    bills: Sequence[RecurringBill],
    today: Optional[date] = None,
    limit: int = 3,
) -> List[RecurringBill]:
    """Bills still due this month, soonest first"""
    today = today or date.today()
    pending = [b for b in sorted(bills, key=lambda b: b.due_day) if b.due_day >= today.day]
    return pending[:limit]


def goal_progress(goal: Goal) -> int:
    """Percent of the target already saved"""
    if goal.target_amount <= 0:
        return 0
    return round(goal.current_amount / goal.target_amount * 100)


def category_breakdown(transactions: Sequence[Transaction], today: Optional[date] = None) -> List[CategoryTotal]:
    """Current-month expenses per category, largest first"""
    today = today or date.today()
    totals: Dict[str, float] = {}

    for txn in transactions:
        if txn.type != TransactionType.EXPENSE or not is_same_month(txn.date, today):
            continue
        totals[txn.category] = totals.get(txn.category, 0.0) + txn.amount

    return [
        CategoryTotal(category=category, amount=amount)
        for category, amount in sorted(totals.items(), key=lambda item: item[1], reverse=True)
    ]


def monthly_trend(
    transactions: Sequence[Transaction],
    today: Optional[date] = None,
    timeframe: TrendTimeframe = TrendTimeframe.SIX_MONTHS,
) -> List[MonthlyFlow]:
    """
    Income and expenses per month over the timeframe, oldest first.

    Every month from the window start through the current month is present,
    with zeros for months without transactions. Transactions after the
    current month are ignored.
    """
    today = today or date.today()
    current = today.replace(day=1)

    if timeframe == TrendTimeframe.TWELVE_MONTHS:
        start = add_months(current, -11)
    elif timeframe == TrendTimeframe.YEAR_TO_DATE:
        start = current.replace(month=1)
    else:
        start = add_months(current, -5)

    flows: Dict[date, MonthlyFlow] = {}
    month = start
    while month <= current:
        flows[month] = MonthlyFlow(month=month, income=0.0, expenses=0.0)
        month = add_months(month, 1)

    for txn in transactions:
        when = to_local(txn.date)
        flow = flows.get(date(when.year, when.month, 1))
        if flow is None:
            continue
        if txn.type == TransactionType.INCOME:
            flow.income += txn.amount
        else:
            flow.expenses += txn.amount

    return list(flows.values())
