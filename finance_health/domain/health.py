"""Financial health scoring engine - turns a monthly snapshot into a 0-100 score and tips"""

import math
from typing import List

from finance_health.domain.models import (
    FinancialAnalysis,
    FinancialSnapshot,
    HealthMetrics,
    HealthTier,
    TipKind,
)

MAX_TIPS = 3
MIN_SCORE = 5
MAX_SCORE = 100

INCOMPLETE_DATA_SCORE = 10
INCOMPLETE_DATA_TIPS = [TipKind.RECORD_TRANSACTIONS, TipKind.CREATE_ENVELOPES, TipKind.SET_GOAL]
NO_DATA_TIPS = [TipKind.RECORD_INCOME, TipKind.RECORD_EXPENSES, TipKind.DEFINE_GOAL]


def calculate_savings_rate(snapshot: FinancialSnapshot) -> float:
    """Fraction of income not spent; -inf when there is no income"""
    if snapshot.monthly_income > 0:
        return (snapshot.monthly_income - snapshot.monthly_expenses) / snapshot.monthly_income
    return -math.inf


def calculate_debt_to_asset_ratio(snapshot: FinancialSnapshot) -> float:
    if snapshot.total_assets > 0:
        return snapshot.total_debt / snapshot.total_assets
    return math.inf if snapshot.total_debt > 0 else 0.0


def calculate_emergency_fund_months(snapshot: FinancialSnapshot) -> float:
    """Months of expenses covered by assets; +inf when there are no expenses"""
    if snapshot.monthly_expenses > 0:
        return snapshot.total_assets / snapshot.monthly_expenses
    return math.inf


def score_savings_rate(savings_rate: float) -> int:
    """Savings component, 50 points max (reached at a 20% savings rate)"""
    if savings_rate >= 0.20:
        return 50
    elif savings_rate >= 0.10:
        return 40
    elif savings_rate >= 0.05:
        return 30
    elif savings_rate > 0:
        return 20
    return 5


def score_debt_to_asset_ratio(ratio: float) -> int:
    """Leverage component, 30 points max (lower ratio is better)"""
    if ratio < 0.3:
        return 30
    elif ratio < 0.5:
        return 20
    elif ratio < 0.8:
        return 10
    return 5


def score_emergency_fund(months: float) -> int:
    """Emergency fund component, 20 points max (six months of expenses)"""
    if months >= 6:
        return 20
    elif months >= 3:
        return 15
    elif months >= 1:
        return 10
    return 5


def calculate_metrics(snapshot: FinancialSnapshot) -> HealthMetrics:
    savings_rate = calculate_savings_rate(snapshot)
    debt_ratio = calculate_debt_to_asset_ratio(snapshot)
    emergency_months = calculate_emergency_fund_months(snapshot)

    return HealthMetrics(
        savings_rate=savings_rate,
        debt_to_asset_ratio=debt_ratio,
        emergency_fund_months=emergency_months,
        savings_score=score_savings_rate(savings_rate),
        debt_score=score_debt_to_asset_ratio(debt_ratio),
        emergency_score=score_emergency_fund(emergency_months),
    )


def determine_tier(score: int) -> HealthTier:
    """
    Map a computed score to its summary tier.

    Score bands:
    - 80+:     excellent
    - 60 - 80: on track
    - 40 - 60: room for improvement
    - < 40:    needs attention
    """
    if score >= 80:
        return HealthTier.EXCELLENT
    elif score >= 60:
        return HealthTier.ON_TRACK
    elif score >= 40:
        return HealthTier.NEEDS_IMPROVEMENT
    return HealthTier.NEEDS_ATTENTION


def select_tips(snapshot: FinancialSnapshot, metrics: HealthMetrics) -> List[TipKind]:
    """
    Pick up to three tips, weakest areas first.

    Problem-specific tips come first; general advice fills the remaining
    slots, with "increase income" as the unconditional filler.
    """
    tips: List[TipKind] = []

    if metrics.savings_rate < 0.10:
        tips.append(TipKind.BUILD_BUDGET)
    if metrics.debt_to_asset_ratio > 0.5 and snapshot.total_debt > 0:
        tips.append(TipKind.ACCELERATE_DEBT_PAYOFF)
    if metrics.emergency_fund_months < 3:
        tips.append(TipKind.BUILD_EMERGENCY_FUND)

    if len(tips) < MAX_TIPS and metrics.savings_rate >= 0.10:
        tips.append(TipKind.AUTOMATE_INVESTMENTS)
    if len(tips) < MAX_TIPS and metrics.debt_to_asset_ratio <= 0.5:
        tips.append(TipKind.REVIEW_GOALS)
    if len(tips) < MAX_TIPS:
        tips.append(TipKind.INCREASE_INCOME)

    return tips[:MAX_TIPS]


def evaluate(snapshot: FinancialSnapshot) -> FinancialAnalysis:
    """
    Main entry point: score a financial snapshot.

    Never raises; degenerate snapshots (no income and no expenses) get a
    fixed onboarding result instead of a computed score.
    """
    no_cash_flow = snapshot.monthly_income == 0 and snapshot.monthly_expenses == 0

    if no_cash_flow and (snapshot.total_debt > 0 or snapshot.total_assets > 0):
        return FinancialAnalysis(
            score=INCOMPLETE_DATA_SCORE,
            tier=HealthTier.INCOMPLETE_DATA,
            tips=list(INCOMPLETE_DATA_TIPS),
        )
    if no_cash_flow:
        return FinancialAnalysis(score=0, tier=HealthTier.NO_DATA, tips=list(NO_DATA_TIPS))

    metrics = calculate_metrics(snapshot)
    total = metrics.savings_score + metrics.debt_score + metrics.emergency_score
    score = max(MIN_SCORE, min(MAX_SCORE, round(total)))

    return FinancialAnalysis(
        score=score,
        tier=determine_tier(score),
        tips=select_tips(snapshot, metrics),
        metrics=metrics,
    )
