"""Unit tests for financial health scoring"""

import math
import pytest
from finance_health.domain.models import FinancialSnapshot, HealthTier, TipKind
from finance_health.domain.health import (
    calculate_debt_to_asset_ratio,
    calculate_emergency_fund_months,
    calculate_savings_rate,
    determine_tier,
    evaluate,
    score_debt_to_asset_ratio,
    score_emergency_fund,
    score_savings_rate,
)


def snapshot(income=0.0, expenses=0.0, debt=0.0, assets=0.0) -> FinancialSnapshot:
    return FinancialSnapshot(
        monthly_income=income,
        monthly_expenses=expenses,
        total_debt=debt,
        total_assets=assets,
    )


def test_evaluate_no_data():
    """Test empty snapshot scores zero with onboarding tips"""
    analysis = evaluate(snapshot())

    assert analysis.score == 0
    assert analysis.tier == HealthTier.NO_DATA
    assert analysis.tips == [TipKind.RECORD_INCOME, TipKind.RECORD_EXPENSES, TipKind.DEFINE_GOAL]
    assert analysis.metrics is None


def test_evaluate_incomplete_data():
    """Test debt or assets without cash flow scores 10"""
    for data in (snapshot(debt=100), snapshot(assets=2500), snapshot(debt=100, assets=50)):
        analysis = evaluate(data)

        assert analysis.score == 10
        assert analysis.tier == HealthTier.INCOMPLETE_DATA
        assert analysis.tips == [TipKind.RECORD_TRANSACTIONS, TipKind.CREATE_ENVELOPES, TipKind.SET_GOAL]


def test_evaluate_healthy_example(healthy_snapshot: FinancialSnapshot):
    """
    savings 0.30 -> 50, debt/assets 0.2 -> 30, emergency 2.857 months -> 10
    """
    analysis = evaluate(healthy_snapshot)

    assert analysis.metrics.savings_rate == pytest.approx(0.30)
    assert analysis.metrics.debt_to_asset_ratio == pytest.approx(0.2)
    assert analysis.metrics.emergency_fund_months == pytest.approx(2.857, abs=1e-3)
    assert analysis.metrics.savings_score == 50
    assert analysis.metrics.debt_score == 30
    assert analysis.metrics.emergency_score == 10
    assert analysis.score == 90
    assert analysis.tier == HealthTier.EXCELLENT
    assert analysis.tips == [
        TipKind.BUILD_EMERGENCY_FUND,
        TipKind.AUTOMATE_INVESTMENTS,
        TipKind.REVIEW_GOALS,
    ]


def test_ratio_guards():
    """Test zero denominators produce sentinels instead of errors"""
    assert calculate_savings_rate(snapshot(expenses=100)) == -math.inf
    assert calculate_debt_to_asset_ratio(snapshot(debt=100)) == math.inf
    assert calculate_debt_to_asset_ratio(snapshot()) == 0
    assert calculate_emergency_fund_months(snapshot(income=100, assets=10)) == math.inf


def test_score_savings_rate_bands():
    assert score_savings_rate(0.20) == 50
    assert score_savings_rate(0.19) == 40
    assert score_savings_rate(0.10) == 40
    assert score_savings_rate(0.05) == 30
    assert score_savings_rate(0.01) == 20
    assert score_savings_rate(0.0) == 5
    assert score_savings_rate(-math.inf) == 5


def test_score_debt_ratio_bands():
    assert score_debt_to_asset_ratio(0.0) == 30
    assert score_debt_to_asset_ratio(0.3) == 20
    assert score_debt_to_asset_ratio(0.5) == 10
    assert score_debt_to_asset_ratio(0.8) == 5
    assert score_debt_to_asset_ratio(math.inf) == 5


def test_score_emergency_fund_bands():
    assert score_emergency_fund(math.inf) == 20
    assert score_emergency_fund(6) == 20
    assert score_emergency_fund(3) == 15
    assert score_emergency_fund(1) == 10
    assert score_emergency_fund(0.5) == 5


def test_determine_tier_boundaries():
    assert determine_tier(100) == HealthTier.EXCELLENT
    assert determine_tier(80) == HealthTier.EXCELLENT
    assert determine_tier(79) == HealthTier.ON_TRACK
    assert determine_tier(60) == HealthTier.ON_TRACK
    assert determine_tier(40) == HealthTier.NEEDS_IMPROVEMENT
    assert determine_tier(39) == HealthTier.NEEDS_ATTENTION
    assert determine_tier(5) == HealthTier.NEEDS_ATTENTION


def test_evaluate_expenses_without_income():
    """Test worst case: spending with no income, no assets, some debt"""
    analysis = evaluate(snapshot(expenses=2000, debt=5000))

    # 5 (savings) + 5 (debt, infinite ratio) + 5 (emergency, 0 months)
    assert analysis.score == 15
    assert analysis.tier == HealthTier.NEEDS_ATTENTION
    assert analysis.tips == [
        TipKind.BUILD_BUDGET,
        TipKind.ACCELERATE_DEBT_PAYOFF,
        TipKind.BUILD_EMERGENCY_FUND,
    ]


def test_evaluate_income_only_fills_with_general_tips():
    """Test no problem areas: automate, review goals, increase income"""
    analysis = evaluate(snapshot(income=4000))

    assert analysis.score == 100
    assert analysis.tips == [
        TipKind.AUTOMATE_INVESTMENTS,
        TipKind.REVIEW_GOALS,
        TipKind.INCREASE_INCOME,
    ]


def test_evaluate_increase_income_filler():
    """Test filler tip when savings are low but leverage is fine"""
    # savings 0.05 -> budget tip, emergency 12 months, ratio 0 -> review goals
    analysis = evaluate(snapshot(income=1000, expenses=950, assets=11400))

    assert analysis.tips == [TipKind.BUILD_BUDGET, TipKind.REVIEW_GOALS, TipKind.INCREASE_INCOME]


def test_evaluate_high_debt_without_assets_skips_review_goals():
    """Test infinite leverage excludes the review-goals tip"""
    analysis = evaluate(snapshot(income=5000, expenses=1000, debt=100))

    assert TipKind.ACCELERATE_DEBT_PAYOFF in analysis.tips
    assert TipKind.REVIEW_GOALS not in analysis.tips
    assert len(analysis.tips) == 3


@pytest.mark.parametrize(
    "data",
    [
        snapshot(income=1, expenses=0),
        snapshot(income=0, expenses=1),
        snapshot(income=1_000_000, expenses=1, debt=0, assets=1_000_000),
        snapshot(income=100, expenses=10_000, debt=1_000_000, assets=1),
        snapshot(income=3000, expenses=2900, debt=400, assets=1000),
    ],
)
def test_evaluate_score_bounds_and_tip_count(data: FinancialSnapshot):
    analysis = evaluate(data)

    assert isinstance(analysis.score, int)
    assert 5 <= analysis.score <= 100
    assert len(analysis.tips) == 3
    assert len(set(analysis.tips)) == 3


def test_evaluate_is_pure(healthy_snapshot: FinancialSnapshot):
    assert evaluate(healthy_snapshot) == evaluate(healthy_snapshot)


def test_savings_score_monotonic_in_income():
    """Test raising income never lowers the savings component"""
    previous = 0
    for income in range(100, 10_001, 100):
        analysis = evaluate(snapshot(income=income, expenses=3000, debt=1000, assets=5000))
        assert analysis.metrics.savings_score >= previous
        previous = analysis.metrics.savings_score
