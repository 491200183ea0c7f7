"""Gamification badges unlocked by a user's activity"""

from typing import List

from finance_health.domain.models import Achievement, UserFinances

ACHIEVEMENT_IDS = ["first_transaction", "first_budget", "first_goal", "debt_slayer", "investor"]


def evaluate_achievements(finances: UserFinances) -> List[Achievement]:
    """Return every known achievement, in display order, flagged as unlocked or not"""
    unlocked = set()

    if finances.transactions:
        unlocked.add("first_transaction")
    if finances.envelopes:
        unlocked.add("first_budget")
    if finances.goals:
        unlocked.add("first_goal")
    if finances.debts:
        unlocked.add("debt_slayer")
    if finances.investments:
        unlocked.add("investor")

    return [Achievement(id=ach_id, unlocked=ach_id in unlocked) for ach_id in ACHIEVEMENT_IDS]
