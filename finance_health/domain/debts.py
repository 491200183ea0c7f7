"""Debt payoff ordering strategies"""

from enum import Enum
from typing import List, Sequence, Union

from finance_health.domain.models import Debt


class DebtStrategy(str, Enum):
    """
    Payoff ordering.

    - avalanche: highest interest rate first, minimizes total interest paid
    - snowball:  smallest balance first, quick wins keep motivation up
    """

    AVALANCHE = "avalanche"
    SNOWBALL = "snowball"


def prioritize(debts: Sequence[Debt], strategy: Union[DebtStrategy, str]) -> List[Debt]:
    """
    Return a new list of debts in payoff order. The input is never mutated.

    Anything other than avalanche orders by snowball. Ties keep their input
    order (sorted() is stable).
    """
    if strategy == DebtStrategy.AVALANCHE:
        return sorted(debts, key=lambda d: d.interest_rate, reverse=True)
    return sorted(debts, key=lambda d: d.total_amount)
