"""Data access layer - loads a user's financial records as domain objects"""

from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from finance_health.infrastructure.database.models import (
    AssetRecord,
    BudgetEnvelopeRecord,
    DebtRecord,
    GoalRecord,
    InvestmentRecord,
    RecurringBillRecord,
    TransactionRecord,
)
from finance_health.domain.models import (
    Asset,
    BudgetEnvelope,
    Debt,
    Goal,
    Investment,
    RecurringBill,
    Transaction,
    TransactionType,
    UserFinances,
)
from finance_health.domain.exceptions import DataSourceError


class FinanceRepository:
    """Read-only repository for a user's transactions, debts, assets and plans"""

    def __init__(self, db: Session):
        self.db = db

    def _fetch(self, record_cls, user_id: str) -> list:
        try:
            return self.db.query(record_cls).filter(record_cls.user_id == user_id).all()
        except SQLAlchemyError as e:
            raise DataSourceError(f"Failed to load {record_cls.__tablename__}: {e}") from e

    def get_transactions(self, user_id: str) -> List[Transaction]:
        return [
            Transaction(
                id=str(r.id),
                amount=float(r.amount),
                date=r.date,
                category=r.category,
                type=TransactionType(r.type),
                description=r.description or "",
                payment_method=r.payment_method or "",
                recurrence=r.recurrence or "",
                tags=list(r.tags or []),
                envelope_id=str(r.envelope_id) if r.envelope_id else None,
            )
            for r in self._fetch(TransactionRecord, user_id)
        ]

    def get_debts(self, user_id: str) -> List[Debt]:
        return [
            Debt(
                id=str(r.id),
                name=r.name,
                total_amount=float(r.total_amount),
                interest_rate=float(r.interest_rate),
                minimum_payment=float(r.minimum_payment),
            )
            for r in self._fetch(DebtRecord, user_id)
        ]

    def get_investments(self, user_id: str) -> List[Investment]:
        return [
            Investment(
                id=str(r.id),
                name=r.name,
                type=r.type,
                quantity=float(r.quantity),
                purchase_price=float(r.purchase_price),
                current_price=float(r.current_price),
            )
            for r in self._fetch(InvestmentRecord, user_id)
        ]

    def get_assets(self, user_id: str) -> List[Asset]:
        return [
            Asset(
                id=str(r.id),
                name=r.name,
                type=r.type,
                purchase_price=float(r.purchase_price),
                current_value=float(r.current_value),
            )
            for r in self._fetch(AssetRecord, user_id)
        ]

    def get_envelopes(self, user_id: str) -> List[BudgetEnvelope]:
        """Envelopes without spending; see aggregation.envelope_spending"""
        return [
            BudgetEnvelope(id=str(r.id), name=r.name, budgeted_amount=float(r.budgeted_amount))
            for r in self._fetch(BudgetEnvelopeRecord, user_id)
        ]

    def get_bills(self, user_id: str) -> List[RecurringBill]:
        return [
            RecurringBill(id=str(r.id), name=r.name, amount=float(r.amount), due_day=r.due_day)
            for r in self._fetch(RecurringBillRecord, user_id)
        ]

    def get_goals(self, user_id: str) -> List[Goal]:
        return [
            Goal(
                id=str(r.id),
                name=r.name,
                target_amount=float(r.target_amount),
                current_amount=float(r.current_amount),
                target_date=r.target_date,
            )
            for r in self._fetch(GoalRecord, user_id)
        ]

    def load_user_finances(self, user_id: str) -> UserFinances:
        """
        Fetch every record collection for a user.

        Raises:
            DataSourceError: When any query fails
        """
        return UserFinances(
            transactions=self.get_transactions(user_id),
            debts=self.get_debts(user_id),
            investments=self.get_investments(user_id),
            assets=self.get_assets(user_id),
            envelopes=self.get_envelopes(user_id),
            bills=self.get_bills(user_id),
            goals=self.get_goals(user_id),
        )
