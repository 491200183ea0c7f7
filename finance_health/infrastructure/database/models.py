"""SQLAlchemy ORM models for the personal-finance read model"""

import uuid
from sqlalchemy import Column, String, Integer, Numeric, DateTime, Date, ForeignKey, Text, JSON
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Money columns: NUMERIC(12, 2)
Money = Numeric(12, 2)


class BudgetEnvelopeRecord(Base):
    """Monthly budget envelope"""

    __tablename__ = "budget_envelopes"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    budgeted_amount = Column(Money, nullable=False)


class TransactionRecord(Base):
    """Income or expense entry"""

    __tablename__ = "transactions"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    amount = Column(Money, nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)
    category = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    type = Column(String(16), nullable=False)  # "income" or "expense"
    payment_method = Column(Text, nullable=False, default="")
    recurrence = Column(Text, nullable=False, default="")
    tags = Column(JSON, nullable=True)
    envelope_id = Column(
        UUID(as_uuid=True),
        ForeignKey("budget_envelopes.id", ondelete="SET NULL"),
        nullable=True,
    )


class DebtRecord(Base):
    __tablename__ = "debts"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    total_amount = Column(Money, nullable=False)
    interest_rate = Column(Numeric(6, 2), nullable=False)
    minimum_payment = Column(Money, nullable=False)


class InvestmentRecord(Base):
    __tablename__ = "investments"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    type = Column(Text, nullable=False)
    quantity = Column(Numeric(18, 8), nullable=False)
    purchase_price = Column(Money, nullable=False)
    current_price = Column(Money, nullable=False)


class RecurringBillRecord(Base):
    __tablename__ = "recurring_bills"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    amount = Column(Money, nullable=False)
    due_day = Column(Integer, nullable=False)


class AssetRecord(Base):
    __tablename__ = "assets"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    type = Column(Text, nullable=False)
    purchase_price = Column(Money, nullable=False)
    current_value = Column(Money, nullable=False)


class GoalRecord(Base):
    __tablename__ = "goals"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    target_amount = Column(Money, nullable=False)
    current_amount = Column(Money, nullable=False, default=0)
    target_date = Column(Date, nullable=False)
