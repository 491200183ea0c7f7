"""Pytest fixtures for testing"""

import pytest
from datetime import date, datetime, timedelta
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from finance_health.api.main import create_app
from finance_health.infrastructure.database.models import (
    Base,
    AssetRecord,
    BudgetEnvelopeRecord,
    DebtRecord,
    GoalRecord,
    InvestmentRecord,
    RecurringBillRecord,
    TransactionRecord,
)
from finance_health.infrastructure.database.session import get_db
from finance_health.domain.models import Debt, FinancialSnapshot


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def seeded_user(db: Session) -> str:
    """
    A user whose current month aggregates to the snapshot
    (income=5000, expenses=3500, debt=2000, assets=10000).

    Cash balance: 5000 + 1000 (last month) - 3500 = 2500
    Assets: 2500 cash + 1500 investments + 6000 car = 10000
    """
    user_id = "user_1"
    now = datetime.now()
    last_month = now - timedelta(days=40)

    groceries = BudgetEnvelopeRecord(user_id=user_id, name="Groceries", budgeted_amount=600)
    db.add(groceries)
    db.flush()

    db.add_all(
        [
            TransactionRecord(user_id=user_id, amount=5000, date=now, category="Salary", type="income"),
            TransactionRecord(user_id=user_id, amount=3000, date=now, category="Rent", type="expense"),
            TransactionRecord(
                user_id=user_id,
                amount=500,
                date=now,
                category="Food",
                type="expense",
                envelope_id=groceries.id,
            ),
            TransactionRecord(user_id=user_id, amount=1000, date=last_month, category="Bonus", type="income"),
            DebtRecord(user_id=user_id, name="Credit Card", total_amount=1500, interest_rate=20, minimum_payment=75),
            DebtRecord(user_id=user_id, name="Personal Loan", total_amount=500, interest_rate=10, minimum_payment=50),
            InvestmentRecord(
                user_id=user_id, name="Index Fund", type="stock", quantity=10, purchase_price=100, current_price=150
            ),
            AssetRecord(user_id=user_id, name="Car", type="vehicle", purchase_price=8000, current_value=6000),
            RecurringBillRecord(user_id=user_id, name="Internet", amount=100, due_day=31),
            GoalRecord(
                user_id=user_id,
                name="Trip",
                target_amount=1000,
                current_amount=250,
                target_date=date.today() + timedelta(days=180),
            ),
        ]
    )
    db.commit()
    return user_id


@pytest.fixture
def healthy_snapshot() -> FinancialSnapshot:
    return FinancialSnapshot(monthly_income=5000, monthly_expenses=3500, total_debt=2000, total_assets=10000)


@pytest.fixture
def sample_debts() -> list[Debt]:
    return [
        Debt(id="card", name="Credit Card", total_amount=500, interest_rate=10, minimum_payment=25),
        Debt(id="loan", name="Car Loan", total_amount=5000, interest_rate=20, minimum_payment=200),
    ]
