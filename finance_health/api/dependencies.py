"""Dependency injection for FastAPI endpoints"""

from typing import Optional
from fastapi import Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from finance_health.api.v1.messages import resolve_locale
from finance_health.domain.exceptions import UnsupportedLocaleError
from finance_health.infrastructure.database.repositories import FinanceRepository
from finance_health.infrastructure.database.session import get_db


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_repository(db: Session = Depends(get_db)) -> FinanceRepository:
    """Provide a repository bound to the request's session"""
    return FinanceRepository(db)


def get_locale(locale: Optional[str] = Query(None, description="Message catalog, e.g. en or pt-BR")) -> str:
    """Resolve the display locale for summaries and tips"""
    try:
        return resolve_locale(locale)
    except UnsupportedLocaleError as e:
        raise HTTPException(status_code=422, detail=str(e))
