# shiftpay/routes/payroll_api.py
"""
JSON API over the payroll engine.

Stateless: every request carries the records to compute on. The only
server-side input is the settings snapshot (closing date default).
"""

import datetime
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from shiftpay.core.exceptions import InvalidInputError, NoApplicableRateError, PayrollError
from shiftpay.core.logging_config import LogContext, get_logger
from shiftpay.core.models import PayrollSettings, Shift, WageRate
from shiftpay.core.payroll import (
    build_statement,
    calculate_shift_pay,
    current_period,
    period_containing,
    period_for,
    resolve_wage,
)
from shiftpay.core.storage import load_settings

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["payroll_api"])


@lru_cache(maxsize=1)
def get_payroll_settings() -> PayrollSettings:
    """Settings snapshot, loaded once per process."""
    return load_settings()


class WageResolveRequest(BaseModel):
    history: list[WageRate]
    on_date: datetime.date


class ShiftCalculateRequest(BaseModel):
    shift: Shift
    history: list[WageRate]


class StatementRequest(BaseModel):
    shifts: list[Shift]
    history: list[WageRate]
    year: int
    month: int
    closing_date: int | None = None
    employee_id: str | None = None


def _http_error(error: PayrollError) -> HTTPException:
    """Översätter motorns fel till HTTP-svar."""
    if isinstance(error, NoApplicableRateError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


def _closing_date(closing_date: int | None, settings: PayrollSettings) -> int:
    return settings.closing_date if closing_date is None else closing_date


def _period_payload(period) -> dict:
    payload = period.model_dump(mode="json")
    payload["start_date"] = period.start_date.isoformat()
    payload["end_date"] = period.end_date.isoformat()
    return payload


@router.get("/settings")
async def get_settings(settings: PayrollSettings = Depends(get_payroll_settings)):
    """Current payroll settings snapshot."""
    return settings.model_dump()


@router.post("/payroll/wages/resolve")
async def resolve_wage_for_date(payload: WageResolveRequest):
    """Rate in effect on a date (oldest rate if none has started yet)."""
    try:
        rate = resolve_wage(payload.history, payload.on_date)
    except PayrollError as e:
        raise _http_error(e) from e
    return rate.model_dump(mode="json")


@router.post("/payroll/shifts/calculate")
async def calculate_shift(payload: ShiftCalculateRequest):
    """Resolve the wage for the shift's date and calculate its pay."""
    try:
        rate = resolve_wage(payload.history, payload.shift.date, employee_id=payload.shift.employee_id)
        calculated = calculate_shift_pay(payload.shift, rate)
    except PayrollError as e:
        raise _http_error(e) from e
    return calculated.model_dump(mode="json")


@router.get("/payroll/period")
async def get_period(
    year: int,
    month: int,
    closing_date: int | None = None,
    settings: PayrollSettings = Depends(get_payroll_settings),
):
    """Period boundaries for a billing label year/month."""
    try:
        period = period_for(year, month, _closing_date(closing_date, settings))
    except InvalidInputError as e:
        raise _http_error(e) from e
    return _period_payload(period)


@router.get("/payroll/period/for-date")
async def get_period_for_date(
    on_date: datetime.date = Query(..., alias="date"),
    closing_date: int | None = None,
    settings: PayrollSettings = Depends(get_payroll_settings),
):
    """The period a calendar date belongs to."""
    try:
        period = period_containing(on_date, _closing_date(closing_date, settings))
    except InvalidInputError as e:
        raise _http_error(e) from e
    return _period_payload(period)


@router.get("/payroll/period/current")
async def get_current_period(
    closing_date: int | None = None,
    settings: PayrollSettings = Depends(get_payroll_settings),
):
    """The period containing today (server local time)."""
    try:
        period = current_period(_closing_date(closing_date, settings))
    except InvalidInputError as e:
        raise _http_error(e) from e
    return _period_payload(period)


@router.post("/payroll/statement")
async def create_statement(
    payload: StatementRequest,
    settings: PayrollSettings = Depends(get_payroll_settings),
):
    """Pay statement for one employee and one labeled period."""
    with LogContext(employee_id=payload.employee_id):
        try:
            period = period_for(payload.year, payload.month, _closing_date(payload.closing_date, settings))
            statement = build_statement(
                payload.shifts,
                payload.history,
                period,
                employee_id=payload.employee_id,
                company_name=settings.company_name,
            )
        except PayrollError as e:
            logger.warning("Statement %d-%02d rejected: %s", payload.year, payload.month, e)
            raise _http_error(e) from e

    return statement.model_dump(mode="json")
