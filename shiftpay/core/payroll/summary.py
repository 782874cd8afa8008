"""Sammanställningar: lönebesked per period och dashboard-summor."""

import logging
from collections.abc import Iterable, Mapping, Sequence

from shiftpay.core.config import DEFAULT_COMPANY_NAME, MINUTES_PER_HOUR
from shiftpay.core.models import (
    CalculatedShift,
    DashboardTotals,
    PayrollPeriod,
    PayrollStatement,
    Shift,
    StatementTotals,
    WageRate,
)

from .shift_pay import calculate_shift_pay
from .wages import resolve_wage

logger = logging.getLogger(__name__)


def calculate_shifts(shifts: Iterable[Shift], history: Sequence[WageRate]) -> list[CalculatedShift]:
    """
    Räknar lön för varje skift med den lön som gällde på skiftets datum.

    Raises:
        NoApplicableRateError: Om det finns skift men ingen lönehistorik
        InvalidInputError: Om något skift har felaktiga tider/rast
    """
    calculated = []
    for shift in shifts:
        rate = resolve_wage(history, shift.date, employee_id=shift.employee_id)
        calculated.append(calculate_shift_pay(shift, rate))
    return calculated


def summarize_calculated_shifts(calculated: Iterable[CalculatedShift]) -> StatementTotals:
    """
    Summerar beräknade skift.

    Returns:
        StatementTotals med:
            - salary: Summa lön (nattillägg ingår)
            - transportation: Summa reseersättning (en per skift)
            - total_minutes / normal_minutes / night_minutes: Nettominuter efter rast
            - days: Antal skift
    Inga skift ger nollor.
    """
    salary = 0
    transportation = 0
    total_minutes = 0
    normal_minutes = 0.0
    night_minutes = 0.0
    days = 0

    for shift in calculated:
        salary += shift.salary
        transportation += shift.transportation_fee
        total_minutes += shift.total_minutes
        normal_minutes += shift.normal_minutes
        night_minutes += shift.night_minutes
        days += 1

    return StatementTotals(
        salary=salary,
        transportation=transportation,
        total_minutes=total_minutes,
        normal_minutes=normal_minutes,
        night_minutes=night_minutes,
        days=days,
    )


def build_statement(
    shifts: Iterable[Shift],
    history: Sequence[WageRate],
    period: PayrollPeriod,
    employee_id: str | None = None,
    company_name: str = DEFAULT_COMPANY_NAME,
) -> PayrollStatement:
    """
    Bygger lönebeskedet för en anställd och en löneperiod.

    Skiften filtreras på periodens start/end (inte på etiketten
    year/month) och sorteras på datum.

    Args:
        shifts: Den anställdes skift, gärna fler än perioden
        history: Den anställdes lönehistorik
        period: Perioden från period_for()/current_period()
        employee_id: Om satt räknas bara den anställdes skift
        company_name: Visas på lönebeskedet

    Returns:
        PayrollStatement med beräknade skift och totaler
    """
    in_period = [
        s for s in shifts if period.contains(s.date) and (employee_id is None or s.employee_id == employee_id)
    ]
    in_period.sort(key=lambda s: s.date)

    calculated = calculate_shifts(in_period, history) if in_period else []
    totals = summarize_calculated_shifts(calculated)

    logger.info(
        "Built statement %s for employee %s: %d shifts, total pay %s",
        period.label,
        employee_id,
        totals.days,
        totals.total_pay,
    )

    return PayrollStatement(
        employee_id=employee_id,
        company_name=company_name,
        period=period,
        shifts=calculated,
        totals=totals,
    )


def dashboard_totals(
    shifts: Iterable[Shift],
    wages_by_employee: Mapping[str, Sequence[WageRate]],
    active_employee_count: int = 0,
) -> DashboardTotals:
    """
    Summor för översikten: lön + reseersättning för alla skift och timmar.

    total_hours avrundas nedåt till hela timmar.

    Args:
        shifts: Alla skift i den visade perioden, alla anställda
        wages_by_employee: employee_id -> lönehistorik
        active_employee_count: Antal aktiva anställda (för visning)
    """
    total_salary = 0
    total_minutes = 0
    shift_count = 0

    for shift in shifts:
        history = wages_by_employee.get(shift.employee_id, ())
        rate = resolve_wage(history, shift.date, employee_id=shift.employee_id)
        calculated = calculate_shift_pay(shift, rate)

        total_salary += calculated.total_pay
        total_minutes += calculated.total_minutes
        shift_count += 1

    return DashboardTotals(
        active_employee_count=active_employee_count,
        shift_count=shift_count,
        total_salary=total_salary,
        total_hours=total_minutes // MINUTES_PER_HOUR,
    )
