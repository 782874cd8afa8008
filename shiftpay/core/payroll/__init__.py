"""
Payroll-modul - timlön, skiftlön med nattillägg och löneperioder.

Exporterar alla publika funktioner.
"""

from .period import (
    PeriodLabel,
    calendar_month_range,
    closing_day_in_month,
    current_period,
    last_day_of_month,
    period_containing,
    period_for,
    period_label_for,
)
from .shift_pay import calculate_shift_pay, count_night_minutes, shift_minutes
from .shifts import upsert_shift
from .summary import (
    build_statement,
    calculate_shifts,
    dashboard_totals,
    summarize_calculated_shifts,
)
from .wages import active_wage_on, resolve_wage, sort_wage_history

__all__ = [
    # wages
    "resolve_wage",
    "active_wage_on",
    "sort_wage_history",
    # shift_pay
    "calculate_shift_pay",
    "count_night_minutes",
    "shift_minutes",
    # shifts
    "upsert_shift",
    # period
    "PeriodLabel",
    "period_for",
    "period_label_for",
    "period_containing",
    "current_period",
    "calendar_month_range",
    "closing_day_in_month",
    "last_day_of_month",
    # summary
    "calculate_shifts",
    "summarize_calculated_shifts",
    "build_statement",
    "dashboard_totals",
]
