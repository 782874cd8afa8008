"""Löneperioder med brytdag."""

import calendar
import datetime
import logging
from typing import NamedTuple

from shiftpay.core.config import END_OF_MONTH_CLOSING_DATE, PERIOD_END_MICROSECOND
from shiftpay.core.exceptions import InvalidInputError
from shiftpay.core.models import PayrollPeriod
from shiftpay.core.time_utils import as_date
from shiftpay.core.validators import validate_closing_date, validate_year_month

logger = logging.getLogger(__name__)

_START_OF_DAY = datetime.time(0, 0)
_END_OF_DAY = datetime.time(23, 59, 59, PERIOD_END_MICROSECOND)


class PeriodLabel(NamedTuple):
    """Periodens etikett (år, månad), t.ex. för rubriken på lönebeskedet."""

    year: int
    month: int


def last_day_of_month(year: int, month: int) -> int:
    """Sista dagen i månaden (28-31)."""
    return calendar.monthrange(year, month)[1]


def closing_day_in_month(year: int, month: int, closing_date: int) -> int:
    """
    Brytdagen i en given månad.

    En brytdag som inte finns i månaden (t.ex. 30 i februari) flyttas till
    månadens sista dag, så att perioderna ligger kant i kant utan glapp
    eller överlapp.
    """
    return min(closing_date, last_day_of_month(year, month))


def calendar_month_range(year: int, month: int) -> tuple[datetime.datetime, datetime.datetime]:
    """Hel kalendermånad: dag 1 00:00:00 till sista dagen 23:59:59.999."""
    year, month = validate_year_month(year, month)
    first = datetime.date(year, month, 1)
    last = datetime.date(year, month, last_day_of_month(year, month))
    return datetime.datetime.combine(first, _START_OF_DAY), datetime.datetime.combine(last, _END_OF_DAY)


def period_for(year: int, month: int, closing_date: int) -> PayrollPeriod:
    """
    Bygger löneperioden med etikett year/month.

    - closing_date >= 31: hela kalendermånaden
    - annars: dagen efter föregående månads brytdag 00:00:00 till
      månadens brytdag 23:59:59.999

    Exempel (brytdag 20): period_for(2025, 1, 20) = 2024-12-21 .. 2025-01-20

    Raises:
        InvalidInputError: Ogiltigt år/månad/brytdag
    """
    year, month = validate_year_month(year, month)
    closing_date = validate_closing_date(closing_date)

    if closing_date >= END_OF_MONTH_CLOSING_DATE:
        start, end = calendar_month_range(year, month)
        return PayrollPeriod(start=start, end=end, year=year, month=month)

    prev_year, prev_month = (year - 1, 12) if month == 1 else (year, month - 1)
    if prev_year < datetime.MINYEAR:
        logger.error("Period %d-%02d starts before year %d", year, month, datetime.MINYEAR)
        raise InvalidInputError(f"Period {year}-{month:02d} starts before year {datetime.MINYEAR}")

    prev_closing = datetime.date(prev_year, prev_month, closing_day_in_month(prev_year, prev_month, closing_date))
    start_date = prev_closing + datetime.timedelta(days=1)
    end_date = datetime.date(year, month, closing_day_in_month(year, month, closing_date))

    return PayrollPeriod(
        start=datetime.datetime.combine(start_date, _START_OF_DAY),
        end=datetime.datetime.combine(end_date, _END_OF_DAY),
        year=year,
        month=month,
    )


def period_label_for(value: datetime.date | datetime.datetime, closing_date: int) -> PeriodLabel:
    """
    Vilken periods etikett ett datum hör till.

    - closing_date >= 31: datumets egen månad
    - dag > brytdag: nästa månad (december -> januari nästa år)
    - annars: datumets egen månad

    Tid på dygnet ignoreras. En datetime med tidszon räknas på sitt eget
    lokala datum, ingen omräkning görs.
    """
    closing_date = validate_closing_date(closing_date)
    day = as_date(value)

    if closing_date >= END_OF_MONTH_CLOSING_DATE or day.day <= closing_date:
        return PeriodLabel(day.year, day.month)

    if day.month == 12:
        if day.year >= datetime.MAXYEAR:
            logger.error("Date %s rolls into a period after year %d", day, datetime.MAXYEAR)
            raise InvalidInputError(f"{day} belongs to a period after year {datetime.MAXYEAR}")
        return PeriodLabel(day.year + 1, 1)

    return PeriodLabel(day.year, day.month + 1)


def period_containing(value: datetime.date | datetime.datetime, closing_date: int) -> PayrollPeriod:
    """Hela löneperioden som ett datum ligger i."""
    label = period_label_for(value, closing_date)
    return period_for(label.year, label.month, closing_date)


def current_period(closing_date: int, now: datetime.datetime | None = None) -> PayrollPeriod:
    """
    Löneperioden för "nu".

    Args:
        closing_date: Brytdag 1-31 (31 = månadsskifte)
        now: Tidpunkt att räkna från, default datetime.now() (lokal tid)
    """
    if now is None:
        now = datetime.datetime.now()
    return period_containing(now, closing_date)
