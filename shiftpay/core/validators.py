import logging
from typing import Any

from shiftpay.core.config import END_OF_MONTH_CLOSING_DATE, MIN_CLOSING_DATE
from shiftpay.core.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


def _is_int(value: Any) -> bool:
    # bool är en subklass av int men aldrig ett giltigt värde här
    return isinstance(value, int) and not isinstance(value, bool)


def validate_closing_date(closing_date: Any) -> int:
    """
    Säkerställ att brytdagen är ett heltal mellan 1 och 31.

    31 betyder "sista dagen i månaden". Returnerar värdet om det är giltigt,
    annars kastas InvalidInputError.
    """
    if not _is_int(closing_date) or not MIN_CLOSING_DATE <= closing_date <= END_OF_MONTH_CLOSING_DATE:
        logger.error("Rejected closing date %r", closing_date)
        raise InvalidInputError(
            f"closing_date must be an integer {MIN_CLOSING_DATE}-{END_OF_MONTH_CLOSING_DATE}, got {closing_date!r}"
        )
    return closing_date


def validate_break_minutes(break_minutes: Any) -> int:
    """Rast i minuter måste vara ett icke-negativt heltal."""
    if not _is_int(break_minutes) or break_minutes < 0:
        logger.error("Rejected break minutes %r", break_minutes)
        raise InvalidInputError(f"break_minutes must be a non-negative integer, got {break_minutes!r}")
    return break_minutes


def validate_money(amount: Any, field_name: str) -> int | float:
    """Belopp (timlön, reseersättning) får inte vara negativa eller icke-numeriska."""
    if isinstance(amount, bool) or not isinstance(amount, (int, float)) or amount != amount or amount < 0:
        logger.error("Rejected %s %r", field_name, amount)
        raise InvalidInputError(f"{field_name} must be a non-negative number, got {amount!r}")
    return amount


def validate_year_month(year: Any, month: Any) -> tuple[int, int]:
    """
    Validerar år och månad för en löneperiod.

    - year: 1..9999 (datetime-gränserna). Januari år 1 saknar föregående
      månad och avvisas därför när perioden inte är hel månad, se period.py.
    - month: 1..12
    """
    if not _is_int(year) or not 1 <= year <= 9999:
        logger.error("Rejected year %r", year)
        raise InvalidInputError(f"year must be an integer 1-9999, got {year!r}")
    if not _is_int(month) or not 1 <= month <= 12:
        logger.error("Rejected month %r", month)
        raise InvalidInputError(f"month must be an integer 1-12, got {month!r}")
    return year, month
