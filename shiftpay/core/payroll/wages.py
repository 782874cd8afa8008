"""Timlön ur lönehistorik."""

import datetime
import logging
from collections.abc import Iterable, Sequence

from shiftpay.core.exceptions import NoApplicableRateError
from shiftpay.core.models import WageRate
from shiftpay.core.time_utils import as_date

logger = logging.getLogger(__name__)


def active_wage_on(history: Iterable[WageRate], on_date: datetime.date) -> WageRate | None:
    """
    Hämtar lönen som gällde på ett datum, utan fallback.

    Bland alla poster med effective_from <= on_date (båda trunkerade till
    kalenderdag) väljs den med senast effective_from. Flera poster samma dag:
    den som kommer sist i historiken vinner, historiken är append-only så
    den senast tillagda posten ersätter en tidigare samma dag.

    Args:
        history: Lönehistorik för en anställd, valfri ordning
        on_date: Datum (date eller datetime)

    Returns:
        Gällande WageRate, eller None om alla poster ligger i framtiden
    """
    target = as_date(on_date, "on_date")
    best = None
    best_from = None

    for rate in history:
        effective_from = as_date(rate.effective_from, "effective_from")
        if effective_from > target:
            continue
        if best is None or effective_from >= best_from:
            best, best_from = rate, effective_from

    return best


def resolve_wage(
    history: Sequence[WageRate],
    on_date: datetime.date,
    employee_id: str | None = None,
) -> WageRate:
    """
    Hämtar lönen som ska användas för ett skift på ett visst datum.

    Samma urval som active_wage_on(). Finns ingen post som redan börjat
    gälla används den äldsta posten i historiken (skydd mot att startlönen
    registrerats med för sent datum). Även där vinner den sista av flera
    poster med samma datum.

    Args:
        history: Lönehistorik för en anställd
        on_date: Skiftets datum
        employee_id: Används bara i felmeddelandet

    Returns:
        WageRate att räkna med

    Raises:
        NoApplicableRateError: Om historiken är tom
    """
    history = list(history)
    if not history:
        logger.error("No wage history for employee %s on %s", employee_id, on_date)
        raise NoApplicableRateError(employee_id)

    active = active_wage_on(history, on_date)
    if active is not None:
        return active

    oldest = None
    oldest_from = None
    for rate in history:
        effective_from = as_date(rate.effective_from, "effective_from")
        if oldest is None or effective_from <= oldest_from:
            oldest, oldest_from = rate, effective_from

    logger.warning(
        "No wage effective on %s for employee %s, falling back to oldest rate from %s",
        as_date(on_date, "on_date"),
        getattr(oldest, "employee_id", None),
        oldest_from,
    )
    return oldest


def sort_wage_history(history: Iterable[WageRate]) -> list[WageRate]:
    """Lönehistorik sorterad nyast först (stabil för poster med samma datum)."""
    return sorted(history, key=lambda rate: as_date(rate.effective_from, "effective_from"), reverse=True)
