"""Lön per skift med nattillägg."""

import logging
import math

from shiftpay.core.config import (
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    NIGHT_END_MINUTE,
    NIGHT_PREMIUM_MULTIPLIER,
    NIGHT_START_MINUTE,
)
from shiftpay.core.models import CalculatedShift, Shift, WageRate
from shiftpay.core.time_utils import parse_minutes_of_day
from shiftpay.core.validators import validate_break_minutes, validate_money

logger = logging.getLogger(__name__)

#: Nattfönstrets längd i minuter (22:00 -> 05:00 = 420).
_NIGHT_WINDOW_LENGTH = MINUTES_PER_DAY - NIGHT_START_MINUTE + NIGHT_END_MINUTE


def shift_minutes(start_time: str, end_time: str) -> tuple[int, int]:
    """
    Omvandlar start/slut till minuter efter skiftdagens midnatt.

    Slut <= start betyder att skiftet går över midnatt, slutet flyttas då
    ett dygn framåt. Samma start och slut blir alltså ett 24-timmarspass,
    aldrig ett pass på noll minuter.

    Returns:
        (start_minute, end_minute) där 0 <= start < 1440 och start < end <= start + 1440
    """
    start_min = parse_minutes_of_day(start_time, "start_time")
    end_min = parse_minutes_of_day(end_time, "end_time")

    # Pass över midnatt
    if end_min <= start_min:
        end_min += MINUTES_PER_DAY

    return start_min, end_min


def count_night_minutes(start_min: int, end_min: int) -> int:
    """
    Räknar nattminuter (22:00-05:00) i intervallet [start_min, end_min).

    Samma resultat som att gå igenom varje minut m och räkna de där
    m % 1440 >= 1320 eller < 300, men via överlapp mot nattfönstret
    för varje berört dygn.
    """
    if end_min <= start_min:
        return 0

    total = 0
    # Fönstret som börjar 22:00 dygnet före täcker 00:00-05:00
    first_day = start_min // MINUTES_PER_DAY - 1
    last_day = (end_min - 1) // MINUTES_PER_DAY

    for day in range(first_day, last_day + 1):
        window_start = day * MINUTES_PER_DAY + NIGHT_START_MINUTE
        window_end = window_start + _NIGHT_WINDOW_LENGTH

        overlap = min(end_min, window_end) - max(start_min, window_start)
        if overlap > 0:
            total += overlap

    return total


def calculate_shift_pay(shift: Shift, rate: WageRate) -> CalculatedShift:
    """
    Beräknar minuter och lön för ett skift.

    Rasten dras av proportionellt mot andelen nattminuter i passet
    (inte från normaltid först). Lönen avrundas nedåt en gång, på
    summan av normal- och nattdelen. Reseersättningen ingår inte i
    salary utan läggs på per skift (CalculatedShift.total_pay).

    Args:
        shift: Skiftet (date, start_time, end_time, break_minutes)
        rate: Lön som gäller för skiftets datum (hourly_wage,
            transportation_fee_per_day)

    Returns:
        CalculatedShift med gross_*, total_minutes, normal_minutes,
        night_minutes och salary

    Raises:
        InvalidInputError: Felaktig tid, negativ rast eller negativ lön
    """
    start_min, end_min = shift_minutes(shift.start_time, shift.end_time)
    break_minutes = validate_break_minutes(shift.break_minutes)
    hourly_wage = validate_money(rate.hourly_wage, "hourly_wage")
    transportation_fee = validate_money(getattr(rate, "transportation_fee_per_day", 0), "transportation_fee_per_day")

    gross_minutes = end_min - start_min
    gross_night_minutes = count_night_minutes(start_min, end_min)

    net_total_minutes = max(0, gross_minutes - break_minutes)

    night_ratio = gross_night_minutes / gross_minutes if gross_minutes > 0 else 0.0
    net_night_minutes = max(0.0, gross_night_minutes - break_minutes * night_ratio)
    net_normal_minutes = net_total_minutes - net_night_minutes

    salary = math.floor(
        (net_normal_minutes / MINUTES_PER_HOUR) * hourly_wage
        + (net_night_minutes / MINUTES_PER_HOUR) * hourly_wage * NIGHT_PREMIUM_MULTIPLIER
    )

    logger.debug(
        "Shift %s %s-%s: gross=%d night=%d break=%d -> normal=%.2f night=%.2f salary=%d",
        shift.date,
        shift.start_time,
        shift.end_time,
        gross_minutes,
        gross_night_minutes,
        break_minutes,
        net_normal_minutes,
        net_night_minutes,
        salary,
    )

    return CalculatedShift(
        shift=shift,
        hourly_wage=hourly_wage,
        transportation_fee=transportation_fee,
        gross_minutes=gross_minutes,
        gross_night_minutes=gross_night_minutes,
        total_minutes=net_total_minutes,
        normal_minutes=net_normal_minutes,
        night_minutes=net_night_minutes,
        salary=salary,
    )
