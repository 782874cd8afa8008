"""Skiftlistor: ett skift per anställd och dag."""

from collections.abc import Iterable

from shiftpay.core.models import Shift


def upsert_shift(shifts: Iterable[Shift], shift: Shift) -> list[Shift]:
    """
    Returnerar en ny lista där skiftet lagts till eller ersatt ett tidigare.

    Ett skift för samma anställd och datum ersätts på sin gamla plats,
    annars läggs det nya skiftet sist. Ursprungslistan ändras inte.
    """
    result = []
    replaced = False

    for existing in shifts:
        if existing.employee_id == shift.employee_id and existing.date == shift.date:
            if not replaced:
                result.append(shift)
                replaced = True
            continue
        result.append(existing)

    if not replaced:
        result.append(shift)

    return result
