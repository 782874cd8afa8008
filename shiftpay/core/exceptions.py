# shiftpay/core/exceptions.py
"""
Error types raised by the payroll engine.

The engine never swallows these; callers (routes, reports) decide how to
present them.
"""


class PayrollError(Exception):
    """Base class for payroll engine failures."""

    pass


class InvalidInputError(PayrollError, ValueError):
    """Malformed input: bad time string, negative break, closing date out of range."""

    pass


class NoApplicableRateError(PayrollError, LookupError):
    """The employee has no wage rate at all."""

    def __init__(self, employee_id: str | None = None):
        self.employee_id = employee_id
        if employee_id is None:
            message = "Wage history is empty"
        else:
            message = f"Wage history is empty for employee {employee_id!r}"
        super().__init__(message)
