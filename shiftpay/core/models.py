import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from shiftpay.core.config import (
    DEFAULT_CLOSING_DATE,
    DEFAULT_COMPANY_NAME,
    DEFAULT_NIGHT_SHIFT_START,
    END_OF_MONTH_CLOSING_DATE,
    MIN_CLOSING_DATE,
)


def _truncate_to_date(value):
    """Drop time-of-day from datetimes and ISO datetime strings."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, str) and len(value.strip()) > 10:
        try:
            return datetime.datetime.fromisoformat(value.strip().replace("Z", "+00:00")).date()
        except ValueError:
            # Let pydantic report the bad value
            return value
    return value


class WageRate(BaseModel):
    """One entry in an employee's append-only wage history."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    employee_id: str
    hourly_wage: int
    transportation_fee_per_day: int = 0
    effective_from: datetime.date

    @field_validator("effective_from", mode="before")
    @classmethod
    def truncate_effective_from(cls, value):
        return _truncate_to_date(value)


class Shift(BaseModel):
    """A worked shift. One per employee and calendar date."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    employee_id: str
    date: datetime.date
    start_time: str  # HH:MM
    end_time: str  # HH:MM, <= start_time means next day
    break_minutes: int = 0
    note: str | None = None

    @field_validator("date", mode="before")
    @classmethod
    def truncate_date(cls, value):
        return _truncate_to_date(value)


class CalculatedShift(BaseModel):
    """Pay breakdown for one shift. Derived, never stored."""

    model_config = ConfigDict(frozen=True)

    shift: Shift
    hourly_wage: int | float
    transportation_fee: int | float
    gross_minutes: int
    gross_night_minutes: int
    total_minutes: int
    normal_minutes: float
    night_minutes: float
    salary: int

    @property
    def date(self) -> datetime.date:
        return self.shift.date

    @computed_field
    @property
    def total_pay(self) -> int | float:
        """Salary plus the flat transportation allowance for the day."""
        return self.salary + self.transportation_fee


class PayrollSettings(BaseModel):
    """Global payroll settings snapshot."""

    model_config = ConfigDict(frozen=True)

    company_name: str = DEFAULT_COMPANY_NAME
    closing_date: int = Field(DEFAULT_CLOSING_DATE, ge=MIN_CLOSING_DATE, le=END_OF_MONTH_CLOSING_DATE)
    night_shift_start: str = DEFAULT_NIGHT_SHIFT_START  # display only


class PayrollPeriod(BaseModel):
    """
    A payroll period and its billing label.

    year/month is the label used for display and statement titles.
    Use start/end (or contains()) when filtering records.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime.datetime
    end: datetime.datetime
    year: int
    month: int

    @property
    def start_date(self) -> datetime.date:
        return self.start.date()

    @property
    def end_date(self) -> datetime.date:
        return self.end.date()

    @computed_field
    @property
    def label(self) -> str:
        return f"{self.year}-{self.month:02d}"

    def contains(self, value: datetime.date | datetime.datetime) -> bool:
        """True if a date (midnight) or datetime falls inside [start, end]."""
        if not isinstance(value, datetime.datetime):
            value = datetime.datetime.combine(value, datetime.time(0, 0))
        elif value.tzinfo is not None:
            value = value.replace(tzinfo=None)
        return self.start <= value <= self.end


class StatementTotals(BaseModel):
    """Summed figures for a list of calculated shifts."""

    salary: int = 0
    transportation: int | float = 0
    total_minutes: int = 0
    normal_minutes: float = 0.0
    night_minutes: float = 0.0
    days: int = 0

    @computed_field
    @property
    def total_pay(self) -> int | float:
        return self.salary + self.transportation

    @property
    def total_hours(self) -> float:
        return self.total_minutes / 60

    @property
    def night_hours(self) -> float:
        return self.night_minutes / 60


class PayrollStatement(BaseModel):
    """Everything a pay slip needs for one employee and one period."""

    employee_id: str | None = None
    company_name: str = DEFAULT_COMPANY_NAME
    period: PayrollPeriod
    shifts: list[CalculatedShift] = Field(default_factory=list)
    totals: StatementTotals = Field(default_factory=StatementTotals)


class DashboardTotals(BaseModel):
    """Company-wide totals for the dashboard."""

    active_employee_count: int = 0
    shift_count: int = 0
    total_salary: int | float = 0
    total_hours: int = 0
