"""Miesiąc płatności, zawsze pierwszy dzień miesiąca"""
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from config.settings import DEFAULT_LOCALE
from core.errors import InvalidPeriod
from utils.date_utils import add_months
from utils.formatters import fmt_period_long, fmt_period_short


@dataclass(frozen=True, order=True)
class PeriodDate:
    year: int
    month: int

    def __post_init__(self):
        for name in ("year", "month"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidPeriod(f"Invalid date provided: {name}={v!r}")
        if not 1 <= self.month <= 12:
            raise InvalidPeriod(f"Invalid date provided: month={self.month}")
        if not 1 <= self.year <= 9999:
            raise InvalidPeriod(f"Invalid date provided: year={self.year}")

    @classmethod
    def from_year_month(cls, year: int, month: int) -> "PeriodDate":
        return cls(year, month)

    @classmethod
    def from_date(cls, d) -> "PeriodDate":
        if isinstance(d, datetime):
            d = d.date()
        if not isinstance(d, date):
            raise InvalidPeriod(f"Invalid date provided: {d!r}")
        return cls(d.year, d.month)

    @classmethod
    def current(cls, today: Optional[date] = None) -> "PeriodDate":
        return cls.from_date(today if today is not None else date.today())

    def to_date(self) -> date:
        return date(self.year, self.month, 1)

    def add_months(self, months: int) -> "PeriodDate":
        try:
            return PeriodDate.from_date(add_months(self.to_date(), months))
        except (ValueError, OverflowError) as exc:
            raise InvalidPeriod(f"Date out of range: {self} + {months} months") from exc

    def subtract_months(self, months: int) -> "PeriodDate":
        return self.add_months(-months)

    def is_before(self, other: "PeriodDate") -> bool:
        return self < other

    def is_after(self, other: "PeriodDate") -> bool:
        return self > other

    def to_display_string(self, locale: str = DEFAULT_LOCALE) -> str:
        return fmt_period_long(self.year, self.month, locale)

    def to_short_string(self) -> str:
        return fmt_period_short(self.year, self.month)

    def to_input_string(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    def __str__(self) -> str:
        return self.to_date().isoformat()
