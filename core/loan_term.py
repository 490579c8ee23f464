"""Okres kredytowania w miesiącach (1-600)"""
from dataclasses import dataclass

from config.constants import MAX_TERM_MONTHS
from config.settings import DEFAULT_LOCALE
from core.errors import InvalidTerm
from utils.formatters import fmt_months


def _whole_months(value) -> int:
    if isinstance(value, bool):
        raise InvalidTerm("Loan term must be a whole number of months")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise InvalidTerm("Loan term must be a whole number of months")


@dataclass(frozen=True, order=True)
class LoanTerm:
    periods: int

    def __post_init__(self):
        months = _whole_months(self.periods)
        if months <= 0:
            raise InvalidTerm("Loan term must be positive")
        if months > MAX_TERM_MONTHS:
            raise InvalidTerm(f"Loan term cannot exceed {MAX_TERM_MONTHS} months ({MAX_TERM_MONTHS // 12} years)")
        object.__setattr__(self, "periods", months)

    @classmethod
    def from_months(cls, months) -> "LoanTerm":
        return cls(months)

    @classmethod
    def from_years(cls, years) -> "LoanTerm":
        if isinstance(years, bool) or not isinstance(years, (int, float)):
            raise InvalidTerm("Loan term must be a whole number of months")
        return cls(years * 12)

    @property
    def months(self) -> int:
        return self.periods

    @property
    def years(self) -> float:
        return self.periods / 12

    @property
    def full_years(self) -> int:
        return self.periods // 12

    @property
    def remaining_months(self) -> int:
        return self.periods % 12

    def add(self, other: "LoanTerm") -> "LoanTerm":
        return LoanTerm(self.periods + other.periods)

    def subtract(self, other: "LoanTerm") -> "LoanTerm":
        # okres zerowy nie jest reprezentowalny
        if self.periods - other.periods <= 0:
            raise InvalidTerm("Cannot subtract more months than available")
        return LoanTerm(self.periods - other.periods)

    def to_display_string(self, locale: str = DEFAULT_LOCALE) -> str:
        return fmt_months(self.periods, locale)

    def __str__(self) -> str:
        return f"{self.periods} months"
