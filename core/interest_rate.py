"""Roczna stopa procentowa (0-100%)"""
from dataclasses import dataclass
from decimal import Decimal

from config.constants import MAX_RATE_PERCENT
from core.amount import to_decimal
from core.errors import InvalidRate
from utils.formatters import fmt_rate

_HUNDRED = Decimal(100)
_MONTHS = Decimal(12)


@dataclass(frozen=True, order=True)
class InterestRate:
    annual_percentage: Decimal

    def __post_init__(self):
        try:
            rate = to_decimal(self.annual_percentage)
        except TypeError as exc:
            raise InvalidRate(f"Interest rate must be a number, got {self.annual_percentage!r}") from exc
        if not rate.is_finite():
            raise InvalidRate("Interest rate must be a finite number")
        if rate < 0:
            raise InvalidRate("Interest rate cannot be negative")
        if rate > MAX_RATE_PERCENT:
            raise InvalidRate(f"Interest rate cannot exceed {MAX_RATE_PERCENT}%")
        object.__setattr__(self, "annual_percentage", rate)

    @classmethod
    def from_percentage(cls, percentage) -> "InterestRate":
        return cls(percentage)

    @classmethod
    def from_decimal(cls, fraction) -> "InterestRate":
        try:
            d = to_decimal(fraction)
        except TypeError as exc:
            raise InvalidRate(f"Interest rate must be a number, got {fraction!r}") from exc
        if not d.is_finite():
            raise InvalidRate("Interest rate must be a finite number")
        return cls(d * _HUNDRED)

    @classmethod
    def zero(cls) -> "InterestRate":
        return cls(Decimal(0))

    @property
    def annual_decimal(self) -> Decimal:
        return self.annual_percentage / _HUNDRED

    @property
    def monthly_decimal(self) -> Decimal:
        return self.annual_decimal / _MONTHS

    @property
    def monthly_percentage(self) -> Decimal:
        return self.annual_percentage / _MONTHS

    def is_zero(self) -> bool:
        return self.annual_percentage == 0

    def is_positive(self) -> bool:
        return self.annual_percentage > 0

    def __str__(self) -> str:
        return fmt_rate(self.annual_percentage)
