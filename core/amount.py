"""Kwota pieniężna: nieujemna, zaokrąglana do groszy przy każdej operacji"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from config.settings import AMOUNT_PRECISION, DEFAULT_LOCALE
from core.errors import DivisionByZero, InvalidAmount
from utils.formatters import fmt_amount

CENT = Decimal(10) ** -AMOUNT_PRECISION


def to_decimal(value) -> Decimal:
    """Liczba -> Decimal; float przez repr, żeby 0.1 znaczyło Decimal('0.1')"""
    if isinstance(value, bool):
        raise TypeError("bool is not a number")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise TypeError(f"not a number: {value!r}") from exc


@dataclass(frozen=True, order=True)
class Amount:
    value: Decimal

    def __post_init__(self):
        try:
            raw = to_decimal(self.value)
        except TypeError as exc:
            raise InvalidAmount(f"Money amount must be a number, got {self.value!r}") from exc
        if not raw.is_finite():
            raise InvalidAmount("Money amount must be a finite number")
        if raw < 0:
            raise InvalidAmount("Money amount cannot be negative")
        rounded = raw.quantize(CENT, rounding=ROUND_HALF_UP)
        if rounded.is_zero():
            rounded = abs(rounded)
        object.__setattr__(self, "value", rounded)

    @classmethod
    def of(cls, value) -> "Amount":
        return cls(value)

    @classmethod
    def zero(cls) -> "Amount":
        return cls(Decimal("0"))

    def add(self, other: "Amount") -> "Amount":
        return Amount(self.value + other.value)

    def subtract(self, other: "Amount") -> "Amount":
        return Amount(self.value - other.value)

    def multiply(self, factor) -> "Amount":
        return Amount(self.value * _factor(factor))

    def divide(self, divisor) -> "Amount":
        d = _factor(divisor)
        if d == 0:
            raise DivisionByZero("Cannot divide by zero")
        return Amount(self.value / d)

    def greater_than(self, other: "Amount") -> bool:
        return self.value > other.value

    def less_than(self, other: "Amount") -> bool:
        return self.value < other.value

    def equals(self, other: "Amount") -> bool:
        return self.value == other.value

    def is_zero(self) -> bool:
        return self.value == 0

    def is_positive(self) -> bool:
        return self.value > 0

    def min(self, other: "Amount") -> "Amount":
        return other if other.value < self.value else self

    def to_float(self) -> float:
        return float(self.value)

    def to_display_string(self, locale: str = DEFAULT_LOCALE) -> str:
        return fmt_amount(self.value, locale=locale)

    def __add__(self, other: "Amount") -> "Amount":
        return self.add(other)

    def __sub__(self, other: "Amount") -> "Amount":
        return self.subtract(other)

    def __str__(self) -> str:
        return str(self.value)


def _factor(value) -> Decimal:
    try:
        d = to_decimal(value)
    except TypeError as exc:
        raise InvalidAmount(f"Factor must be a number, got {value!r}") from exc
    if not d.is_finite():
        raise InvalidAmount("Factor must be a finite number")
    return d
