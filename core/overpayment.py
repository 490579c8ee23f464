"""Polityka nadpłat: stała kwota bazowa, efekt nadpłaty i nadpisania dla pojedynczych miesięcy"""
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from config.constants import OverpaymentEffect
from core.amount import Amount
from core.errors import InvalidAmount, InvalidPeriod, MortgageError


def _as_amount(value) -> Amount:
    return value if isinstance(value, Amount) else Amount.of(value)


def _clean_overrides(raw: Optional[Mapping]) -> Dict[int, Amount]:
    """Odrzuca po cichu nadpisania z niedodatnim numerem miesiąca lub błędną kwotą"""
    cleaned: Dict[int, Amount] = {}
    for period, amount in (raw or {}).items():
        try:
            n = int(period)
        except (TypeError, ValueError):
            continue
        if n < 1:
            continue
        try:
            cleaned[n] = _as_amount(amount)
        except InvalidAmount:
            continue
    return cleaned


@dataclass(frozen=True)
class OverpaymentPolicy:
    base_amount: Amount
    effect: OverpaymentEffect = OverpaymentEffect.SHORTEN_TERM
    overrides: Mapping[int, Amount] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "base_amount", _as_amount(self.base_amount))
        try:
            object.__setattr__(self, "effect", OverpaymentEffect(self.effect))
        except ValueError as exc:
            raise MortgageError(f"Unknown overpayment effect: {self.effect!r}") from exc
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))

    @classmethod
    def create(cls, base_amount, effect=OverpaymentEffect.SHORTEN_TERM, overrides: Optional[Mapping] = None) -> "OverpaymentPolicy":
        return cls(_as_amount(base_amount), effect, _clean_overrides(overrides))

    @classmethod
    def no_overpayment(cls) -> "OverpaymentPolicy":
        return cls(Amount.zero(), OverpaymentEffect.SHORTEN_TERM)

    def get_extra_payment_for_period(self, period: int) -> Amount:
        return self.overrides.get(period, self.base_amount)

    def has_override(self, period: int) -> bool:
        return period in self.overrides

    def with_override(self, period: int, amount: Amount) -> "OverpaymentPolicy":
        if isinstance(period, bool) or not isinstance(period, int):
            raise InvalidPeriod(f"Period number must be an integer, got {period!r}")
        if period < 1:
            raise InvalidPeriod(f"Period number must be positive, got {period}")
        amount = _as_amount(amount)
        overrides = dict(self.overrides)
        # kwota równa bazowej = brak nadpisania
        if amount.equals(self.base_amount):
            overrides.pop(period, None)
        else:
            overrides[period] = amount
        return replace(self, overrides=overrides)

    def without_override(self, period: int) -> "OverpaymentPolicy":
        overrides = dict(self.overrides)
        overrides.pop(period, None)
        return replace(self, overrides=overrides)

    def with_base_amount(self, base_amount: Amount) -> "OverpaymentPolicy":
        return replace(self, base_amount=_as_amount(base_amount))

    def with_effect(self, effect: OverpaymentEffect) -> "OverpaymentPolicy":
        return replace(self, effect=effect)

    def has_any_overpayments(self) -> bool:
        return self.base_amount.is_positive() or len(self.overrides) > 0

    def overrides_as_record(self) -> Dict[int, float]:
        return {period: amount.to_float() for period, amount in sorted(self.overrides.items())}

    def total_planned_extra(self, periods: int) -> Amount:
        """Suma nadpłat zaplanowanych na miesiące 1..periods (bez ograniczenia saldem)"""
        total = Amount.zero()
        for period in range(1, periods + 1):
            total = total.add(self.get_extra_payment_for_period(period))
        return total

    @staticmethod
    def clamp_to_affordable(amount: Amount, remaining_balance: Amount, principal_portion: Amount) -> Amount:
        """Nadpłata nie może przekroczyć salda pozostałego po racie kapitałowej"""
        return amount.min(remaining_balance.subtract(principal_portion))
