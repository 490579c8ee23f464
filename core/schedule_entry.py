"""Pojedyncza pozycja harmonogramu spłat"""
from dataclasses import dataclass, replace
from typing import Dict

from core.amount import Amount
from core.errors import InvalidAmount, InvalidPeriod
from core.period_date import PeriodDate


@dataclass(frozen=True)
class ScheduleEntry:
    period_number: int
    date: PeriodDate
    principal_portion: Amount
    interest_portion: Amount
    extra_payment: Amount
    remaining_balance: Amount
    is_override: bool = False

    def __post_init__(self):
        if self.period_number < 1:
            raise InvalidPeriod("Period number must be positive")
        for name in ("principal_portion", "interest_portion", "extra_payment", "remaining_balance"):
            if not isinstance(getattr(self, name), Amount):
                raise InvalidAmount(f"{name} must be an Amount")

    @property
    def total_payment(self) -> Amount:
        return self.principal_portion.add(self.interest_portion).add(self.extra_payment)

    @property
    def regular_payment(self) -> Amount:
        return self.principal_portion.add(self.interest_portion)

    @property
    def total_principal_reduction(self) -> Amount:
        return self.principal_portion.add(self.extra_payment)

    @property
    def opening_balance(self) -> Amount:
        return self.remaining_balance.add(self.total_principal_reduction)

    def has_extra_payment(self) -> bool:
        return self.extra_payment.is_positive()

    def is_final_payment(self) -> bool:
        return self.remaining_balance.is_zero()

    def with_extra_payment(self, amount: Amount, is_override: bool = False) -> "ScheduleEntry":
        """Ta sama pozycja z inną nadpłatą, ograniczoną do salda sprzed spłaty"""
        opening = self.opening_balance
        max_extra = opening.subtract(self.principal_portion)
        actual = amount.min(max_extra)
        return replace(
            self,
            extra_payment=actual,
            remaining_balance=max_extra.subtract(actual),
            is_override=is_override,
        )

    def to_record(self) -> Dict:
        return {
            "period": self.period_number,
            "date": self.date.to_date(),
            "principal_portion": self.principal_portion.to_float(),
            "interest_portion": self.interest_portion.to_float(),
            "total_payment": self.total_payment.to_float(),
            "extra_payment": self.extra_payment.to_float(),
            "remaining_balance": self.remaining_balance.to_float(),
            "override_amount": self.extra_payment.to_float() if self.is_override else None,
        }
