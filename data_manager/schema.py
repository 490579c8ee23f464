from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Optional, Union

from config.settings import (
    DEFAULT_EFFECT, DEFAULT_PAYMENT_STYLE, DEFAULT_PRINCIPAL, DEFAULT_RATE, DEFAULT_TERM_MONTHS,
)


@dataclass
class LoanInput:
    principal: float = DEFAULT_PRINCIPAL
    annual_rate_percent: float = DEFAULT_RATE
    term_months: int = DEFAULT_TERM_MONTHS
    payment_style: str = DEFAULT_PAYMENT_STYLE  # equal / decreasing
    start_date: Optional[Union[date, str]] = None


@dataclass
class OverpaymentInput:
    base_extra: float = 0.0
    effect: str = DEFAULT_EFFECT  # shorten_term / reduce_payment
    overrides: Dict[int, float] = field(default_factory=dict)
