"""Porównanie rat równych i malejących"""
from typing import Dict, Optional

import pandas as pd

from config.constants import PaymentStyle
from core.amount import Amount
from core.loan import Loan
from core.overpayment import OverpaymentPolicy
from core.schedule_generator import ScheduleResult, generate_schedule


def _results_by_style(loan: Loan, policy: Optional[OverpaymentPolicy]) -> Dict[PaymentStyle, ScheduleResult]:
    policy = policy or OverpaymentPolicy.no_overpayment()
    return {style: generate_schedule(loan.with_payment_style(style), policy) for style in PaymentStyle}


def compare_payment_styles(loan: Loan, policy: Optional[OverpaymentPolicy] = None) -> pd.DataFrame:
    """
    Kluczowe wskaźniki obu rodzajów rat dla tego samego kredytu i tej samej polityki nadpłat.
    Zwraca DataFrame z jednym wierszem na rodzaj rat.
    """
    rows = []
    for style, result in _results_by_style(loan, policy).items():
        first, last = result.entries[0], result.entries[-1]
        rows.append({
            "payment_style": style.value,
            "label": style.label,
            "first_payment": first.regular_payment.to_float(),
            "last_payment": last.regular_payment.to_float(),
            "total_paid": result.total_paid.to_float(),
            "total_interest": result.total_interest.to_float(),
            "interest_saved": result.interest_saved.to_float(),
            "actual_term_months": result.actual_term.periods,
        })
    return pd.DataFrame(rows)


def style_interest_difference(loan: Loan, policy: Optional[OverpaymentPolicy] = None) -> Amount:
    """O ile więcej odsetek kosztują raty równe niż malejące"""
    results = _results_by_style(loan, policy)
    return results[PaymentStyle.EQUAL].total_interest.subtract(results[PaymentStyle.DECREASING].total_interest)
