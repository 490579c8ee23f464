"""
Warstwa aplikacyjna: surowe dane z formularza -> obiekty domenowe -> harmonogram -> proste słowniki.

Tu i tylko tu wyjątki domenowe zamieniane są na None / poprzedni wynik / listę komunikatów.
"""
import math
from dataclasses import replace
from typing import Dict, Optional

import pandas as pd

from config.constants import SCHEDULE_COLUMNS
from core.amount import Amount
from core.errors import MortgageError
from core.interest_rate import InterestRate
from core.loan import Loan
from core.loan_term import LoanTerm
from core.overpayment import OverpaymentPolicy
from core.period_date import PeriodDate
from core.schedule_generator import ScheduleResult, calculate_installment_amount, generate_schedule
from data_manager.data_validator import as_number, validate_loan_input, validate_overpayment_input
from data_manager.schema import LoanInput, OverpaymentInput
from utils.date_utils import parse_date
from utils.logging import get_logger

logger = get_logger(__name__)


def _is_valid_loan_input(loan_input: LoanInput) -> bool:
    return (
        as_number(loan_input.principal) > 0
        and as_number(loan_input.annual_rate_percent) >= 0
        and as_number(loan_input.term_months) > 0
        and parse_date(loan_input.start_date) is not None
    )


def build_loan(loan_input: LoanInput) -> Loan:
    start = parse_date(loan_input.start_date)
    return Loan.create(
        Amount.of(loan_input.principal),
        InterestRate.from_percentage(loan_input.annual_rate_percent),
        LoanTerm.from_months(loan_input.term_months),
        loan_input.payment_style,
        PeriodDate.from_date(start),
    )


def build_policy(overpayment_input: OverpaymentInput) -> OverpaymentPolicy:
    return OverpaymentPolicy.create(
        overpayment_input.base_extra,
        overpayment_input.effect,
        overpayment_input.overrides or {},
    )


def calculate_installment(loan_input: LoanInput) -> Optional[float]:
    """Rata do wyświetlenia w formularzu; None gdy dane są niepoprawne"""
    if not _is_valid_loan_input(loan_input):
        return None
    try:
        return calculate_installment_amount(build_loan(loan_input)).to_float()
    except MortgageError as e:
        logger.warning("installment not available: %s", e.message)
        return None


def calculate_mortgage_schedule(
    loan_input: LoanInput,
    overpayment_input: OverpaymentInput,
) -> Optional[ScheduleResult]:
    """Harmonogram z surowych danych; None zamiast wyjątku przy błędnych danych"""
    if not _is_valid_loan_input(loan_input):
        return None
    try:
        loan = build_loan(loan_input)
        policy = build_policy(overpayment_input)
        return generate_schedule(loan, policy)
    except MortgageError:
        logger.exception("error calculating mortgage schedule")
        return None


def update_override(
    current_result: Optional[ScheduleResult],
    loan_input: LoanInput,
    overpayment_input: OverpaymentInput,
    period: int,
    amount: float,
) -> Optional[ScheduleResult]:
    """Zmiana nadpłaty w jednym miesiącu; cały harmonogram liczony od nowa, przy błędzie poprzedni wynik"""
    try:
        loan = build_loan(loan_input)
        policy = build_policy(overpayment_input).with_override(period, Amount.of(amount))
        return generate_schedule(loan, policy)
    except MortgageError:
        logger.exception("error updating overpayment for period %s", period)
        return current_result


def apply_override(overpayment_input: OverpaymentInput, period: int, amount: float) -> OverpaymentInput:
    """Nowe ustawienia nadpłat z nadpisanym miesiącem; kwota równa bazowej usuwa nadpisanie"""
    overrides = dict(overpayment_input.overrides or {})
    base = as_number(overpayment_input.base_extra)
    if not math.isnan(base) and as_number(amount) == base:
        overrides.pop(period, None)
    else:
        overrides[period] = amount
    return replace(overpayment_input, overrides=overrides)


def to_plain_result(result: ScheduleResult) -> Dict:
    return {
        "schedule": [entry.to_record() for entry in result.entries],
        "total_interest": result.total_interest.to_float(),
        "total_interest_baseline": result.total_interest_baseline.to_float(),
        "interest_saved": result.interest_saved.to_float(),
        "total_paid": result.total_paid.to_float(),
        "total_extra_paid": result.total_extra_paid.to_float(),
        "actual_term_months": result.actual_term.periods,
        "original_term_months": result.original_term.periods,
    }


def compute(loan_input: LoanInput, overpayment_input: OverpaymentInput) -> Optional[Dict]:
    """Punkt wejścia dla warstwy prezentacji; None dopóki dane nie przechodzą walidacji"""
    loan_ok, loan_errors = validate_loan_input(loan_input)
    overpayment_ok, overpayment_errors = validate_overpayment_input(overpayment_input)
    if not (loan_ok and overpayment_ok):
        logger.debug("input rejected: %s", "; ".join(loan_errors + overpayment_errors))
        return None
    result = calculate_mortgage_schedule(loan_input, overpayment_input)
    if result is None:
        return None
    return to_plain_result(result)


def schedule_frame(result: ScheduleResult) -> pd.DataFrame:
    """Harmonogram jako DataFrame (kolumny SCHEDULE_COLUMNS)"""
    records = [entry.to_record() for entry in result.entries]
    return pd.DataFrame(records, columns=SCHEDULE_COLUMNS)
