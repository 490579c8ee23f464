import math
from typing import List, Tuple

from config.constants import MAX_TERM_MONTHS, MIN_PRINCIPAL, OverpaymentEffect
from config.settings import UI_MAX_RATE_PERCENT
from core.errors import MortgageError
from core.schedule_generator import validate_loan_parameters
from data_manager.schema import LoanInput, OverpaymentInput
from utils.date_utils import parse_date
from utils.logging import get_logger

logger = get_logger(__name__)


def as_number(value) -> float:
    """Liczba z pola formularza; NaN gdy wartość nie jest liczbą"""
    if isinstance(value, bool) or value is None:
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def validate_loan_input(loan_input: LoanInput) -> Tuple[bool, List[str]]:
    """Walidacja danych kredytu, zwraca (czy poprawne, lista błędów)"""
    errors: List[str] = []
    principal = as_number(loan_input.principal)
    rate = as_number(loan_input.annual_rate_percent)
    term = as_number(loan_input.term_months)

    if not principal > 0:
        errors.append("Loan amount must be positive")
    if not principal >= MIN_PRINCIPAL:
        errors.append(f"Loan amount must be at least {MIN_PRINCIPAL:,} PLN")
    if not rate >= 0:
        errors.append("Interest rate cannot be negative")
    if rate > UI_MAX_RATE_PERCENT:
        errors.append("Interest rate seems unreasonably high")
    if not term > 0:
        errors.append("Loan term must be positive")
    if term > MAX_TERM_MONTHS:
        errors.append(f"Loan term cannot exceed {MAX_TERM_MONTHS // 12} years")
    if parse_date(loan_input.start_date) is None:
        errors.append("Valid start date is required")

    # reguły domenowe tylko gdy podstawowe przeszły
    if not errors:
        from services.mortgage_service import build_loan
        try:
            loan = build_loan(loan_input)
        except MortgageError as e:
            logger.warning("loan construction failed during validation: %s", e.message)
            errors.append("Invalid loan parameters")
        else:
            _, domain_errors = validate_loan_parameters(loan)
            errors.extend(domain_errors)

    return len(errors) == 0, errors


def validate_overpayment_input(overpayment_input: OverpaymentInput) -> Tuple[bool, List[str]]:
    """Walidacja ustawień nadpłat"""
    errors: List[str] = []
    base = as_number(overpayment_input.base_extra)
    if not (math.isfinite(base) and base >= 0):
        errors.append("Overpayment amount cannot be negative")
    if overpayment_input.effect not in [e.value for e in OverpaymentEffect]:
        errors.append(f"Invalid overpayment effect: {overpayment_input.effect}")
    return len(errors) == 0, errors
