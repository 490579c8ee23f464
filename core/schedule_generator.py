"""
Generator harmonogramu spłat

Na podstawie kredytu i polityki nadpłat wylicza pełny harmonogram (kapitał, odsetki,
nadpłata, saldo) oraz harmonogram bazowy bez nadpłat, z którego liczona jest
oszczędność na odsetkach. Każda operacja na kwotach zaokrągla do groszy.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Optional, Sequence, Tuple

from config.constants import OverpaymentEffect, PaymentStyle
from config.settings import MAX_INSTALLMENT_RATIO
from core.amount import Amount
from core.errors import InvalidLoan, MortgageError
from core.loan import Loan, calculate_annuity_payment
from core.loan_term import LoanTerm
from core.overpayment import OverpaymentPolicy
from core.schedule_entry import ScheduleEntry
from utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScheduleResult:
    entries: Tuple[ScheduleEntry, ...]
    total_interest: Amount
    total_interest_baseline: Amount
    interest_saved: Amount
    total_paid: Amount
    total_extra_paid: Amount
    actual_term: LoanTerm
    original_term: LoanTerm

    @property
    def periods_saved(self) -> int:
        return self.original_term.periods - self.actual_term.periods


def _sum(amounts: Iterable[Amount]) -> Amount:
    total = Amount.zero()
    for a in amounts:
        total = total.add(a)
    return total


def total_interest(entries: Iterable[ScheduleEntry]) -> Amount:
    return _sum(e.interest_portion for e in entries)


def total_paid(entries: Iterable[ScheduleEntry]) -> Amount:
    return _sum(e.total_payment for e in entries)


def total_extra_paid(entries: Iterable[ScheduleEntry]) -> Amount:
    return _sum(e.extra_payment for e in entries)


def calculate_installment_amount(loan: Loan) -> Amount:
    return loan.calculate_installment()


def _reamortize(loan: Loan, balance: Amount, remaining_periods: int) -> Amount:
    """Nowa rata po nadpłacie przy efekcie 'zmniejszenie raty'"""
    if loan.payment_style == PaymentStyle.EQUAL:
        return calculate_annuity_payment(balance, loan.rate, remaining_periods)
    return balance.divide(remaining_periods)


def _build_entries(
    loan: Loan,
    policy: OverpaymentPolicy,
    ceiling: Optional[Sequence[Amount]] = None,
) -> Tuple[ScheduleEntry, ...]:
    """
    Harmonogram okres po okresie, aż saldo spadnie do zera lub skończy się okres kredytu.

    ceiling: salda harmonogramu bez nadpłat; saldo po okresie nigdy ich nie przekracza
    (zaokrąglenia nowej raty przy 'zmniejszeniu raty' nie mogą spowolnić spłaty).
    """
    if not loan.is_valid():
        raise InvalidLoan("Invalid loan parameters provided")

    n = loan.term.periods
    # equal: rata kapitałowo-odsetkowa; decreasing: stała część kapitałowa
    installment = loan.calculate_installment()
    reduce_payment = policy.effect == OverpaymentEffect.REDUCE_PAYMENT

    entries: List[ScheduleEntry] = []
    balance = loan.principal
    period = 1

    while balance.is_positive() and period <= n:
        interest = loan.calculate_interest_for_balance(balance)

        if loan.payment_style == PaymentStyle.EQUAL:
            principal = installment.subtract(interest)
        else:
            principal = installment

        if ceiling is not None and period <= len(ceiling) and balance.greater_than(ceiling[period - 1]):
            floor = balance.subtract(ceiling[period - 1])
            if floor.greater_than(principal):
                principal = floor

        # ostatnia rata domyka saldo (także resztę z zaokrągleń)
        if principal.greater_than(balance) or period == n:
            principal = balance

        requested = policy.get_extra_payment_for_period(period)
        extra = OverpaymentPolicy.clamp_to_affordable(requested, balance, principal)
        new_balance = balance.subtract(principal).subtract(extra)

        entries.append(ScheduleEntry(
            period_number=period,
            date=loan.get_period_date(period),
            principal_portion=principal,
            interest_portion=interest,
            extra_payment=extra,
            remaining_balance=new_balance,
            is_override=policy.has_override(period),
        ))

        if reduce_payment and extra.is_positive() and new_balance.is_positive() and period < n:
            installment = _reamortize(loan, new_balance, n - period)

        balance = new_balance
        period += 1

    return tuple(entries)


def _ceiling_for(policy: OverpaymentPolicy, baseline: Sequence[ScheduleEntry]) -> Optional[List[Amount]]:
    if policy.effect != OverpaymentEffect.REDUCE_PAYMENT:
        return None
    return [e.remaining_balance for e in baseline]


def generate_entries(loan: Loan, policy: OverpaymentPolicy) -> Tuple[ScheduleEntry, ...]:
    """Same pozycje harmonogramu dla danej polityki nadpłat"""
    if policy.effect != OverpaymentEffect.REDUCE_PAYMENT:
        return _build_entries(loan, policy)
    baseline = _build_entries(loan, OverpaymentPolicy.no_overpayment())
    return _build_entries(loan, policy, _ceiling_for(policy, baseline))


def generate_schedule(loan: Loan, policy: OverpaymentPolicy) -> ScheduleResult:
    """Pełny wynik: harmonogram, sumy i porównanie z harmonogramem bez nadpłat"""
    baseline = _build_entries(loan, OverpaymentPolicy.no_overpayment())
    entries = _build_entries(loan, policy, _ceiling_for(policy, baseline))

    interest = total_interest(entries)
    baseline_interest = total_interest(baseline)
    logger.debug(
        "schedule generated: %d of %d periods, interest %s, baseline interest %s",
        len(entries), loan.term.periods, interest, baseline_interest,
    )

    return ScheduleResult(
        entries=entries,
        total_interest=interest,
        total_interest_baseline=baseline_interest,
        interest_saved=baseline_interest.subtract(interest),
        total_paid=total_paid(entries),
        total_extra_paid=total_extra_paid(entries),
        actual_term=LoanTerm.from_months(len(entries)),
        original_term=loan.term,
    )


def validate_loan_parameters(loan: Loan) -> Tuple[bool, List[str]]:
    """Reguły biznesowe sprawdzane przed liczeniem harmonogramu"""
    errors: List[str] = []
    try:
        if not loan.is_valid():
            errors.append("Invalid loan parameters")
        installment = loan.calculate_installment()
        income_limit = loan.principal.multiply(Decimal(str(MAX_INSTALLMENT_RATIO)))
        if installment.greater_than(income_limit):
            errors.append("Installment exceeds reasonable income limits")
    except MortgageError as e:
        errors.append(e.message)
    return len(errors) == 0, errors
