"""Kredyt: kwota, oprocentowanie, okres, rodzaj rat, pierwszy miesiąc spłaty"""
from dataclasses import dataclass, replace

from config.constants import MAX_PRINCIPAL, MIN_PRINCIPAL, PaymentStyle
from core.amount import Amount
from core.errors import InvalidLoan, InvalidPeriod
from core.interest_rate import InterestRate
from core.loan_term import LoanTerm
from core.period_date import PeriodDate


def calculate_annuity_payment(principal: Amount, rate: InterestRate, periods: int) -> Amount:
    """Rata równa: M = P * r * (1+r)^n / ((1+r)^n - 1); przy r = 0 po prostu P / n"""
    if rate.is_zero():
        return principal.divide(periods)
    r = rate.monthly_decimal
    factor = (1 + r) ** periods
    return Amount.of(principal.value * r * factor / (factor - 1))


@dataclass(frozen=True)
class Loan:
    principal: Amount
    rate: InterestRate
    term: LoanTerm
    payment_style: PaymentStyle
    start_date: PeriodDate

    def __post_init__(self):
        try:
            object.__setattr__(self, "payment_style", PaymentStyle(self.payment_style))
        except ValueError as exc:
            raise InvalidLoan(f"Unknown payment style: {self.payment_style!r}") from exc
        for name, kind in (("principal", Amount), ("rate", InterestRate),
                           ("term", LoanTerm), ("start_date", PeriodDate)):
            if not isinstance(getattr(self, name), kind):
                raise InvalidLoan(f"Loan {name} must be {kind.__name__}")
        if not self.principal.is_positive():
            raise InvalidLoan("Loan principal must be positive")
        if self.principal.value < MIN_PRINCIPAL:
            raise InvalidLoan(f"Loan principal must be at least {MIN_PRINCIPAL:,} PLN")
        if self.principal.value > MAX_PRINCIPAL:
            raise InvalidLoan(f"Loan principal cannot exceed {MAX_PRINCIPAL:,} PLN")

    @classmethod
    def create(
        cls,
        principal: Amount,
        rate: InterestRate,
        term: LoanTerm,
        payment_style: PaymentStyle,
        start_date: PeriodDate,
    ) -> "Loan":
        return cls(principal, rate, term, payment_style, start_date)

    def calculate_installment(self) -> Amount:
        """
        Rata bazowa.
        equal: stała rata kapitałowo-odsetkowa.
        decreasing: tylko stała część kapitałowa, odsetki liczone osobno od salda.
        """
        if self.rate.is_zero():
            return self.principal.divide(self.term.periods)
        if self.payment_style == PaymentStyle.EQUAL:
            return calculate_annuity_payment(self.principal, self.rate, self.term.periods)
        return self.principal.divide(self.term.periods)

    def calculate_interest_for_balance(self, balance: Amount) -> Amount:
        return balance.multiply(self.rate.monthly_decimal)

    def get_period_date(self, period: int) -> PeriodDate:
        if period < 1 or period > self.term.periods:
            raise InvalidPeriod(f"Period number must be between 1 and {self.term.periods}, got {period}")
        return self.start_date.add_months(period - 1)

    def is_valid(self) -> bool:
        return (
            MIN_PRINCIPAL <= self.principal.value <= MAX_PRINCIPAL
            and self.rate.annual_percentage >= 0
            and self.term.periods > 0
        )

    def with_principal(self, principal: Amount) -> "Loan":
        return replace(self, principal=principal)

    def with_interest_rate(self, rate: InterestRate) -> "Loan":
        return replace(self, rate=rate)

    def with_term(self, term: LoanTerm) -> "Loan":
        return replace(self, term=term)

    def with_payment_style(self, payment_style: PaymentStyle) -> "Loan":
        return replace(self, payment_style=payment_style)

    def with_start_date(self, start_date: PeriodDate) -> "Loan":
        return replace(self, start_date=start_date)
