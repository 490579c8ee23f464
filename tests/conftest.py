import sys
import pytest
from pathlib import Path

# katalog główny projektu w sys.path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from config.constants import PaymentStyle
from core.amount import Amount
from core.interest_rate import InterestRate
from core.loan import Loan
from core.loan_term import LoanTerm
from core.period_date import PeriodDate
from data_manager.schema import LoanInput, OverpaymentInput


@pytest.fixture
def standard_loan():
    """500 000 zł, 5.5%, 30 lat, raty równe"""
    return Loan.create(
        Amount.of(500000),
        InterestRate.from_percentage(5.5),
        LoanTerm.from_months(360),
        PaymentStyle.EQUAL,
        PeriodDate.from_year_month(2025, 1),
    )


@pytest.fixture
def loan_input():
    return LoanInput(500000, 5.5, 360, "equal", "2025-01")


@pytest.fixture
def no_overpayment_input():
    return OverpaymentInput(0.0, "shorten_term", {})
