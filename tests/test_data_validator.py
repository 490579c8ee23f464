"""Testy walidacji danych wejściowych"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import math
from dataclasses import replace
import pytest
from data_manager.data_validator import as_number, validate_loan_input, validate_overpayment_input
from data_manager.schema import LoanInput, OverpaymentInput


class TestAsNumber:
    @pytest.mark.parametrize("value,expected", [(5, 5.0), ("12.5", 12.5), (0, 0.0)])
    def test_numbers(self, value, expected):
        assert as_number(value) == expected

    @pytest.mark.parametrize("value", [None, True, "", "abc", [1]])
    def test_not_numbers(self, value):
        assert math.isnan(as_number(value))


class TestValidateLoanInput:
    def test_valid(self, loan_input):
        assert validate_loan_input(loan_input) == (True, [])

    def test_below_minimum(self, loan_input):
        valid, errors = validate_loan_input(replace(loan_input, principal=500))
        assert not valid
        assert errors == ["Loan amount must be at least 1,000 PLN"]

    def test_non_positive_principal(self, loan_input):
        _, errors = validate_loan_input(replace(loan_input, principal=0))
        assert errors == ["Loan amount must be positive", "Loan amount must be at least 1,000 PLN"]

    def test_missing_principal(self, loan_input):
        _, errors = validate_loan_input(replace(loan_input, principal=None))
        assert "Loan amount must be positive" in errors

    def test_above_maximum_fails_construction(self, loan_input):
        valid, errors = validate_loan_input(replace(loan_input, principal=20_000_000))
        assert not valid
        assert errors == ["Invalid loan parameters"]

    def test_rate(self, loan_input):
        assert validate_loan_input(replace(loan_input, annual_rate_percent=-1))[1] == ["Interest rate cannot be negative"]
        assert validate_loan_input(replace(loan_input, annual_rate_percent=60))[1] == ["Interest rate seems unreasonably high"]
        assert validate_loan_input(replace(loan_input, annual_rate_percent=0))[0]

    def test_term(self, loan_input):
        assert validate_loan_input(replace(loan_input, term_months=0))[1] == ["Loan term must be positive"]
        assert validate_loan_input(replace(loan_input, term_months=601))[1] == ["Loan term cannot exceed 50 years"]
        assert validate_loan_input(replace(loan_input, term_months=600))[0]

    def test_fractional_term(self, loan_input):
        assert validate_loan_input(replace(loan_input, term_months=12.5))[1] == ["Invalid loan parameters"]

    @pytest.mark.parametrize("start", [None, "", "2025-13", "not a date"])
    def test_start_date(self, loan_input, start):
        assert validate_loan_input(replace(loan_input, start_date=start))[1] == ["Valid start date is required"]

    def test_installment_limit(self):
        loan_input = LoanInput(12000, 0, 6, "equal", "2025-01")
        assert validate_loan_input(loan_input) == (False, ["Installment exceeds reasonable income limits"])

    def test_several_errors_reported(self):
        valid, errors = validate_loan_input(LoanInput(0, -1, 0, "equal", None))
        assert not valid
        assert len(errors) == 5


class TestValidateOverpaymentInput:
    def test_valid(self, no_overpayment_input):
        assert validate_overpayment_input(no_overpayment_input) == (True, [])
        assert validate_overpayment_input(OverpaymentInput(1500, "reduce_payment", {3: 100}))[0]

    def test_negative_base(self):
        valid, errors = validate_overpayment_input(OverpaymentInput(-1, "shorten_term"))
        assert not valid
        assert errors == ["Overpayment amount cannot be negative"]

    def test_unknown_effect(self):
        _, errors = validate_overpayment_input(OverpaymentInput(0, "skip"))
        assert errors == ["Invalid overpayment effect: skip"]
