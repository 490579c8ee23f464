"""Testy warstwy aplikacyjnej"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dataclasses import replace
from datetime import date
import pytest
from config.constants import SCHEDULE_COLUMNS, PaymentStyle
from core.amount import Amount
from data_manager.schema import LoanInput, OverpaymentInput
from services.mortgage_service import (
    apply_override,
    build_loan,
    build_policy,
    calculate_installment,
    calculate_mortgage_schedule,
    compute,
    schedule_frame,
    to_plain_result,
    update_override,
)


class TestBuild:
    def test_build_loan(self, loan_input):
        loan = build_loan(loan_input)
        assert loan.principal == Amount.of(500000)
        assert loan.term.periods == 360
        assert loan.payment_style is PaymentStyle.EQUAL
        assert (loan.start_date.year, loan.start_date.month) == (2025, 1)

    def test_build_policy(self):
        policy = build_policy(OverpaymentInput(1000, "reduce_payment", {"4": 250}))
        assert policy.base_amount == Amount.of(1000)
        assert policy.get_extra_payment_for_period(4) == Amount.of(250)

    def test_build_policy_without_overrides(self):
        assert not build_policy(OverpaymentInput(0, "shorten_term", None)).has_any_overpayments()


class TestCalculateInstallment:
    def test_equal(self, loan_input):
        assert abs(calculate_installment(loan_input) - 2838.95) <= 0.01

    def test_decreasing(self, loan_input):
        assert calculate_installment(replace(loan_input, payment_style="decreasing")) == 1388.89

    @pytest.mark.parametrize("field,value", [
        ("principal", 0), ("annual_rate_percent", -1), ("term_months", 0), ("start_date", None),
    ])
    def test_invalid_input(self, loan_input, field, value):
        assert calculate_installment(replace(loan_input, **{field: value})) is None

    def test_domain_rejection(self, loan_input):
        assert calculate_installment(replace(loan_input, principal=500)) is None


class TestCalculateSchedule:
    def test_result(self, loan_input, no_overpayment_input):
        result = calculate_mortgage_schedule(loan_input, no_overpayment_input)
        assert len(result.entries) == 360
        assert result.interest_saved.is_zero()

    def test_invalid_primitives(self, loan_input, no_overpayment_input):
        assert calculate_mortgage_schedule(replace(loan_input, principal="abc"), no_overpayment_input) is None

    def test_domain_error_returns_none(self, loan_input, no_overpayment_input):
        assert calculate_mortgage_schedule(replace(loan_input, term_months=601), no_overpayment_input) is None
        assert calculate_mortgage_schedule(loan_input, OverpaymentInput(0, "skip")) is None


class TestOverrides:
    def test_update_override(self, loan_input, no_overpayment_input):
        result = update_override(None, loan_input, no_overpayment_input, 3, 5000)
        assert result.entries[2].extra_payment == Amount.of(5000)
        assert result.entries[2].is_override
        assert result.interest_saved.is_positive()

    def test_update_override_keeps_previous_on_error(self, loan_input, no_overpayment_input):
        previous = calculate_mortgage_schedule(loan_input, no_overpayment_input)
        assert update_override(previous, loan_input, no_overpayment_input, 0, 5000) is previous
        assert update_override(previous, loan_input, no_overpayment_input, 3, -10) is previous
        assert update_override(previous, loan_input, no_overpayment_input, None, 5000) is previous
        assert update_override(previous, loan_input, no_overpayment_input, "3", 5000) is previous
        assert update_override(previous, loan_input, no_overpayment_input, 3, None) is previous

    def test_apply_override(self):
        settings = OverpaymentInput(1000, "shorten_term", {2: 3000})
        updated = apply_override(settings, 5, 200)
        assert updated.overrides == {2: 3000, 5: 200}
        assert settings.overrides == {2: 3000}

    def test_apply_override_equal_to_base_removes(self):
        settings = OverpaymentInput(1000, "shorten_term", {2: 3000})
        assert apply_override(settings, 2, 1000).overrides == {}


class TestPlainResult:
    def test_compute(self, loan_input):
        plain = compute(loan_input, OverpaymentInput(1000, "shorten_term", {1: 5000}))
        assert set(plain) == {
            "schedule", "total_interest", "total_interest_baseline", "interest_saved",
            "total_paid", "total_extra_paid", "actual_term_months", "original_term_months",
        }
        assert plain["original_term_months"] == 360
        assert plain["actual_term_months"] == len(plain["schedule"])
        assert plain["interest_saved"] > 0
        first = plain["schedule"][0]
        assert first["date"] == date(2025, 1, 1)
        assert first["override_amount"] == 5000.0
        assert plain["schedule"][1]["override_amount"] is None

    def test_compute_reduce_payment_tiny_overpayment(self):
        plain = compute(LoanInput(1000, 5.5, 191, "decreasing", "2025-01"), OverpaymentInput(0.01, "reduce_payment"))
        assert plain is not None
        assert plain["interest_saved"] >= 0
        assert plain["schedule"][-1]["remaining_balance"] == 0.0

    def test_compute_rejects_invalid(self, loan_input, no_overpayment_input):
        assert compute(replace(loan_input, principal=500), no_overpayment_input) is None
        assert compute(loan_input, OverpaymentInput(-5, "shorten_term")) is None
        assert compute(LoanInput(12000, 0, 6, "equal", "2025-01"), no_overpayment_input) is None

    def test_to_plain_result_totals(self, loan_input, no_overpayment_input):
        result = calculate_mortgage_schedule(loan_input, no_overpayment_input)
        plain = to_plain_result(result)
        assert plain["total_paid"] == result.total_paid.to_float()
        assert plain["total_extra_paid"] == 0.0

    def test_schedule_frame(self, loan_input, no_overpayment_input):
        df = schedule_frame(calculate_mortgage_schedule(loan_input, no_overpayment_input))
        assert list(df.columns) == SCHEDULE_COLUMNS
        assert len(df) == 360
        assert df["remaining_balance"].iloc[-1] == 0.0
        assert df["override_amount"].isna().all()
