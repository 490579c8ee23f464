import sys
from datetime import date

import click

from config.constants import OverpaymentEffect, PaymentStyle
from config.settings import DEFAULT_PRINCIPAL, DEFAULT_RATE, DEFAULT_TERM_MONTHS
from core.comparison import compare_payment_styles
from data_manager.data_validator import validate_loan_input, validate_overpayment_input
from data_manager.schema import LoanInput, OverpaymentInput
from services.mortgage_service import (
    build_loan,
    build_policy,
    calculate_installment,
    calculate_mortgage_schedule,
    schedule_frame,
)
from utils.formatters import fmt_amount, fmt_months


def _parse_overrides(ctx, param, values):
    overrides = {}
    for item in values:
        period, sep, amount = item.partition("=")
        if not sep:
            raise click.BadParameter(f"expected PERIOD=AMOUNT, got '{item}'")
        try:
            overrides[int(period)] = float(amount)
        except ValueError:
            raise click.BadParameter(f"expected PERIOD=AMOUNT, got '{item}'")
    return overrides


def loan_options(f):
    options = [
        click.option('--principal', type=float, default=DEFAULT_PRINCIPAL, show_default=True, help='Loan principal'),
        click.option('--annual-rate', type=float, default=DEFAULT_RATE, show_default=True, help='Annual interest rate (%)'),
        click.option('--term-months', type=int, default=DEFAULT_TERM_MONTHS, show_default=True, help='Loan term in months'),
        click.option('--payment-style', type=click.Choice([s.value for s in PaymentStyle]), default=PaymentStyle.EQUAL.value, show_default=True, help='Payment style'),
        click.option('--start-date', type=str, default=lambda: date.today().isoformat(), help='First payment month (YYYY-MM or YYYY-MM-DD)'),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def overpayment_options(f):
    options = [
        click.option('--base-extra', type=float, default=0.0, show_default=True, help='Recurring monthly overpayment'),
        click.option('--effect', type=click.Choice([e.value for e in OverpaymentEffect]), default=OverpaymentEffect.SHORTEN_TERM.value, show_default=True, help='Overpayment effect'),
        click.option('--override', 'overrides', multiple=True, callback=_parse_overrides, help='Per-period overpayment, PERIOD=AMOUNT (repeatable)'),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def _loan_input(principal, annual_rate, term_months, payment_style, start_date):
    return LoanInput(principal, annual_rate, term_months, payment_style, start_date)


def _require_valid(loan_input, overpayment_input=None):
    valid, errors = validate_loan_input(loan_input)
    if overpayment_input is not None:
        ok, more = validate_overpayment_input(overpayment_input)
        valid, errors = valid and ok, errors + more
    if not valid:
        for error in errors:
            click.echo(f"Error: {error}", err=True)
        sys.exit(1)


@click.group()
def cli():
    """Mortgage schedule calculator with overpayments."""
    pass


@cli.command()
@loan_options
def installment(principal, annual_rate, term_months, payment_style, start_date):
    """Prints the base installment (principal portion only for decreasing payments)."""
    loan_input = _loan_input(principal, annual_rate, term_months, payment_style, start_date)
    _require_valid(loan_input)
    click.echo(f"Installment: {calculate_installment(loan_input):.2f}")


@cli.command()
@loan_options
@overpayment_options
def schedule(principal, annual_rate, term_months, payment_style, start_date, base_extra, effect, overrides):
    """Generates the repayment schedule and outputs it as CSV."""
    loan_input = _loan_input(principal, annual_rate, term_months, payment_style, start_date)
    overpayment_input = OverpaymentInput(base_extra, effect, overrides)
    _require_valid(loan_input, overpayment_input)
    result = calculate_mortgage_schedule(loan_input, overpayment_input)
    click.echo(schedule_frame(result).to_csv(index=False), nl=False)


@cli.command()
@loan_options
@overpayment_options
def summary(principal, annual_rate, term_months, payment_style, start_date, base_extra, effect, overrides):
    """Prints total interest, savings and the actual term."""
    loan_input = _loan_input(principal, annual_rate, term_months, payment_style, start_date)
    overpayment_input = OverpaymentInput(base_extra, effect, overrides)
    _require_valid(loan_input, overpayment_input)
    result = calculate_mortgage_schedule(loan_input, overpayment_input)
    last = result.entries[-1]
    click.echo(f"Total paid: {result.total_paid.to_display_string()}")
    click.echo(f"Total interest: {result.total_interest.to_display_string()}")
    click.echo(f"Interest without overpayments: {result.total_interest_baseline.to_display_string()}")
    click.echo(f"Interest saved: {result.interest_saved.to_display_string()}")
    click.echo(f"Total overpayments: {result.total_extra_paid.to_display_string()}")
    click.echo(f"Actual term: {result.actual_term.to_display_string()} ({result.actual_term.periods} months)")
    click.echo(f"Original term: {result.original_term.to_display_string()}")
    if result.periods_saved:
        click.echo(f"Term reduction: {fmt_months(result.periods_saved)}")
    click.echo(f"Last payment: {last.date.to_display_string()}")


@cli.command()
@loan_options
def validate(principal, annual_rate, term_months, payment_style, start_date):
    """Validates loan parameters; exits with status 1 when invalid."""
    loan_input = _loan_input(principal, annual_rate, term_months, payment_style, start_date)
    _require_valid(loan_input)
    click.echo("OK")


@cli.command('compare-styles')
@loan_options
@overpayment_options
def compare_styles(principal, annual_rate, term_months, payment_style, start_date, base_extra, effect, overrides):
    """Compares equal and decreasing payments for the same loan."""
    loan_input = _loan_input(principal, annual_rate, term_months, payment_style, start_date)
    overpayment_input = OverpaymentInput(base_extra, effect, overrides)
    _require_valid(loan_input, overpayment_input)
    comp_df = compare_payment_styles(build_loan(loan_input), build_policy(overpayment_input))
    click.echo("--- Payment Style Comparison ---")
    click.echo(comp_df.to_string(index=False))
    diff = comp_df["total_interest"].iloc[0] - comp_df["total_interest"].iloc[1]
    click.echo(f"\nInterest difference: {fmt_amount(diff)}")


if __name__ == "__main__":
    cli()
