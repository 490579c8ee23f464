from decimal import Decimal, ROUND_HALF_UP

from config.constants import MONTH_NAMES, TERM_UNITS
from config.settings import CURRENCY_UNIT, DEFAULT_LOCALE, GROUP_SEPARATOR


def fmt_amount(value, unit: str = CURRENCY_UNIT, locale: str = DEFAULT_LOCALE) -> str:
    """Kwota bez groszy: 1234567.89 -> 1 234 568 zł"""
    whole = int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    # pl-PL nie grupuje liczb czterocyfrowych
    if locale == "pl" and abs(whole) < 10000:
        digits = str(whole)
    else:
        sep = GROUP_SEPARATOR if locale == "pl" else ","
        digits = f"{whole:,}".replace(",", sep)
    return f"{digits}{GROUP_SEPARATOR}{unit}"


def fmt_rate(value) -> str:
    """Oprocentowanie: 5.5 -> 5.5%"""
    text = f"{Decimal(str(value)).normalize():f}"
    return f"{text}%"


def fmt_months(months: int, locale: str = DEFAULT_LOCALE) -> str:
    """Liczba miesięcy jako lata i miesiące: 30 -> 2 lat 6 miesięcy"""
    years_unit, months_unit = TERM_UNITS.get(locale, TERM_UNITS["pl"])
    years = months // 12
    remain = months % 12
    if years == 0:
        return f"{remain} {months_unit}"
    return f"{years} {years_unit} {remain} {months_unit}"


def fmt_period_long(year: int, month: int, locale: str = DEFAULT_LOCALE) -> str:
    """styczeń 2025"""
    names = MONTH_NAMES.get(locale, MONTH_NAMES["pl"])
    return f"{names[month - 1]} {year}"


def fmt_period_short(year: int, month: int) -> str:
    """01.2025"""
    return f"{month:02d}.{year}"
