from enum import Enum


class PaymentStyle(str, Enum):
    EQUAL = "equal"  # raty równe
    DECREASING = "decreasing"  # raty malejące

    @property
    def label(self) -> str:
        return {
            "equal": "Raty równe",
            "decreasing": "Raty malejące",
        }[self.value]


class OverpaymentEffect(str, Enum):
    SHORTEN_TERM = "shorten_term"  # skrócenie okresu
    REDUCE_PAYMENT = "reduce_payment"  # zmniejszenie raty

    @property
    def label(self) -> str:
        return {
            "shorten_term": "Skrócenie okresu",
            "reduce_payment": "Zmniejszenie raty",
        }[self.value]


# Granice domenowe
MIN_PRINCIPAL = 1000
MAX_PRINCIPAL = 10_000_000
MAX_TERM_MONTHS = 600
MAX_RATE_PERCENT = 100

# Kolumny spłaszczonego harmonogramu
SCHEDULE_COLUMNS = [
    "period", "date", "principal_portion", "interest_portion",
    "total_payment", "extra_payment", "remaining_balance",
    "override_amount",
]

MONTH_NAMES = {
    "pl": [
        "styczeń", "luty", "marzec", "kwiecień", "maj", "czerwiec",
        "lipiec", "sierpień", "wrzesień", "październik", "listopad", "grudzień",
    ],
    "en": [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ],
}

TERM_UNITS = {
    "pl": ("lat", "miesięcy"),
    "en": ("years", "months"),
}
