import os

# Domyślne parametry kredytu
DEFAULT_PRINCIPAL = 500000
DEFAULT_RATE = 5.5
DEFAULT_TERM_MONTHS = 360
DEFAULT_PAYMENT_STYLE = "equal"
DEFAULT_EFFECT = "shorten_term"

# Limit oprocentowania w formularzu (obiekt stopy dopuszcza 100%)
UI_MAX_RATE_PERCENT = 50

# Rata powyżej 10% kwoty kredytu uznawana za nierealną
MAX_INSTALLMENT_RATIO = 0.1

# Formatowanie
DEFAULT_LOCALE = "pl"
CURRENCY_UNIT = "zł"
GROUP_SEPARATOR = "\u00a0"

# Precyzja kwot
AMOUNT_PRECISION = 2

LOG_LEVEL = os.getenv("MORTGAGE_LOG_LEVEL", "INFO")
