from datetime import date, datetime
from typing import Optional

import pandas as pd
from dateutil.relativedelta import relativedelta


def add_months(d: date, months: int) -> date:
    """Data przesunięta o N miesięcy (N może być ujemne)"""
    return d + relativedelta(months=months)


def parse_date(d) -> Optional[date]:
    """Parsuje datę z date / datetime / Timestamp / 'YYYY-MM-DD' / 'YYYY-MM'; None gdy się nie da"""
    if d is None or d is pd.NaT:
        return None
    if isinstance(d, pd.Timestamp):
        return d.date()
    if isinstance(d, datetime):
        return d.date()
    if isinstance(d, date):
        return d
    if isinstance(d, str):
        text = d.strip()
        if len(text) == 7:
            text = text + "-01"
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            return None
    return None
