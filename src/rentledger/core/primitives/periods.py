# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Any, Optional, Union

import pandas as pd
from dateutil import parser as date_parser
from pydantic import field_validator

from .model import Model

logger = logging.getLogger(__name__)

_BILLING_PERIOD_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


def to_month(value: Union[date, pd.Period, pd.Timestamp]) -> pd.Period:
    """Normalize a date-like value to a monthly ``pd.Period``."""
    if isinstance(value, pd.Period):
        return value.asfreq("M")
    return pd.Period(value, freq="M")


def parse_billing_period(text: Optional[str]) -> Optional[pd.Period]:
    """
    Parse a "YYYY-MM" billing period.

    Anything else (empty, "2023-12-31", "13/2024", month 00 or 13) returns
    None so callers fall back to other billing-start rules rather than guess.
    """
    if not text:
        return None
    match = _BILLING_PERIOD_PATTERN.match(text.strip())
    if match is None:
        logger.warning(f"Ignoring malformed billing period {text!r}")
        return None
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        logger.warning(f"Ignoring billing period with invalid month {text!r}")
        return None
    return pd.Period(year=year, month=month, freq="M")


def coerce_optional_date(value: Any, field_name: str = "date") -> Optional[date]:
    """
    Lenient date coercion for optional record fields.

    Accepts dates, datetimes and ISO-like strings ("2024-01-10",
    "2024-01-10T08:00:00Z"). Empty or unparsable input becomes None.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date_parser.isoparse(value.strip()).date()
        except (ValueError, OverflowError):
            logger.warning(f"Ignoring malformed {field_name} {value!r}")
            return None
    logger.warning(f"Ignoring unsupported {field_name} value of type {type(value).__name__}")
    return None


def format_month(period: pd.Period) -> str:
    """Display form of a billing month, e.g. 'Feb 2025'."""
    return period.strftime("%b %Y")


class BillingWindow(Model):
    """
    Inclusive range of billing months.

    An empty window (``start_month`` after ``end_month``, or no start at all)
    yields no months rather than a negative count.

    Examples:
        >>> window = BillingWindow(start_month=pd.Period("2025-02", "M"),
        ...                        end_month=pd.Period("2025-04", "M"))
        >>> [str(p) for p in window.period_index]
        ['2025-02', '2025-03', '2025-04']
    """

    start_month: Optional[pd.Period] = None
    end_month: pd.Period

    @field_validator("start_month", "end_month", mode="before")
    @classmethod
    def normalize_month(cls, v: Any) -> Optional[pd.Period]:
        """Ensure bounds are monthly pd.Periods."""
        if v is None:
            return None
        return to_month(v)

    @property
    def is_empty(self) -> bool:
        return self.start_month is None or self.start_month > self.end_month

    @property
    def period_index(self) -> pd.PeriodIndex:
        """Monthly PeriodIndex over the window; empty when the window is empty."""
        if self.is_empty:
            return pd.PeriodIndex([], freq="M")
        return pd.period_range(start=self.start_month, end=self.end_month, freq="M")

    @property
    def duration_months(self) -> int:
        return len(self.period_index)

    @classmethod
    def through(cls, start_month: Optional[pd.Period], as_of: date) -> "BillingWindow":
        """Window from ``start_month`` through the month containing ``as_of``."""
        return cls(start_month=start_month, end_month=to_month(as_of))
