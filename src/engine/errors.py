"""Typed failures raised by the accrual core.

Each error carries a stable ``kind`` so callers (API, CLI) can map it to a
distinct message or status code without string matching.
"""

from datetime import date


class AccrualError(ValueError):
    kind = "accrual_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidDateFormat(AccrualError):
    kind = "invalid_date_format"

    def __init__(self, value: object):
        super().__init__(f"Invalid date format: {value!r}. Expected YYYY-MM-DD.")
        self.value = value


class InvalidDate(AccrualError):
    kind = "invalid_date"

    def __init__(self, value: str):
        super().__init__(f"Invalid date: {value} is not a real calendar date.")
        self.value = value


class RangeOrderError(AccrualError):
    kind = "range_order"

    def __init__(self, start: date, end: date):
        super().__init__(
            f"endDate must be >= startDate (got {start.isoformat()} to {end.isoformat()})."
        )
        self.start = start
        self.end = end


class InvalidPrincipal(AccrualError):
    kind = "invalid_principal"

    def __init__(self, value: object):
        super().__init__(f"Invalid principal {value!r}. Must be a positive number.")
        self.value = value


class InvalidSpread(AccrualError):
    kind = "invalid_spread"

    def __init__(self, value: object):
        super().__init__(f"Invalid spreadBps {value!r}. Must be 0 or greater.")
        self.value = value


class InvalidLookback(AccrualError):
    kind = "invalid_lookback"

    def __init__(self, value: object, max_days: int):
        super().__init__(
            f"Invalid lookbackDays {value!r}. Must be a whole number from 0 to {max_days}."
        )
        self.value = value


class UnsupportedRateIndex(AccrualError):
    kind = "unsupported_rate_index"

    def __init__(self, value: object, supported: list[str]):
        super().__init__(
            f"Unsupported rateIndex: {value}. Supported: {', '.join(supported)}"
        )
        self.value = value


class UnsupportedDayCount(AccrualError):
    kind = "unsupported_day_count"

    def __init__(self, value: object, supported: list[str]):
        super().__init__(
            f"Unsupported dayCount: {value}. Supported: {', '.join(supported)}"
        )
        self.value = value


class MissingBaseRate(AccrualError):
    kind = "missing_base_rate"

    def __init__(self, missing: date):
        super().__init__(
            f"Missing base rate for {missing.isoformat()}. "
            "Import SOFR rates or extend rate range."
        )
        self.date = missing


class NoPriorRate(AccrualError):
    """Rate store could not seed a carry-forward window."""

    kind = "no_prior_rate"

    def __init__(self, window_start: date):
        super().__init__(
            f"No stored base rate on or before {window_start.isoformat()}. "
            "Import SOFR rates covering the start of the range."
        )
        self.date = window_start
