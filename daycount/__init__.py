"""Day count conventions for interest accrual: Actual/360, Actual/365 Fixed and 30/360."""

__version__ = "0.1.0"
__all__ = ["actual", "convention", "thirty360"]