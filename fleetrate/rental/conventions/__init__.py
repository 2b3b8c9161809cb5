from .daycount import ONE_DAY_MS, rental_days, utc_midnight_ms

__all__ = ["ONE_DAY_MS", "rental_days", "utc_midnight_ms"]
