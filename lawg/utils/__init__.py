from .clock import Clock, format_timestamp, local_now, utc_now
from .process import terminate


__all__ = [
    "Clock",
    "format_timestamp",
    "local_now",
    "terminate",
    "utc_now",
]
