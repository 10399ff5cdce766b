from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]

TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M:%S"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def local_now() -> datetime:
    return datetime.now().astimezone()


def format_timestamp(moment: datetime, utc: bool = False) -> str:
    """
    Render *moment* as ``yyyy-mm-dd hh:mm:ss`` (no zone suffix).

    With ``utc=True`` an aware *moment* is converted to UTC first; naive
    values are taken to already be in UTC.
    """
    if utc and moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(TIMESTAMP_FORMAT)
