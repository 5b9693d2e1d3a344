"""Invoice Number Generation

Format: <PREFIX>-<yyyyMMddHHmmssfff>-<NNN> (e.g. INV-20251023224923123-042)

The millisecond timestamp is monotonic within a process: if the clock has
not advanced (or went backwards) since the last number, the previous stamp
plus one millisecond is used. Two numbers issued by one process therefore
never share a timestamp; across processes the 3-digit random suffix leaves a
1 in 1000 chance per same-millisecond pair, which the repository's existence
check and the unique column then catch.
"""

import secrets
import threading
from datetime import datetime, timedelta
from typing import Callable, Optional

from invoicing.domain.base import as_utc, utc_now

DEFAULT_PREFIX = "INV"

_lock = threading.Lock()
_last_stamp: Optional[datetime] = None


def _next_stamp(now: datetime) -> datetime:
    global _last_stamp
    now = as_utc(now)
    now = now.replace(microsecond=(now.microsecond // 1000) * 1000)
    with _lock:
        if _last_stamp is not None and now <= _last_stamp:
            now = _last_stamp + timedelta(milliseconds=1)
        _last_stamp = now
    return now


def new_invoice_number(
    prefix: str = DEFAULT_PREFIX,
    clock: Callable[[], datetime] = utc_now,
) -> str:
    stamp = _next_stamp(clock())
    millis = stamp.microsecond // 1000
    suffix = secrets.randbelow(1000)
    return f"{prefix}-{stamp:%Y%m%d%H%M%S}{millis:03d}-{suffix:03d}"
