"""Records returned by the event and user lookup ports."""

from datetime import datetime
from typing import Optional

import attrs


@attrs.define(frozen=True)
class EventRecord:
    id: str
    name: str
    start_date: Optional[datetime] = None
    location: Optional[str] = None


@attrs.define(frozen=True)
class UserRecord:
    id: str
    name: str
    email: Optional[str] = None
