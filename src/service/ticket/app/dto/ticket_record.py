from datetime import datetime
from decimal import Decimal
from typing import Optional

import attrs


@attrs.define
class TicketRecord:
    """
    Flat ticket shape used across the command/query boundary.

    price/currency/status/type are plain scalars; ``None`` in currency,
    status or type means "not decided yet" and is filled with the configured
    defaults when the record is translated to the rich shape.
    """

    event_id: str
    price: Decimal = Decimal('0')
    currency: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
    id: Optional[str] = None
    code: Optional[str] = None
    user_id: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[int] = None
    seat: Optional[str] = None
    section: Optional[str] = None
    is_reserved: bool = False
    reserved_until: Optional[datetime] = None
    validated: bool = False
    is_active: bool = True
    purchased_at: Optional[datetime] = None
    validated_at: Optional[datetime] = None
    canceled_at: Optional[datetime] = None
    cancellation_reason: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
