"""
Ticket Record Translator

Converts between the rich TicketEntity (nested price/status/type values) and
the flat TicketRecord. Both directions are pure: absent input maps to
``None`` and absent sub-fields map to the configured defaults.
"""

from decimal import Decimal
from typing import Optional

import attrs

from src.platform.config.core_setting import Settings, settings
from src.service.ticket.app.dto.ticket_record import TicketRecord
from src.service.ticket.domain.entity.ticket_entity import TicketEntity
from src.service.ticket.domain.value_object import Money, TicketStatusValue, TicketTypeValue


@attrs.define(frozen=True)
class TicketDefaults:
    currency: str = 'USD'
    status: str = 'available'
    type: str = 'general'
    amount: Decimal = Decimal('0')

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> 'TicketDefaults':
        config = config or settings
        return cls(
            currency=config.TICKET_DEFAULT_CURRENCY,
            status=config.TICKET_DEFAULT_STATUS,
            type=config.TICKET_DEFAULT_TYPE,
        )


# Scalar fields copied verbatim in both directions
_PASS_THROUGH_FIELDS = (
    'id',
    'code',
    'event_id',
    'user_id',
    'description',
    'quantity',
    'seat',
    'section',
    'is_reserved',
    'reserved_until',
    'validated',
    'is_active',
    'purchased_at',
    'validated_at',
    'canceled_at',
    'cancellation_reason',
    'created_at',
    'updated_at',
)


class TicketRecordMapper:
    def __init__(self, defaults: TicketDefaults) -> None:
        self.defaults = defaults

    def to_application(self, ticket: Optional[TicketEntity]) -> Optional[TicketRecord]:
        if ticket is None:
            return None

        price = ticket.price
        return TicketRecord(
            price=price.amount if price is not None else self.defaults.amount,
            currency=price.currency if price is not None else self.defaults.currency,
            status=ticket.status.value if ticket.status is not None else self.defaults.status,
            type=ticket.type.value if ticket.type is not None else self.defaults.type,
            **{name: getattr(ticket, name) for name in _PASS_THROUGH_FIELDS},
        )

    def to_domain(self, record: Optional[TicketRecord]) -> Optional[TicketEntity]:
        if record is None:
            return None

        return TicketEntity(
            price=Money(
                amount=record.price if record.price is not None else self.defaults.amount,
                currency=record.currency or self.defaults.currency,
            ),
            status=TicketStatusValue(value=record.status or self.defaults.status),
            type=TicketTypeValue(value=record.type or self.defaults.type),
            **{name: getattr(record, name) for name in _PASS_THROUGH_FIELDS},
        )
