"""
Create Ticket Use Case

Validates the raw input, builds a flat record and persists it through the
facade. Nothing is written when any field is rejected.
"""

from typing import Optional

from opentelemetry import trace
import uuid_utils

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.ticket.app.command.ticket_field_rules import (
    require_positive_quantity,
    require_text,
)
from src.service.ticket.app.dto.ticket_record import TicketRecord
from src.service.ticket.app.service.ticket_data_access_facade import TicketDataAccessFacade
from src.service.ticket.domain.enum.ticket_status import TicketStatus
from src.service.ticket.domain.ticket_state_machine import TicketStateMachine
from src.service.ticket.domain.value_object.money import parse_price


def generate_ticket_code(prefix: str) -> str:
    # uuid7 leads with the timestamp, the tail is random
    return f'{prefix}-{uuid_utils.uuid7().hex[-10:].upper()}'


class CreateTicketUseCase:
    def __init__(
        self,
        *,
        ticket_facade: TicketDataAccessFacade,
        code_prefix: Optional[str] = None,
    ) -> None:
        self.ticket_facade = ticket_facade
        self.code_prefix = code_prefix or settings.TICKET_CODE_PREFIX
        self.tracer = trace.get_tracer(__name__)

    @staticmethod
    def _validate_status(status: Optional[str]) -> None:
        if status is None:
            return
        if not TicketStateMachine.is_known_status(status):
            raise ValidationError(f'Unknown ticket status "{status}"', field='status')
        if status == TicketStatus.CANCELED:
            raise ValidationError('A ticket cannot be created as canceled', field='status')

    @Logger.io
    async def execute(
        self,
        *,
        event_id: str,
        ticket_type: str,
        description: str,
        price: Optional[str],
        quantity: int,
        status: Optional[str] = None,
        user_id: Optional[str] = None,
        seat: Optional[str] = None,
        section: Optional[str] = None,
    ) -> TicketRecord:
        """
        Create a ticket for an event.

        Args:
            event_id: Owning event
            ticket_type: Free-form category, e.g. "vip"
            description: Human readable description
            price: "<amount> <CUR>", e.g. "10.50 EUR"
            quantity: Number of admissions, greater than 0
            status: Initial status, "available" when omitted

        Raises:
            ValidationError: If any field breaks its rule
        """
        with self.tracer.start_as_current_span(
            'use_case.create_ticket',
            attributes={'ticket.event_id': str(event_id)},
        ) as span:
            require_text(event_id, field='event_id', label='Event id')
            require_text(ticket_type, field='type', label='Ticket type')
            require_text(description, field='description', label='Description')
            if price is None:
                raise ValidationError('Price is required', field='price')
            amount, currency = parse_price(price)
            require_positive_quantity(quantity)
            self._validate_status(status)

            record = TicketRecord(
                event_id=event_id,
                price=amount,
                currency=currency,
                status=status,
                type=ticket_type,
                code=generate_ticket_code(self.code_prefix),
                user_id=user_id,
                description=description,
                quantity=quantity,
                seat=seat,
                section=section,
            )
            Logger.base.info(f'🎫 [CREATE_TICKET] Creating ticket {record.code} for event {event_id}')

            saved = await self.ticket_facade.save(record)
            span.set_attribute('ticket.id', str(saved.id))

            Logger.base.info(f'✅ [CREATE_TICKET] Created ticket {saved.id} ({saved.code})')
            return saved
