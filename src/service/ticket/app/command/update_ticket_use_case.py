from typing import Any

import attrs
from opentelemetry import trace

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticket.app.command.ticket_field_rules import (
    require_positive_quantity,
    require_text,
)
from src.service.ticket.app.dto.ticket_patch import TicketPatch
from src.service.ticket.app.dto.ticket_record import TicketRecord
from src.service.ticket.app.service.ticket_data_access_facade import TicketDataAccessFacade
from src.service.ticket.domain.value_object.money import parse_price


class UpdateTicketUseCase:
    def __init__(self, *, ticket_facade: TicketDataAccessFacade) -> None:
        self.ticket_facade = ticket_facade
        self.tracer = trace.get_tracer(__name__)

    @staticmethod
    def _validated_changes(patch: TicketPatch) -> dict[str, Any]:
        """Check the supplied fields only and turn them into record changes."""
        changes = patch.present_fields()

        if 'price' in changes:
            changes['price'], changes['currency'] = parse_price(changes['price'])
        if 'quantity' in changes:
            require_positive_quantity(changes['quantity'])
        if 'description' in changes:
            require_text(changes['description'], field='description', label='Description')
        if 'type' in changes:
            require_text(changes['type'], field='type', label='Ticket type')

        return changes

    @Logger.io
    async def execute(self, *, ticket_id: str, patch: TicketPatch) -> TicketRecord:
        with self.tracer.start_as_current_span(
            'use_case.update_ticket',
            attributes={'ticket.id': ticket_id},
        ):
            existing = await self.ticket_facade.find_by_id(ticket_id)
            if existing is None:
                raise NotFoundError(f'Ticket {ticket_id} not found', resource_id=ticket_id)

            changes = self._validated_changes(patch)
            Logger.base.info(
                f'✏️ [UPDATE_TICKET] Updating ticket {ticket_id} fields={sorted(changes)}'
            )

            return await self.ticket_facade.save(attrs.evolve(existing, **changes))
