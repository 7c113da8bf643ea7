from src.platform.exception.exceptions import ValidationError
from src.service.ticket.domain.enum.ticket_status import TicketStatus


class TicketStateMachine:
    """
    Lifecycle rules for a ticket.

    available -> sold happens outside this module (purchase flow).
    sold -> validated=True is the redemption at the gate.
    available/sold -> canceled unless already canceled or validated.
    canceled and validated are terminal for cancel/validate.
    """

    @classmethod
    def is_known_status(cls, status: str) -> bool:
        return status in {member.value for member in TicketStatus}

    @classmethod
    def assert_can_validate(cls, *, status: str, validated: bool) -> None:
        if validated:
            raise ValidationError('Ticket has already been validated', field='validated')
        if status != TicketStatus.SOLD:
            raise ValidationError(
                f'Cannot validate ticket with status "{status}"; only sold tickets can be validated',
                field='status',
            )

    @classmethod
    def assert_can_cancel(cls, *, status: str, validated: bool) -> None:
        if status == TicketStatus.CANCELED:
            raise ValidationError('Ticket is already canceled', field='status')
        if validated:
            raise ValidationError(
                'Cannot cancel a used ticket: it has already been utilized', field='validated'
            )
