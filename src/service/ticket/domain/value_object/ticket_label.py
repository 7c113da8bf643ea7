import attrs


@attrs.define(frozen=True)
class TicketStatusValue:
    value: str


@attrs.define(frozen=True)
class TicketTypeValue:
    value: str
