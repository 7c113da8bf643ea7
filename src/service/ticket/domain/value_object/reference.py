"""
Reference shapes accepted wherever a lookup key is expected.

Callers may hand over either a bare identifier or an already resolved
reference; ``as_reference`` is the single place turning the former into the
latter before a call reaches the persistence port.
"""

from typing import TypeVar, Union

import attrs

from src.service.ticket.domain.value_object.ticket_label import (
    TicketStatusValue,
    TicketTypeValue,
)


@attrs.define(frozen=True)
class EventRef:
    id: str


@attrs.define(frozen=True)
class UserRef:
    id: str


EventKey = Union[str, EventRef]
UserKey = Union[str, UserRef]
StatusKey = Union[str, TicketStatusValue]
TypeKey = Union[str, TicketTypeValue]

_R = TypeVar('_R', EventRef, UserRef, TicketStatusValue, TicketTypeValue)


def as_reference(key: Union[str, _R], ref_type: type[_R]) -> _R:
    if isinstance(key, ref_type):
        return key
    if isinstance(key, str):
        # EventRef/UserRef carry ``id``, label values carry ``value``
        field_name = attrs.fields(ref_type)[0].name
        return ref_type(**{field_name: key})
    raise TypeError(f'Expected str or {ref_type.__name__}, got {type(key).__name__}')
