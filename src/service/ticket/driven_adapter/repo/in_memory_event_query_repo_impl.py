from typing import Dict, Optional

from src.platform.logging.loguru_io import Logger
from src.service.ticket.app.dto.lookup_record import EventRecord
from src.service.ticket.app.interface.i_event_query_repo import IEventQueryRepo


class InMemoryEventQueryRepoImpl(IEventQueryRepo):
    def __init__(self) -> None:
        self._events: Dict[str, EventRecord] = {}

    def add(self, event: EventRecord) -> None:
        self._events[event.id] = event

    @Logger.io
    async def find_by_id(self, *, event_id: str) -> Optional[EventRecord]:
        return self._events.get(event_id)
