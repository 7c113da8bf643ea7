from typing import Any, Optional

import attrs


@attrs.define(frozen=True)
class TicketPatch:
    """Partial update of a ticket; ``None`` means the field is not part of the patch."""

    description: Optional[str] = None
    type: Optional[str] = None
    price: Optional[str] = None  # "XX.XX CUR"
    quantity: Optional[int] = None
    seat: Optional[str] = None
    section: Optional[str] = None

    def present_fields(self) -> dict[str, Any]:
        return attrs.asdict(self, filter=lambda _attr, value: value is not None)
