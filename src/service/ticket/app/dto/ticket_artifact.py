import attrs


@attrs.define(frozen=True)
class TicketArtifact:
    """Redeemable document produced for a ticket."""

    content: bytes
    filename: str
    media_type: str = 'text/plain'
