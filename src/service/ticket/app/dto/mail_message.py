from typing import List, Optional

import attrs


@attrs.define(frozen=True)
class MailAttachment:
    filename: str
    content: bytes


@attrs.define(frozen=True)
class MailMessage:
    to: str
    subject: str
    text: str
    html: Optional[str] = None
    attachments: List[MailAttachment] = attrs.field(factory=list)
