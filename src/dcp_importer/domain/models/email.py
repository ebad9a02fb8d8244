"""Value objects for decoded emails."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ParsedEmail:
    """The parts of an email the importer cares about."""

    subject: str
    text_body: str
    html_body: str
    date: datetime
    message_id: str = ""

    def __str__(self) -> str:
        """String representation."""
        return self.message_id or self.subject
