"""Problem records stored in the database."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

DIFFICULTIES = ("Easy", "Medium", "Hard")


@dataclass
class ProblemDescription:
    """A single problem extracted from an email.

    `number` is None while the record is still a candidate whose subject had
    no digits. `id`, `created_at` and `updated_at` are filled in by the
    repository on insert.
    """

    number: int | None
    difficulty: str
    company: str
    text: str
    html: str
    date: datetime
    id: Any = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_document(self) -> dict[str, Any]:
        """Convert to a MongoDB document."""
        document: dict[str, Any] = {
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "number": self.number,
            "difficulty": self.difficulty,
            "company": self.company,
            "text": self.text,
            "html": self.html,
            "date": self.date,
        }
        if self.id is not None:
            document["_id"] = self.id
        return document


@dataclass
class ImportSummary:
    """Counters for a single import run."""

    entered: int = 0
    skipped: int = 0

    @property
    def processed(self) -> int:
        """Total number of emails read from the archive."""
        return self.entered + self.skipped
