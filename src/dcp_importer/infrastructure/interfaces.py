"""Protocol interfaces for infrastructure adapters."""

from typing import Protocol

from dcp_importer.domain.models import ParsedEmail, ProblemDescription


class EmailDecoderProtocol(Protocol):
    """Protocol for decoding raw messages."""

    def decode(self, raw: bytes) -> ParsedEmail:
        """Parse raw message bytes."""
        ...


class ProblemRepositoryProtocol(Protocol):
    """Protocol for problem storage."""

    def latest_problem_number(self) -> int:
        """Return the highest stored problem number."""
        ...

    def insert(self, problem: ProblemDescription) -> ProblemDescription:
        """Insert a new problem."""
        ...
