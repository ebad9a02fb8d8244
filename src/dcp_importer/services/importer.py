"""Service that moves problems from decoded emails into storage."""

from collections.abc import Iterable

from loguru import logger

from dcp_importer.domain.models import ImportSummary
from dcp_importer.domain.parsers import ProblemFieldExtractor
from dcp_importer.infrastructure.interfaces import (
    EmailDecoderProtocol,
    ProblemRepositoryProtocol,
)
from dcp_importer.services.duplicate_filter import DuplicateFilter


class ImportService:
    """Decodes, extracts, filters and stores problems one message at a time."""

    def __init__(
        self,
        *,
        repository: ProblemRepositoryProtocol,
        decoder: EmailDecoderProtocol,
        duplicate_filter: DuplicateFilter,
        extractor: type[ProblemFieldExtractor] = ProblemFieldExtractor,
    ):
        """Initialize service with dependencies."""
        self.repository = repository
        self.decoder = decoder
        self.duplicate_filter = duplicate_filter
        self.extractor = extractor

    def run(self, messages: Iterable[bytes]) -> ImportSummary:
        """
        Import every new problem found in the messages.

        Any error raised by the decoder or the repository stops the run; the
        problems inserted before it stay stored.

        Args:
            messages: Raw message bytes in archive order

        Returns:
            ImportSummary with entered and skipped counts
        """
        summary = ImportSummary()

        for raw in messages:
            email = self.decoder.decode(raw)
            problem = self.extractor.extract(email)

            if self.duplicate_filter.is_duplicate(problem.number):
                logger.debug(f"Skipping email {email}: problem {problem.number} already present")
                summary.skipped += 1
                continue

            self.repository.insert(problem)
            summary.entered += 1
            logger.info(f"Uploaded problem {problem.number}")

        return summary
