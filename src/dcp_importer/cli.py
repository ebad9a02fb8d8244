"""Command line entry point for the importer."""

import sys

from loguru import logger

from dcp_importer.config import DEFAULT_LOG_LEVEL, Settings
from dcp_importer.domain.exceptions import ImporterError
from dcp_importer.infrastructure import MboxArchiveReader, MongoProblemRepository
from dcp_importer.services import create_import_service, report_summary


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def run(settings: Settings) -> None:
    """Import every new problem from the configured archive."""
    repository = MongoProblemRepository.connect(settings)
    try:
        threshold = repository.latest_problem_number()
        service = create_import_service(repository, threshold)

        with MboxArchiveReader(settings.mbox_path) as archive:
            summary = service.run(archive)
    finally:
        repository.close()

    report_summary(summary)


def main() -> int:
    """Main entry point. Returns the process exit code."""
    configure_logging()

    try:
        settings = Settings.from_env()
        configure_logging(settings.log_level)
        run(settings)
    except ImporterError as e:
        logger.error(str(e))
        return 1

    return 0
