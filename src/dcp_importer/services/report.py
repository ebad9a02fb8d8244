"""Summary printed at the end of an import run."""

from loguru import logger

from dcp_importer.domain.models import ImportSummary


def report_summary(summary: ImportSummary) -> None:
    logger.info("All problems uploaded successfully")
    logger.info(f"Total number of problems uploaded: {summary.entered}")
    logger.info(f"Total number of emails skipped: {summary.skipped}")
