from dcp_importer.services.duplicate_filter import DuplicateFilter
from dcp_importer.services.importer import ImportService
from dcp_importer.services.report import report_summary


def create_import_service(repository, threshold: int) -> ImportService:
    """Factory function to create the import service with all dependencies."""
    from dcp_importer.infrastructure.email_decoder import EmailDecoder

    return ImportService(
        repository=repository,
        decoder=EmailDecoder(),
        duplicate_filter=DuplicateFilter(threshold),
    )


__all__ = ["DuplicateFilter", "ImportService", "create_import_service", "report_summary"]
