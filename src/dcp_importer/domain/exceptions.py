"""Exceptions raised by the importer."""


class ImporterError(Exception):
    """Base error for the importer. Every subclass aborts the run."""

    pass


class ConfigurationError(ImporterError):
    """Missing or invalid settings, or the database is unreachable."""

    pass


class BootstrapError(ImporterError):
    """The latest stored problem number cannot be determined."""

    pass


class ArchiveError(ImporterError):
    """The mbox archive cannot be opened or read."""

    pass


class EmailDecodeError(ImporterError):
    """A message in the archive is malformed."""

    pass


class StorageError(ImporterError):
    """A problem could not be written to the database."""

    pass
