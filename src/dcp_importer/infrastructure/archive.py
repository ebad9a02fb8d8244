"""Reader for mbox archives."""

import mailbox
from collections.abc import Iterator
from pathlib import Path

from loguru import logger

from dcp_importer.domain.exceptions import ArchiveError


class MboxArchiveReader:
    """Yields the raw bytes of each message in an mbox file, in file order."""

    def __init__(self, path: str | Path):
        """
        Initialize reader.

        Args:
            path: Path to the mbox file
        """
        self.path = Path(path)
        self._mailbox: mailbox.mbox | None = None

    def __enter__(self) -> "MboxArchiveReader":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def open(self) -> None:
        """Open the archive. Missing or unreadable files raise ArchiveError."""
        logger.debug(f"Opening archive: {self.path}")

        try:
            self._mailbox = mailbox.mbox(self.path, create=False)
        except (OSError, mailbox.Error) as e:
            raise ArchiveError(f"Unable to open file named {self.path}: {e}") from e

    def close(self) -> None:
        if self._mailbox is None:
            return

        try:
            self._mailbox.close()
        finally:
            self._mailbox = None
            logger.debug(f"Closed archive: {self.path}")

    def __iter__(self) -> Iterator[bytes]:
        if self._mailbox is None:
            raise ArchiveError(f"Archive {self.path} is not open")
        return self._iter_messages(self._mailbox)

    def _iter_messages(self, mbox: mailbox.mbox) -> Iterator[bytes]:
        try:
            keys = mbox.keys()
        except (OSError, mailbox.Error) as e:
            raise ArchiveError(f"Unable to scan archive {self.path}: {e}") from e

        logger.info(f"Found {len(keys)} message(s) in {self.path}")

        for key in keys:
            try:
                raw = mbox.get_bytes(key)
            except (OSError, mailbox.Error, KeyError) as e:
                raise ArchiveError(f"Unable to read message {key} from {self.path}: {e}") from e
            yield raw
