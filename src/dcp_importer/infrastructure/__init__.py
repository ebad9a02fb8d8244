"""Adapters for the mbox archive, email parsing and MongoDB."""

from .archive import MboxArchiveReader
from .email_decoder import EmailDecoder
from .interfaces import EmailDecoderProtocol, ProblemRepositoryProtocol
from .repository import MongoProblemRepository

__all__ = [
    "EmailDecoder",
    "EmailDecoderProtocol",
    "MboxArchiveReader",
    "MongoProblemRepository",
    "ProblemRepositoryProtocol",
]
