"""Domain models package."""

from .email import ParsedEmail
from .problem import DIFFICULTIES, ImportSummary, ProblemDescription

__all__ = [
    "DIFFICULTIES",
    "ImportSummary",
    "ParsedEmail",
    "ProblemDescription",
]
