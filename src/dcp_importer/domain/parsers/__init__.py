"""Parsers for pulling problem fields out of emails."""

from .field_extractor import ProblemFieldExtractor, find_first

__all__ = ["ProblemFieldExtractor", "find_first"]
