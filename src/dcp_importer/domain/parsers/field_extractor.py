"""Regex extraction of problem fields from Daily Coding Problem emails."""

import re

from loguru import logger

from dcp_importer.domain.models import DIFFICULTIES, ParsedEmail, ProblemDescription


def find_first(pattern: re.Pattern[str], text: str) -> str:
    """Return the first capture group of the leftmost match, or an empty string."""
    match = pattern.search(text)
    if match:
        return match.group(1)
    return ""


class ProblemFieldExtractor:
    """Extracts number, difficulty and company from a decoded email."""

    # Subject looks like: "Daily Coding Problem: Problem #42 [Medium]"
    NUMBER_PATTERN = re.compile(r"(\d+)", re.ASCII)
    DIFFICULTY_PATTERN = re.compile(f"({'|'.join(DIFFICULTIES)})")
    # Body contains: "This problem was asked by Google."
    COMPANY_PATTERN = re.compile(r"asked by ([a-zA-Z\s]+)", re.ASCII)
    # Largest value MongoDB stores as an integer
    MAX_NUMBER = 2**63 - 1

    @classmethod
    def extract_number(cls, subject: str) -> int | None:
        """
        Return the first run of digits in the subject.

        Subjects without digits, or whose digits do not fit in a signed 64-bit
        integer, give None.
        """
        digits = find_first(cls.NUMBER_PATTERN, subject)
        if not digits:
            return None
        # Bound the length before int() so huge digit runs are never converted
        if len(digits.lstrip("0")) > len(str(cls.MAX_NUMBER)):
            return None
        number = int(digits)
        if number > cls.MAX_NUMBER:
            return None
        return number

    @classmethod
    def extract_difficulty(cls, subject: str) -> str:
        return find_first(cls.DIFFICULTY_PATTERN, subject)

    @classmethod
    def extract_company(cls, email: ParsedEmail) -> str:
        """Extract the company name from the plain-text body."""
        return find_first(cls.COMPANY_PATTERN, email.text_body)

    @classmethod
    def extract(cls, email: ParsedEmail) -> ProblemDescription:
        """
        Build a candidate record from an email.

        Args:
            email: Decoded email

        Returns:
            ProblemDescription whose number is None when the subject has no digits
        """
        problem = ProblemDescription(
            number=cls.extract_number(email.subject),
            difficulty=cls.extract_difficulty(email.subject),
            company=cls.extract_company(email),
            text=email.text_body,
            html=email.html_body,
            date=email.date,
        )

        logger.debug(
            f"Extracted problem {problem.number} "
            f"(difficulty={problem.difficulty!r}, company={problem.company!r}) from {email}"
        )
        return problem
