"""Decoder turning raw RFC 5322 messages into ParsedEmail objects."""

from datetime import datetime
from email import policy
from email.message import EmailMessage
from email.parser import BytesParser

from loguru import logger

from dcp_importer.domain.exceptions import EmailDecodeError
from dcp_importer.domain.models import ParsedEmail


class EmailDecoder:
    """Parses raw message bytes with the stdlib email package."""

    def __init__(self):
        self.parser = BytesParser(policy=policy.default)

    def decode(self, raw: bytes) -> ParsedEmail:
        """
        Parse a raw message.

        Args:
            raw: Message bytes as stored in the archive

        Returns:
            ParsedEmail with subject, bodies and date

        Raises:
            EmailDecodeError: If the message is malformed
        """
        if not isinstance(raw, (bytes, bytearray)):
            raise EmailDecodeError(f"Expected message bytes, got {type(raw).__name__}")

        try:
            message = self.parser.parsebytes(bytes(raw))
            subject = str(message.get("subject") or "").strip()
            message_id = str(message.get("message-id") or "").strip()
            date = self._parse_date(message)
            text_body = self._get_body(message, "plain")
            html_body = self._get_body(message, "html")
        except (LookupError, ValueError, TypeError) as e:
            raise EmailDecodeError(f"Unable to parse email: {e}") from e

        email = ParsedEmail(
            subject=subject,
            text_body=text_body,
            html_body=html_body,
            date=date,
            message_id=message_id,
        )

        logger.debug(f"Decoded email {email}: {subject!r}")
        return email

    def _parse_date(self, message: EmailMessage) -> datetime:
        header = message.get("date")
        if header is None:
            raise EmailDecodeError("Unable to parse email: missing Date header")

        date = getattr(header, "datetime", None)
        if date is None:
            raise EmailDecodeError(f"Unable to parse email: invalid Date header {str(header)!r}")
        return date

    def _get_body(self, message: EmailMessage, subtype: str) -> str:
        """Return the preferred text/<subtype> body part, or an empty string."""
        part = message.get_body(preferencelist=(subtype,))
        if part is None:
            return ""
        return part.get_content()
