"""Builders for test emails and archives."""

import mailbox
from datetime import datetime, timezone
from email.message import EmailMessage
from pathlib import Path

from dcp_importer.domain.models import ParsedEmail

DATE_HEADER = "Mon, 01 Jan 2024 09:00:00 +0000"


def make_message(
    subject: str = "Daily Coding Problem: Problem #42 [Medium]",
    text: str | None = "Good morning!\n\nThis problem was asked by Google.\n\nGiven a list...",
    html: str | None = None,
    date: str | None = DATE_HEADER,
) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = "Daily Coding Problem <founders@dailycodingproblem.com>"
    msg["To"] = "me@example.com"
    msg["Subject"] = subject
    msg["Message-ID"] = "<problem@dailycodingproblem.com>"
    if date is not None:
        msg["Date"] = date

    if text is not None:
        msg.set_content(text)
        if html is not None:
            msg.add_alternative(html, subtype="html")
    elif html is not None:
        msg.set_content(html, subtype="html")

    return msg


def make_email(
    subject: str = "Daily Coding Problem: Problem #42 [Medium]",
    text_body: str = "This problem was asked by Google.",
    html_body: str = "",
) -> ParsedEmail:
    return ParsedEmail(
        subject=subject,
        text_body=text_body,
        html_body=html_body,
        date=datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc),
        message_id="<problem@dailycodingproblem.com>",
    )


def write_mbox(path: Path, messages: list[EmailMessage]) -> Path:
    box = mailbox.mbox(path)
    try:
        for message in messages:
            box.add(message)
    finally:
        box.close()
    return path
