"""Plain-text message composition."""

from datetime import datetime
from typing import Optional

from ..models.email_message import DEFAULT_SENDER, OutgoingMessage

LINE_ENDING = "\n"


def generate_message_id(now: datetime, domain: str = "local") -> str:
    """
    Build a Message-ID from a timestamp.

    Args:
        now: Time the message is sent
        domain: Right-hand side of the identifier

    Returns:
        Message-ID in format <unix-seconds@domain>
    """
    return f"<{int(now.timestamp())}@{domain}>"


def build_message(
    recipient: str,
    subject: str,
    body: str,
    sender: str = DEFAULT_SENDER,
    now: Optional[datetime] = None,
    domain: str = "local",
) -> OutgoingMessage:
    """
    Capture the send time once and build the message around it.

    Args:
        recipient: To address, used verbatim
        subject: Subject line, used verbatim
        body: Message body
        sender: From address
        now: Send time (default: current local time, whole seconds)
        domain: Message-ID domain

    Returns:
        OutgoingMessage whose timestamp and Message-ID stay fixed
    """
    if now is None:
        now = datetime.now().replace(microsecond=0)

    return OutgoingMessage(
        sender=sender,
        recipient=recipient,
        subject=subject,
        body=body,
        sent_at=now,
        message_id=generate_message_id(now, domain),
    )


def compose_message(
    sender: str,
    recipient: str,
    subject: str,
    body: str,
    now: datetime,
    domain: str = "local",
) -> str:
    """
    Format message text: five header lines, a blank line, the body.

    Header values are written as given. No folding or escaping is done, so a
    value containing a newline will break the header block.

    Args:
        sender: From address
        recipient: To address
        subject: Subject line
        body: Message body
        now: Send time for the Date and Message-ID headers
        domain: Message-ID domain

    Returns:
        Message text with a trailing newline after the body
    """
    message = build_message(recipient, subject, body, sender=sender, now=now, domain=domain)
    return render_message(message)


def render_message(message: OutgoingMessage) -> str:
    """Serialize an already built message."""
    headers = [
        f"From: {message.sender}",
        f"To: {message.recipient}",
        f"Subject: {message.subject}",
        f"Date: {message.date_header}",
        f"Message-ID: {message.message_id}",
    ]
    return LINE_ENDING.join(headers) + LINE_ENDING + LINE_ENDING + message.body + LINE_ENDING
