"""
Console mailer adapter - Implements Mailer protocol.

This module provides a console-based implementation of the domain's
mailer port, logging organizer notifications instead of sending them.
"""

import logging

logger = logging.getLogger(__name__)


class ConsoleMailer:
    """
    Implements Mailer protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - prints notifications to stdout.
    """

    def send(self, to: str, subject: str, body: str) -> None:
        """
        Log the message to console (simulates email delivery).

        Args:
            to: Recipient email address
            subject: Message subject
            body: Message body
        """
        logger.info("[EMAIL] To: %s Subject: %s Body: %s", to, subject, body)
