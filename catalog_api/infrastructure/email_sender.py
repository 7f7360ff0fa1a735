"""Mock Email Sender — logs outbound mail instead of delivering it.

Invariants:
    - Every send is logged and recorded in the outbox, then reports success
    - The outbox keeps only the most recent OUTBOX_LIMIT messages
    - Never raises: a real sender would raise NotificationError on delivery failure
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

WELCOME_SUBJECT = "Welcome!"
PASSWORD_RESET_SUBJECT = "Password Reset Request"
OUTBOX_LIMIT = 100


@dataclass(frozen=True)
class SentEmail:
    """A message accepted by the mock sender."""
    to: str
    subject: str
    body: str
    sent_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class MockEmailSender:
    """EmailSender that records messages in memory."""

    def __init__(self, outbox_limit: int = OUTBOX_LIMIT) -> None:
        self.outbox: deque[SentEmail] = deque(maxlen=outbox_limit)

    async def send_email(self, to: str, subject: str, body: str) -> bool:
        return self._record(to, subject, body)

    async def send_welcome_email(self, user_email: str, user_name: str) -> bool:
        body = f"Hello {user_name}, welcome to our platform!"
        return self._record(user_email, WELCOME_SUBJECT, body)

    async def send_password_reset_email(
        self, user_email: str, reset_token: str,
    ) -> bool:
        body = f"Click here to reset your password. Token: {reset_token}"
        return self._record(user_email, PASSWORD_RESET_SUBJECT, body)

    def _record(self, to: str, subject: str, body: str) -> bool:
        logger.info(
            f"[MOCK EMAIL] To: {to}, Subject: {subject}, Body: {body}",
            extra={"email": to},
        )
        self.outbox.append(SentEmail(to=to, subject=subject, body=body))
        return True
