"""Fake webhook transport that records envelopes for testing."""

import structlog

from webhooks.envelope import Envelope
from webhooks.transport import WebhookPort

logger = structlog.get_logger(__name__)


class FakeWebhookTransport(WebhookPort):
    """Webhook transport that records payloads in memory for test assertions."""

    def __init__(self):
        self.delivered: list[dict] = []
        self.dropped: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Webhook delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Webhook delivery failed"):
        """Configure the fake transport behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def deliver(self, envelope: Envelope) -> None:
        payload = envelope.to_payload()
        if not self.should_succeed:
            logger.error("Webhook delivery failed", action=payload["action"], error=self.failure_reason)
            self.dropped.append(payload)
            return

        self.delivered.append(payload)

    def actions(self) -> list[str]:
        """Actions of delivered payloads, in delivery order."""
        return [p["action"] for p in self.delivered]

    def of(self, action: str) -> list[dict]:
        """Delivered payloads carrying ``action``."""
        return [p for p in self.delivered if p["action"] == action]

    def reset(self):
        """Clear recorded payloads (useful between tests)."""
        self.delivered.clear()
        self.dropped.clear()
        self.should_succeed = True
        self.failure_reason = "Webhook delivery failed"
