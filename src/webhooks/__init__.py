"""Webhook transport registry — process-wide access to the delivery adapter.

The HTTP transport is built lazily from ``WebhookSettings`` resolved from the
environment. Tests swap in ``FakeWebhookTransport`` via ``set_transport``.
"""

from contextlib import asynccontextmanager

import structlog

from webhooks.settings import get_settings
from webhooks.transport import HttpWebhookTransport, WebhookPort

logger = structlog.get_logger(__name__)

_transport: WebhookPort | None = None


def get_transport() -> WebhookPort:
    """Return the configured transport (singleton)."""
    global _transport
    if _transport is None:
        _transport = HttpWebhookTransport(get_settings())
    return _transport


def set_transport(transport: WebhookPort) -> WebhookPort:
    """Install ``transport`` as the process-wide transport; returns it."""
    global _transport
    _transport = transport
    return transport


def reset_transport():
    """Close and forget the current transport (useful for testing)."""
    global _transport
    if _transport is not None:
        _transport.close()
    _transport = None


@asynccontextmanager
async def lifespan(app):
    """FastAPI lifespan: close the transport on shutdown so detached deliveries finish."""
    yield
    logger.info("Closing webhook transport")
    get_transport().close()
