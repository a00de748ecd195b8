"""Webhook delivery transport.

``WebhookPort`` is the abstract delivery interface consumed by the catalog.
``HttpWebhookTransport`` POSTs envelopes to the configured receiver. It makes
exactly one attempt per envelope and never raises: any failure is logged and
the envelope is dropped. In ``detached`` mode the POST runs on a worker pool
and the caller returns immediately.
"""

import threading
from abc import ABC, abstractmethod
from concurrent.futures import Future, ThreadPoolExecutor, wait

import httpx
import structlog

from webhooks.envelope import Envelope
from webhooks.settings import DispatchMode, WebhookSettings

logger = structlog.get_logger(__name__)


class WebhookPort(ABC):
    """Abstract interface for webhook delivery adapters."""

    @abstractmethod
    def deliver(self, envelope: Envelope) -> None:
        """Deliver an envelope at most once. Must never raise."""
        ...

    def flush(self, timeout: float | None = None) -> None:
        """Block until in-flight deliveries finish (no-op for synchronous adapters)."""

    def close(self) -> None:
        """Release transport resources."""


class HttpWebhookTransport(WebhookPort):
    """Delivers envelopes as JSON over HTTP POST."""

    def __init__(self, settings: WebhookSettings, client: httpx.Client | None = None):
        self.settings = settings
        self._client = client or httpx.Client(timeout=settings.timeout)
        self._executor: ThreadPoolExecutor | None = None
        self._pending: dict[Future, str] = {}
        self._lock = threading.Lock()

    @property
    def url(self) -> str:
        return self.settings.webhook_url

    def deliver(self, envelope: Envelope) -> None:
        if self.settings.dispatch is DispatchMode.INLINE:
            self.send(envelope)
            return

        try:
            future = self._pool().submit(self.send, envelope)
        except RuntimeError as exc:
            # Pool already shut down
            logger.error(
                "Webhook dropped, transport is closed",
                action=envelope.action.value,
                error=str(exc),
            )
            return

        with self._lock:
            self._pending[future] = envelope.action.value
        future.add_done_callback(self._forget)

    def flush(self, timeout: float | None = None) -> None:
        with self._lock:
            pending = list(self._pending)
        if pending:
            wait(pending, timeout=timeout)

    def close(self) -> None:
        """Wait briefly for in-flight deliveries, drop the queued rest, close the client.

        Deliveries already running finish before the client is closed; queued
        ones are cancelled and logged.
        """
        self.flush(timeout=self.settings.timeout)
        if self._executor is not None:
            with self._lock:
                pending = dict(self._pending)
            self._executor.shutdown(wait=True, cancel_futures=True)
            for future, action in pending.items():
                if future.cancelled():
                    logger.error("Webhook dropped, transport is closing", action=action)
        self._client.close()

    def send(self, envelope: Envelope) -> bool:
        """Send one envelope. Returns True when the receiver accepted it."""
        action = envelope.action.value
        url = self.url

        logger.debug("Sending webhook", action=action, url=url)
        try:
            response = self._client.post(
                url,
                json=envelope.to_payload(),
                headers={
                    "Content-Type": "application/json",
                    "User-Agent": self.settings.user_agent,
                },
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Webhook rejected by receiver",
                action=action,
                url=url,
                status_code=exc.response.status_code,
                reason=exc.response.reason_phrase,
            )
            return False
        except httpx.HTTPError as exc:
            logger.error("Webhook delivery failed", action=action, url=url, error=str(exc))
            return False
        except (TypeError, ValueError) as exc:
            logger.error("Webhook payload could not be serialized", action=action, error=str(exc))
            return False
        except Exception as exc:
            logger.error("Webhook delivery failed", action=action, url=url, error=repr(exc))
            return False

        logger.info("Webhook sent", action=action, status_code=response.status_code)
        return True

    # -------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------
    def _pool(self) -> ThreadPoolExecutor:
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.settings.max_workers,
                    thread_name_prefix="webhook",
                )
            return self._executor

    def _forget(self, future: Future) -> None:
        with self._lock:
            self._pending.pop(future, None)
