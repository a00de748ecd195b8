"""Webhook delivery settings, resolved once from the process environment."""

import os
from enum import Enum
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TEST_URL = "https://mzm836987q3287.app.n8n.cloud/webhook-test/proposal-upload"
DEFAULT_PRODUCTION_URL = "https://mzm836987q3287.app.n8n.cloud/webhook/proposal-upload"
DEFAULT_USER_AGENT = "Pocketlaw-Dashboard/1.0.0"

# Deployment modes that deliver to the production receiver
_PRODUCTION_MODES = {"production", "staging"}


class DispatchMode(Enum):
    DETACHED = "detached"
    INLINE = "inline"


class WebhookSettings(BaseModel):
    """Immutable transport configuration injected into the HTTP transport."""

    model_config = ConfigDict(frozen=True)

    test_url: str = DEFAULT_TEST_URL
    production_url: str = DEFAULT_PRODUCTION_URL
    development: bool = True
    timeout: float = Field(default=5.0, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    dispatch: DispatchMode = DispatchMode.DETACHED
    max_workers: int = Field(default=4, ge=1)

    @property
    def webhook_url(self) -> str:
        return self.test_url if self.development else self.production_url

    @classmethod
    def from_env(cls, environ=None) -> "WebhookSettings":
        """Build settings from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        mode = (env.get("PROTEAN_ENV") or "development").lower()

        return cls(
            test_url=env.get("N8N_TEST_URL") or DEFAULT_TEST_URL,
            production_url=env.get("N8N_PRODUCTION_URL") or DEFAULT_PRODUCTION_URL,
            development=mode not in _PRODUCTION_MODES,
            timeout=float(env.get("WEBHOOK_TIMEOUT") or 5.0),
            dispatch=DispatchMode(env.get("WEBHOOK_DISPATCH") or DispatchMode.DETACHED.value),
            max_workers=int(env.get("WEBHOOK_MAX_WORKERS") or 4),
        )


@lru_cache(maxsize=1)
def get_settings() -> WebhookSettings:
    """Process-wide settings, read from the environment on first use."""
    return WebhookSettings.from_env()
