"""Pocketlaw operations CLI.

Inspects the resolved webhook configuration and checks that the receiver
accepts deliveries.

Usage:
    python src/manage.py show-config     # Print the resolved webhook settings
    python src/manage.py ping-webhook    # POST one user_login envelope and report the result
"""

import argparse
import sys

import httpx

from shared.snapshots import Actor

PING_ACTOR = Actor(id="cli", name="Pocketlaw CLI", email="ops@pocketlaw.com", role="admin")


def show_config():
    """Print the webhook settings resolved from the environment."""
    from webhooks.settings import get_settings

    settings = get_settings()
    print(f"Environment:  {'development' if settings.development else 'production'}")
    print(f"Webhook URL:  {settings.webhook_url}")
    print(f"Timeout:      {settings.timeout}s")
    print(f"Dispatch:     {settings.dispatch.value} ({settings.max_workers} workers)")
    print(f"User-Agent:   {settings.user_agent}")


def ping_webhook(user_agent: str, client: httpx.Client | None = None) -> bool:
    """Send one envelope synchronously. Returns True when the receiver accepted it."""
    from shared.logging import configure_logging
    from webhooks.envelope import EventAction, UserLoginData, build_envelope, clock, isoformat
    from webhooks.settings import get_settings
    from webhooks.transport import HttpWebhookTransport

    configure_logging()

    settings = get_settings()
    transport = HttpWebhookTransport(settings, client=client)
    envelope = build_envelope(
        EventAction.USER_LOGIN,
        PING_ACTOR,
        UserLoginData(login_time=isoformat(clock.now()), user_agent=user_agent),
    )
    try:
        ok = transport.send(envelope)
    finally:
        transport.close()

    print(f"{'Delivered' if ok else 'FAILED'}: {envelope.action.value} -> {settings.webhook_url}")
    return ok


def main(argv=None, client: httpx.Client | None = None):
    parser = argparse.ArgumentParser(description="Pocketlaw operations")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("show-config", help="Print the resolved webhook settings")

    ping_parser = subparsers.add_parser("ping-webhook", help="Send a test envelope to the webhook receiver")
    ping_parser.add_argument(
        "--user-agent",
        default="pocketlaw-cli",
        help="userAgent reported in the test envelope",
    )

    args = parser.parse_args(argv)

    if args.command == "show-config":
        show_config()
    elif args.command == "ping-webhook":
        if not ping_webhook(args.user_agent, client=client):
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
