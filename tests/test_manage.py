"""Tests for the operations CLI."""

import json

import httpx
import manage
import pytest
from webhooks.settings import get_settings


def _client(status_code=200, error=None, requests=None):
    def handler(request):
        if requests is not None:
            requests.append(request)
        if error is not None:
            raise error
        return httpx.Response(status_code)

    return httpx.Client(transport=httpx.MockTransport(handler))


class TestShowConfig:
    def test_prints_test_endpoint(self, capsys):
        manage.main(["show-config"])

        out = capsys.readouterr().out
        assert get_settings().webhook_url in out
        assert "Pocketlaw-Dashboard/1.0.0" in out


class TestPingWebhook:
    def test_sends_one_user_login_envelope(self, capsys):
        requests = []

        assert manage.ping_webhook("ops-check", client=_client(requests=requests)) is True

        assert len(requests) == 1
        body = json.loads(requests[0].content)
        assert body["action"] == "user_login"
        assert body["user"]["id"] == "cli"
        assert body["data"]["userAgent"] == "ops-check"
        assert capsys.readouterr().out.startswith("Delivered: user_login")

    def test_rejected_envelope_reports_failure(self, capsys):
        assert manage.ping_webhook("ops-check", client=_client(status_code=500)) is False
        assert capsys.readouterr().out.startswith("FAILED: user_login")

    def test_main_exits_1_when_receiver_is_unreachable(self):
        client = _client(error=httpx.ConnectError("unreachable host"))

        with pytest.raises(SystemExit) as exc_info:
            manage.main(["ping-webhook"], client=client)

        assert exc_info.value.code == 1

    def test_main_succeeds_when_receiver_accepts(self):
        requests = []

        manage.main(["ping-webhook", "--user-agent", "cron"], client=_client(requests=requests))

        assert json.loads(requests[0].content)["data"]["userAgent"] == "cron"
