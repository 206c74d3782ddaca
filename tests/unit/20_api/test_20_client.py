"""Tests for TempyEmailClient."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from tempy_email.client import TempyEmailClient
from tempy_email.config import DEFAULT_BASE_URL, ClientConfig
from tempy_email.errors import ApiError
from tempy_email.mailbox import Mailbox

CREATED = {
    "email": "test@tempy.email",
    "webUrl": "https://tempy.email",
    "expiresAt": "2025-01-01T00:00:00Z",
    "secondsRemaining": 3600,
}


class TestClientInit:
    def test_defaults(self):
        client = TempyEmailClient()
        assert client.base_url == DEFAULT_BASE_URL
        assert client.timeout_ms == 30_000

    def test_custom_url_and_timeout(self):
        client = TempyEmailClient(base_url="https://custom.api.com/", timeout_ms=60_000)
        assert client.base_url == "https://custom.api.com"
        assert client.timeout_ms == 60_000

    def test_arguments_override_config(self):
        config = ClientConfig(base_url="https://from-config", timeout_ms=1000, poll_interval_ms=250)
        client = TempyEmailClient(timeout_ms=5000, config=config)
        assert client.base_url == "https://from-config"
        assert client.timeout_ms == 5000
        assert client.config.poll_interval_ms == 250
        assert config.timeout_ms == 1000

    def test_zero_timeout_is_kept(self):
        client = TempyEmailClient(timeout_ms=0, config=ClientConfig(timeout_ms=1000))
        assert client.timeout_ms == 0

    def test_repr(self):
        assert "https://custom.api.com" in repr(TempyEmailClient(base_url="https://custom.api.com"))


class TestCreateMailbox:
    @pytest.mark.asyncio
    async def test_without_options(self, fake_http):
        fake_http.queue(CREATED)
        mailbox = await TempyEmailClient().create_mailbox()

        method, url, kwargs = fake_http.calls[0]
        assert (method, url) == ("POST", f"{DEFAULT_BASE_URL}/mailbox")
        assert kwargs["params"] is None
        assert isinstance(mailbox, Mailbox)
        assert mailbox.address == "test@tempy.email"
        assert mailbox.expires_at == datetime(2025, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_with_webhook_defaults_to_json(self, fake_http):
        fake_http.queue({**CREATED, "webhookUrl": "https://example.com/webhook", "webhookFormat": "json"})
        mailbox = await TempyEmailClient().create_mailbox(webhook_url="https://example.com/webhook")

        _, _, kwargs = fake_http.calls[0]
        assert kwargs["params"] == {"webhookUrl": "https://example.com/webhook", "webhookFormat": "json"}
        assert mailbox.webhook_url == "https://example.com/webhook"

    @pytest.mark.asyncio
    async def test_with_xml_webhook_and_domain(self, fake_http):
        fake_http.queue(CREATED)
        await TempyEmailClient().create_mailbox(
            domain="tempy.email",
            webhook_url="https://example.com/webhook",
            webhook_format="xml",
        )
        _, _, kwargs = fake_http.calls[0]
        assert kwargs["params"] == {
            "webhookUrl": "https://example.com/webhook",
            "webhookFormat": "xml",
            "domain": "tempy.email",
        }

    @pytest.mark.asyncio
    async def test_invalid_options_rejected_before_request(self, fake_http):
        with pytest.raises(ValidationError):
            await TempyEmailClient().create_mailbox(webhook_format="yaml")
        assert fake_http.calls == []

    @pytest.mark.asyncio
    async def test_failure(self, fake_http):
        fake_http.queue(None, status=500, reason="Internal Server Error")
        with pytest.raises(ApiError, match="Failed to create mailbox: 500 Internal Server Error"):
            await TempyEmailClient().create_mailbox()

    @pytest.mark.asyncio
    async def test_mailbox_inherits_client_settings(self, fake_http):
        fake_http.queue(CREATED)
        client = TempyEmailClient(base_url="https://custom.api.com", timeout_ms=45_000)
        mailbox = await client.create_mailbox()
        assert mailbox.config.timeout_ms == 45_000

        fake_http.queue({"emails": []})
        await mailbox.get_messages()
        assert fake_http.calls[-1][1] == "https://custom.api.com/mailbox/test@tempy.email"


class TestGetMailbox:
    @pytest.mark.asyncio
    async def test_existing(self, fake_http):
        fake_http.queue({
            "email": "test@tempy.email",
            "createdAt": "2024-12-31T23:00:00Z",
            "expiresAt": "2025-01-01T00:00:00Z",
            "secondsRemaining": 3600,
            "isExpired": False,
        })
        mailbox = await TempyEmailClient().get_mailbox("test@tempy.email")
        assert fake_http.calls[0][:2] == ("GET", f"{DEFAULT_BASE_URL}/mailbox/test@tempy.email")
        assert mailbox.address == "test@tempy.email"

    @pytest.mark.asyncio
    async def test_missing(self, fake_http):
        fake_http.queue(None, status=404, reason="Not Found")
        with pytest.raises(ApiError, match="Failed to get mailbox: 404 Not Found"):
            await TempyEmailClient().get_mailbox("missing@tempy.email")
