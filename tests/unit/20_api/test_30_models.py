"""Tests for API record parsing."""

from datetime import datetime, timedelta, timezone

from tempy_email.models import CreatedMailbox, Email, MailboxStatus, parse_timestamp


class TestParseTimestamp:
    def test_zulu(self):
        assert parse_timestamp("2025-01-01T12:00:00Z") == datetime(2025, 1, 1, 12, tzinfo=timezone.utc)

    def test_offset(self):
        parsed = parse_timestamp("2025-01-01T12:00:00+02:00")
        assert parsed.utcoffset() == timedelta(hours=2)

    def test_naive_is_utc(self):
        assert parse_timestamp("2025-01-01T12:00:00").tzinfo == timezone.utc

    def test_empty(self):
        assert parse_timestamp(None) is None
        assert parse_timestamp("") is None


class TestEmail:
    def test_from_dict(self):
        email = Email.from_dict({
            "id": "msg-1",
            "from": "noreply@example.com",
            "to": "test@tempy.email",
            "subject": "Verify",
            "bodyText": "Code 123456",
            "bodyHtml": "<b>123456</b>",
            "receivedAt": "2025-01-01T11:00:00Z",
            "messageId": "<abc@example.com>",
            "direction": "inbound",
            "isRead": True,
            "allowReply": True,
        })
        assert email.id == "msg-1"
        assert email.from_addr == "noreply@example.com"
        assert email.body_html == "<b>123456</b>"
        assert email.message_id == "<abc@example.com>"
        assert email.is_read is True
        assert email.allow_reply is True

    def test_defaults(self):
        email = Email.from_dict({"id": 7})
        assert email.id == "7"
        assert email.subject == ""
        assert email.body_text == ""
        assert email.body_html is None
        assert email.direction == "inbound"
        assert email.is_read is False

    def test_repr(self):
        assert "Hello" in repr(Email(id="1", subject="Hello"))


class TestStatusAndCreated:
    def test_status_defaults(self):
        status = MailboxStatus.from_dict({"email": "a@tempy.email"})
        assert status.expires_at is None
        assert status.seconds_remaining == 0
        assert status.webhook_url is None

    def test_created(self):
        created = CreatedMailbox.from_dict({
            "email": "a@tempy.email",
            "webUrl": "https://tempy.email/a",
            "expiresAt": "2025-01-01T00:00:00Z",
            "secondsRemaining": 600,
        })
        assert created.web_url == "https://tempy.email/a"
        assert created.seconds_remaining == 600
        assert created.raw["email"] == "a@tempy.email"
