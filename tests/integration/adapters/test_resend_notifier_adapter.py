"""
Tests for ResendNotifierAdapter.
The resend SDK is patched, so no real HTTP calls are made.
"""

from unittest.mock import patch

import pytest

from vcfcollector.adapters.resend_notifier_adapter import ResendNotifierAdapter


@pytest.mark.asyncio
class TestSendExport:
    async def test_stubs_without_api_key(self, monkeypatch):
        monkeypatch.delenv("RESEND_API_KEY", raising=False)
        adapter = ResendNotifierAdapter(to_email="owner@example.com")
        with patch("vcfcollector.adapters.resend_notifier_adapter.resend.Emails.send") as send:
            result = await adapter.send_export("x.vcf", "BEGIN:VCARD", 1)
        assert result.success is True
        send.assert_not_called()

    async def test_no_recipient_fails(self):
        adapter = ResendNotifierAdapter(to_email="", api_key="re_test")
        result = await adapter.send_export("x.vcf", "BEGIN:VCARD", 1)
        assert result.success is False
        assert "recipient" in result.error

    async def test_sends_attachment(self):
        adapter = ResendNotifierAdapter(
            to_email="owner@example.com", api_key="re_test", from_email="bot@example.com"
        )
        with patch("vcfcollector.adapters.resend_notifier_adapter.resend.Emails.send") as send:
            send.return_value = {"id": "email-123"}
            result = await adapter.send_export("done.vcf", "BEGIN:VCARD\r\n", 200)

        assert result.success is True
        assert result.destination == "owner@example.com"
        payload = send.call_args.args[0]
        assert payload["from"] == "bot@example.com"
        assert payload["to"] == ["owner@example.com"]
        assert "200" in payload["subject"]
        attachment = payload["attachments"][0]
        assert attachment["filename"] == "done.vcf"
        assert bytes(attachment["content"]) == b"BEGIN:VCARD\r\n"

    async def test_sdk_error_is_returned_not_raised(self):
        adapter = ResendNotifierAdapter(to_email="owner@example.com", api_key="re_test")
        with patch("vcfcollector.adapters.resend_notifier_adapter.resend.Emails.send") as send:
            send.side_effect = Exception("403 forbidden")
            result = await adapter.send_export("done.vcf", "x", 200)
        assert result.success is False
        assert "403" in result.error
