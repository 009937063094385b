"""Tests for the email client.

Uses the `responses` library to mock HTTP requests.
"""

import json

import requests
import responses

from src.core.formatter import EmailMessage
from src.shell.email_client import RESEND_API_BASE, EmailClient


MESSAGE = EmailMessage(subject="HIGH Weather Alert", html="<p>Take shelter</p>")
FROM = "Weather Alerts <alerts@example.org>"


class TestSendEmail:
    """Tests for EmailClient.send_email()."""

    @responses.activate
    def test_successful_send(self):
        """Accepted email returns the provider message ID."""
        responses.add(responses.POST, RESEND_API_BASE, json={"id": "msg_123"}, status=200)

        result = EmailClient(api_key="re_key").send_email("a@b.co", MESSAGE, FROM)

        assert result.success is True
        assert result.status_code == 200
        assert result.message_id == "msg_123"
        assert result.error is None

    @responses.activate
    def test_sends_payload_and_auth(self):
        responses.add(responses.POST, RESEND_API_BASE, json={"id": "msg_1"}, status=201)

        EmailClient(api_key="re_key").send_email("a@b.co", MESSAGE, FROM)

        request = responses.calls[0].request
        assert request.headers["Authorization"] == "Bearer re_key"
        assert json.loads(request.body) == {
            "from": FROM,
            "to": ["a@b.co"],
            "subject": "HIGH Weather Alert",
            "html": "<p>Take shelter</p>",
        }

    @responses.activate
    def test_api_error(self):
        """Non-2xx response is a failure carrying the response text."""
        responses.add(responses.POST, RESEND_API_BASE, body="invalid from address", status=422)

        result = EmailClient(api_key="re_key").send_email("a@b.co", MESSAGE, FROM)

        assert result.success is False
        assert result.status_code == 422
        assert result.error == "invalid from address"

    @responses.activate
    def test_timeout(self):
        responses.add(responses.POST, RESEND_API_BASE, body=requests.Timeout("slow"))

        result = EmailClient(api_key="re_key").send_email("a@b.co", MESSAGE, FROM)

        assert result.success is False
        assert result.status_code == 0
        assert result.error == "Request timed out"

    @responses.activate
    def test_connection_error(self):
        responses.add(
            responses.POST,
            RESEND_API_BASE,
            body=requests.ConnectionError("Network down"),
        )

        result = EmailClient(api_key="re_key").send_email("a@b.co", MESSAGE, FROM)

        assert result.success is False
        assert "Network down" in result.error

    @responses.activate
    def test_missing_api_key(self):
        """No request is made without an API key."""
        result = EmailClient().send_email("a@b.co", MESSAGE, FROM)

        assert result.success is False
        assert result.error == "Email API key not configured"
        assert len(responses.calls) == 0

    @responses.activate
    def test_accepted_without_json_body(self):
        """A 2xx with an unreadable body still counts as sent."""
        responses.add(responses.POST, RESEND_API_BASE, body="OK", status=200)

        result = EmailClient(api_key="re_key").send_email("a@b.co", MESSAGE, FROM)

        assert result.success is True
        assert result.status_code == 200
        assert result.message_id is None

    @responses.activate
    def test_accepted_with_non_object_json(self):
        responses.add(responses.POST, RESEND_API_BASE, json=["msg_1"], status=201)

        result = EmailClient(api_key="re_key").send_email("a@b.co", MESSAGE, FROM)

        assert result.success is True
        assert result.message_id is None
