"""Email Client - Imperative Shell.

This module sends email through the Resend HTTP API.
All I/O is contained here; message formatting is in the core module.
"""

import logging
from dataclasses import dataclass

import requests

from src.core.formatter import EmailMessage


logger = logging.getLogger(__name__)


RESEND_API_BASE = "https://api.resend.com/emails"

# Default timeout for API requests (seconds)
DEFAULT_TIMEOUT = 10


@dataclass
class EmailResponse:
    """Response from the email API.

    Attributes:
        success: Whether the email was accepted
        status_code: HTTP status code (0 for transport errors)
        message_id: Provider message ID if accepted
        error: Error message if failed
    """
    success: bool
    status_code: int
    message_id: str | None = None
    error: str | None = None


def _message_id(response: requests.Response) -> str | None:
    """Read the message ID from an accepted response, if the body has one."""
    try:
        data = response.json()
    except ValueError:
        logger.warning("Email accepted but response body is not JSON")
        return None
    if not isinstance(data, dict):
        return None
    return data.get("id")


class EmailClient:
    """Client for sending email via Resend.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(
        self,
        api_key: str = "",
        base_url: str = RESEND_API_BASE,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize email client.

        Args:
            api_key: Resend API key
            base_url: Resend emails endpoint
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    def send_email(
        self,
        to: str,
        message: EmailMessage,
        from_address: str,
    ) -> EmailResponse:
        """Send an email.

        This method performs HTTP I/O.

        Args:
            to: Recipient address
            message: Rendered message (from formatter)
            from_address: Sender address

        Returns:
            EmailResponse indicating success or failure
        """
        if not self.api_key:
            logger.error("Email API key not configured")
            return EmailResponse(
                success=False,
                status_code=0,
                error="Email API key not configured",
            )

        payload = {
            "from": from_address,
            "to": [to],
            "subject": message.subject,
            "html": message.html,
        }

        logger.info("Sending email '%s'", message.subject)

        try:
            response = requests.post(
                self.base_url,
                json=payload,
                timeout=self.timeout,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
            )

            if response.status_code in (200, 201):
                message_id = _message_id(response)
                logger.info("Email accepted: %s", message_id)
                return EmailResponse(
                    success=True,
                    status_code=response.status_code,
                    message_id=message_id,
                )

            error_text = response.text
            logger.warning(
                "Email API returned %d - %s",
                response.status_code,
                error_text,
            )
            return EmailResponse(
                success=False,
                status_code=response.status_code,
                error=error_text,
            )

        except requests.Timeout:
            logger.error("Email API request timed out")
            return EmailResponse(
                success=False,
                status_code=0,
                error="Request timed out",
            )
        except requests.RequestException as e:
            logger.error("Email API request failed: %s", str(e))
            return EmailResponse(
                success=False,
                status_code=0,
                error=str(e),
            )
