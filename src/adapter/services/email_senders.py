"""
Email sender implementations.

ResendEmailSender talks to the Resend HTTP API through a shared
httpx.AsyncClient created at application start-up. LogEmailSender is used
in development and never prints message bodies, which may carry reset links.
"""

import logging

import httpx

from src.app.services.email_sender import EmailDeliveryError, EmailSender, OutgoingEmail

logger = logging.getLogger(__name__)


class ResendEmailSender(EmailSender):
    def __init__(self, client: httpx.AsyncClient, api_key: str, from_email: str):
        self.client = client
        self.api_key = api_key
        self.from_email = from_email

    async def send(self, email: OutgoingEmail) -> None:
        payload = {
            "from": self.from_email,
            "to": [email.to],
            "subject": email.subject,
            "text": email.text,
        }
        if email.html is not None:
            payload["html"] = email.html

        try:
            response = await self.client.post(
                "/emails",
                json=payload,
                headers={"Authorization": f"Bearer {self.api_key}"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Resend rejected email: status={e.response.status_code} body={e.response.text}"
            )
            raise EmailDeliveryError(f"Resend returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"Resend request failed: {e!r}")
            raise EmailDeliveryError("Resend request failed") from e

        logger.info(f"Email sent via Resend: subject={email.subject!r}")


class LogEmailSender(EmailSender):
    async def send(self, email: OutgoingEmail) -> None:
        logger.info(f"Email (log only) to={email.to} subject={email.subject!r}")
