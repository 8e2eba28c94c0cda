"""
Send Contact Message Use Case

Forwards a visitor message from the contact form to the site operator.
"""

import html
import logging
from typing import Any

from pydantic import BaseModel

from libs.result import Error, Result, Return
from src.app.services.email_sender import EmailDeliveryError, EmailSender, OutgoingEmail

logger = logging.getLogger(__name__)


class ContactResponse(BaseModel):
    ok: bool = True
    message: str = "Sent."


class SendContactMessageUseCase:
    """
    Business Rules:
    - name, email and message are all required and non-blank
    - The HTML part escapes visitor input
    """

    def __init__(self, email_sender: EmailSender, operator_email: str):
        self.email_sender = email_sender
        self.operator_email = operator_email

    async def execute(self, name: Any, email: Any, message: Any) -> Result[ContactResponse]:
        fields = (name, email, message)
        if not all(isinstance(f, str) and f.strip() for f in fields):
            return Return.err(Error("INPUT_MISSING", "Please fill in all fields."))

        text = f"Name: {name}\nEmail: {email}\n\nMessage:\n{message}"
        body = html.escape(message).replace("\n", "<br>")
        html_part = (
            f"<p><strong>Name:</strong> {html.escape(name)}</p>"
            f"<p><strong>Email:</strong> {html.escape(email)}</p>"
            "<p><strong>Message:</strong></p>"
            f"<p>{body}</p>"
        )

        try:
            await self.email_sender.send(
                OutgoingEmail(
                    to=self.operator_email,
                    subject=f"[Contact] Message from {name}",
                    text=text,
                    html=html_part,
                )
            )
        except EmailDeliveryError as e:
            logger.error(f"Contact message delivery failed: {e}")
            return Return.err(Error("SEND_FAILED", "Failed to send the message."))

        return Return.ok(ContactResponse())
