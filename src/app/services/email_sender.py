from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class OutgoingEmail(BaseModel):
    """Transactional email payload"""

    to: str
    subject: str
    text: str
    html: Optional[str] = None


class EmailDeliveryError(Exception):
    """Raised when the email provider rejects or cannot be reached"""


class EmailSender(ABC):
    """Outbound email port - application layer"""

    @abstractmethod
    async def send(self, email: OutgoingEmail) -> None:
        """Send an email. Raises EmailDeliveryError on failure."""
        pass
