from .send_contact_message_use_case import ContactResponse, SendContactMessageUseCase

__all__ = ["SendContactMessageUseCase", "ContactResponse"]
