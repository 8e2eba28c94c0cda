from typing import Any, Optional

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.api.utils.body import read_json_object
from src.app.services.email_sender import EmailSender
from src.app.use_cases.contact import ContactResponse, SendContactMessageUseCase
from src.depends import get_email_sender

router = APIRouter(prefix="/contact", tags=["Contact"])


class ContactRequest(BaseModel):
    name: Optional[Any] = None
    email: Optional[Any] = None
    message: Optional[Any] = None


@router.post("", status_code=status.HTTP_200_OK, response_model=ContactResponse)
async def send_contact_message(
    request: Request,
    email_sender: EmailSender = Depends(get_email_sender),
):
    """
    Contact Form

    Raises:
        - 400 Bad Request: a field is missing
        - 500 Internal Server Error: email delivery failed
    """
    payload = ContactRequest.model_validate(await read_json_object(request))

    use_case = SendContactMessageUseCase(email_sender, ApplicationConfig.CONTACT_TO_EMAIL)
    result = await use_case.execute(payload.name, payload.email, payload.message)

    if result.is_err():
        error = result.error
        if error.code == "INPUT_MISSING":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error, public_message=error.message)

    return result.value
