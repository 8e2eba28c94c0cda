from typing import Optional

from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """
    Upstream or unexpected failure.

    The response carries a generic message unless public_message is given.
    """

    def __init__(self, base_error: Error, public_message: Optional[str] = None):
        self.base_error = base_error
        self.public_message = public_message
        super().__init__(base_error.message)
