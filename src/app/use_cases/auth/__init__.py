"""
Authentication Use Cases

Login and password reset flows.
"""

from .login_use_case import LoginUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .dtos import LoginResult, OkResponse

__all__ = [
    # Use Cases
    "LoginUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    # DTOs - Responses
    "LoginResult",
    "OkResponse",
]
