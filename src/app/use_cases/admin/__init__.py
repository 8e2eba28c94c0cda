"""
Admin Use Cases

System administration operations.
"""

from .purge_reset_tokens_use_case import PurgeResetTokensResponse, PurgeResetTokensUseCase

__all__ = [
    "PurgeResetTokensUseCase",
    "PurgeResetTokensResponse",
]
