"""
Admin API Routes - Maintenance Endpoints

Called by schedulers and operators.
Authentication is via Admin API Key, not player JWTs.
"""

from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from src.api.error import ServerError
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin import PurgeResetTokensResponse, PurgeResetTokensUseCase
from src.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/password-reset-tokens/purge",
    status_code=status.HTTP_200_OK,
    response_model=PurgeResetTokensResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def purge_reset_tokens(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Purge Expired Password Reset Tokens

    Deletes tokens that expired more than RESET_TOKEN_RETENTION_HOURS ago.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: Server error
    """
    use_case = PurgeResetTokensUseCase(
        uow, retention_hours=ApplicationConfig.RESET_TOKEN_RETENTION_HOURS
    )
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value
