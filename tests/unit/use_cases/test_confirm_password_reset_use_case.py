"""
Unit tests for ConfirmPasswordResetUseCase

Tests all business logic with mocked dependencies.
"""
from datetime import timedelta
from uuid import uuid4

import pytest

from libs.result import Error, Return
from src.app.use_cases.auth.confirm_password_reset_use_case import (
    ConfirmPasswordResetUseCase,
    validate_password,
)
from src.app.use_cases.auth.request_password_reset_use_case import hash_reset_token
from src.domain.base import utcnow
from src.domain.entities import PasswordResetToken

PLAIN_TOKEN = "a" * 64
STRONG_PASSWORD = "NewSecurePass123"


def make_token(expires_in=timedelta(minutes=20), used_at=None):
    return PasswordResetToken(
        id=uuid4(),
        user_id=uuid4(),
        token_hash=hash_reset_token(PLAIN_TOKEN),
        expires_at=utcnow() + expires_in,
        used_at=used_at,
    )


@pytest.fixture
def use_case(mock_uow, mock_identity_provider):
    mock_identity_provider.update_password.return_value = Return.ok(None)
    mock_uow.password_reset_tokens.mark_used.return_value = True
    return ConfirmPasswordResetUseCase(mock_uow, mock_identity_provider)


@pytest.mark.asyncio
async def test_successful_password_reset_confirmation(use_case, mock_uow, mock_identity_provider):
    # Arrange
    token = make_token()
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = token

    # Act
    result = await use_case.execute(PLAIN_TOKEN, STRONG_PASSWORD)

    # Assert
    assert result.is_ok()
    assert result.value.ok is True

    mock_uow.password_reset_tokens.get_by_token_hash.assert_called_once_with(
        hash_reset_token(PLAIN_TOKEN)
    )
    mock_uow.password_reset_tokens.mark_used.assert_called_once()
    assert mock_uow.password_reset_tokens.mark_used.call_args[0][0] == token.id
    mock_identity_provider.update_password.assert_called_once_with(token.user_id, STRONG_PASSWORD)

    event = mock_uow.audit_events.create.call_args[0][0]
    assert event.action == "password_reset_confirmed"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "token, password, code",
    [
        (None, STRONG_PASSWORD, "INPUT_MISSING"),
        (PLAIN_TOKEN, None, "INPUT_MISSING"),
        ("", "", "INPUT_MISSING"),
        (123, STRONG_PASSWORD, "INPUT_INVALID"),
        (PLAIN_TOKEN, ["NewSecurePass123"], "INPUT_INVALID"),
    ],
)
async def test_missing_or_invalid_input(use_case, mock_uow, token, password, code):
    result = await use_case.execute(token, password)

    assert result.is_err()
    assert result.error.code == code
    mock_uow.password_reset_tokens.get_by_token_hash.assert_not_called()


@pytest.mark.asyncio
async def test_weak_password_rejected_before_lookup(use_case, mock_uow):
    result = await use_case.execute(PLAIN_TOKEN, "short")

    assert result.is_err()
    assert result.error == Error(
        "WEAK_PASSWORD", "Password must be at least 12 characters long."
    )
    mock_uow.password_reset_tokens.get_by_token_hash.assert_not_called()


@pytest.mark.parametrize(
    "password, message",
    [
        ("abcdefghijk", "Password must be at least 12 characters long."),
        ("abcdefghijk1", "Include at least one upper-case letter."),
        ("ABCDEFGHIJK1", "Include at least one lower-case letter."),
        ("Abcdefghijkl", "Include at least one digit."),
    ],
)
def test_password_rules_report_first_failure(password, message):
    result = validate_password(password)

    assert result.is_err()
    assert result.error.message == message


def test_strong_password_passes():
    assert validate_password("Abcdefghijk1").is_ok()


@pytest.mark.asyncio
async def test_unknown_token(use_case, mock_uow):
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = None

    result = await use_case.execute(PLAIN_TOKEN, STRONG_PASSWORD)

    assert result.is_err()
    assert result.error == Error("INVALID_TOKEN", "The link is invalid or has expired.")
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_used_token(use_case, mock_uow, mock_identity_provider):
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = make_token(
        used_at=utcnow() - timedelta(minutes=1)
    )

    result = await use_case.execute(PLAIN_TOKEN, STRONG_PASSWORD)

    assert result.is_err()
    assert result.error == Error("TOKEN_ALREADY_USED", "This link has already been used.")
    mock_uow.password_reset_tokens.mark_used.assert_not_called()
    mock_identity_provider.update_password.assert_not_called()


@pytest.mark.asyncio
async def test_used_check_precedes_expiry_check(use_case, mock_uow):
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = make_token(
        expires_in=timedelta(minutes=-5),
        used_at=utcnow() - timedelta(minutes=10),
    )

    result = await use_case.execute(PLAIN_TOKEN, STRONG_PASSWORD)

    assert result.error.code == "TOKEN_ALREADY_USED"


@pytest.mark.asyncio
async def test_expired_token(use_case, mock_uow, mock_identity_provider):
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = make_token(
        expires_in=timedelta(seconds=-1)
    )

    result = await use_case.execute(PLAIN_TOKEN, STRONG_PASSWORD)

    assert result.is_err()
    assert result.error == Error("TOKEN_EXPIRED", "This link has expired.")
    mock_uow.password_reset_tokens.mark_used.assert_not_called()
    mock_identity_provider.update_password.assert_not_called()


@pytest.mark.asyncio
async def test_losing_concurrent_consume_reports_already_used(
    use_case, mock_uow, mock_identity_provider
):
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = make_token()
    mock_uow.password_reset_tokens.mark_used.return_value = False

    result = await use_case.execute(PLAIN_TOKEN, STRONG_PASSWORD)

    assert result.is_err()
    assert result.error.code == "TOKEN_ALREADY_USED"
    mock_identity_provider.update_password.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_same_password_is_client_error(use_case, mock_uow, mock_identity_provider):
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = make_token()
    mock_identity_provider.update_password.return_value = Return.err(
        Error("SAME_PASSWORD", "New password should be different from the old password")
    )

    result = await use_case.execute(PLAIN_TOKEN, STRONG_PASSWORD)

    assert result.is_err()
    assert result.error == Error(
        "SAME_PASSWORD", "The new password must differ from the current password."
    )
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_password_update_failure_leaves_token_unconsumed(
    use_case, mock_uow, mock_identity_provider
):
    mock_uow.password_reset_tokens.get_by_token_hash.return_value = make_token()
    mock_identity_provider.update_password.return_value = Return.err(
        Error("USER_NOT_FOUND", "User not found")
    )

    result = await use_case.execute(PLAIN_TOKEN, STRONG_PASSWORD)

    assert result.is_err()
    assert result.error == Error("PASSWORD_UPDATE_FAILED", "Failed to update the password.")
    # Nothing committed, so the consume is rolled back with the transaction
    mock_uow.commit.assert_not_called()
