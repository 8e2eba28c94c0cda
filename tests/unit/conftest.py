import pytest
from unittest.mock import AsyncMock, MagicMock


def _repository(*methods):
    repo = MagicMock()
    for name in methods:
        setattr(repo, name, AsyncMock())
    return repo


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with every repository method as an AsyncMock"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = _repository("get_by_id", "get_by_email", "update")
    uow.profiles = _repository(
        "get_by_id", "get_by_handle", "update", "top_by_best_streak"
    )
    uow.password_reset_tokens = _repository(
        "create", "get_by_token_hash", "mark_used", "delete_expired"
    )
    uow.login_throttles = _repository("get", "upsert")
    uow.audit_events = _repository("create")
    uow.game_results = _repository("get_by_result_id", "create")
    uow.game_stats = _repository("get", "save")
    uow.titles = _repository("exists", "create")
    uow.period_stats = _repository(
        "get_weekly", "get_monthly", "save", "top_weekly", "top_monthly"
    )

    # Saves hand back what they were given
    uow.game_stats.save.side_effect = lambda stats: stats
    uow.period_stats.save.side_effect = lambda stats: stats
    return uow


@pytest.fixture
def mock_email_sender():
    sender = MagicMock()
    sender.send = AsyncMock()
    return sender


@pytest.fixture
def mock_identity_provider():
    provider = MagicMock()
    provider.sign_in = AsyncMock()
    provider.update_password = AsyncMock()
    return provider
