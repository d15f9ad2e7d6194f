from unittest.mock import MagicMock

import pytest

from src.app import errors
from src.app.use_cases.auth import ForgetPasswordUseCase
from tests.fixtures.factories import make_user

RESET_BASE = "http://localhost:3000/api/auth/reset-password"


@pytest.mark.asyncio
async def test_forget_password_builds_reset_link(mock_uow, token_service):
    user = make_user()
    mock_uow.users.get_by_email.return_value = user

    result = await ForgetPasswordUseCase(mock_uow, token_service, RESET_BASE).execute("a@x.com")

    assert result.is_ok()
    link = result.value.reset_password_link
    prefix = f"{RESET_BASE}/{user.id}/"
    assert link.startswith(prefix)

    token = link[len(prefix):]
    assert token_service.verify(token).subject_id == str(user.id)
    assert result.value.model_dump(by_alias=True)["resetPasswordLink"] == link


@pytest.mark.asyncio
async def test_forget_password_trailing_slash_in_base(mock_uow, token_service):
    user = make_user()
    mock_uow.users.get_by_email.return_value = user

    result = await ForgetPasswordUseCase(mock_uow, token_service, RESET_BASE + "/").execute(
        "a@x.com"
    )

    assert result.value.reset_password_link.startswith(f"{RESET_BASE}/{user.id}/")


@pytest.mark.asyncio
async def test_forget_password_missing_email(mock_uow, token_service):
    result = await ForgetPasswordUseCase(mock_uow, token_service, RESET_BASE).execute(None)

    assert result.is_err()
    assert result.error.code == errors.MISSING_FIELDS
    assert result.error.message == "Email is required"


@pytest.mark.asyncio
async def test_forget_password_unknown_email_names_the_email(mock_uow, token_service):
    mock_uow.users.get_by_email.return_value = None

    result = await ForgetPasswordUseCase(mock_uow, token_service, RESET_BASE).execute(
        "ghost@x.com"
    )

    assert result.is_err()
    assert result.error.code == errors.USER_NOT_FOUND
    assert result.error.message == "User not found with this email ghost@x.com"


@pytest.mark.asyncio
async def test_forget_password_without_reset_base(mock_uow, token_service):
    mock_uow.users.get_by_email.return_value = make_user()

    result = await ForgetPasswordUseCase(mock_uow, token_service, "").execute("a@x.com")

    assert result.is_err()
    assert result.error.code == errors.SERVER_CONFIG_ERROR


@pytest.mark.asyncio
async def test_forget_password_without_secret(mock_uow, unconfigured_token_service):
    mock_uow.users.get_by_email.return_value = make_user()

    result = await ForgetPasswordUseCase(
        mock_uow, unconfigured_token_service, RESET_BASE
    ).execute("a@x.com")

    assert result.is_err()
    assert result.error.code == errors.SERVER_CONFIG_ERROR


@pytest.mark.asyncio
async def test_forget_password_issue_failure(mock_uow):
    mock_uow.users.get_by_email.return_value = make_user()
    token_service = MagicMock()
    token_service.issue.side_effect = RuntimeError("boom")

    result = await ForgetPasswordUseCase(mock_uow, token_service, RESET_BASE).execute("a@x.com")

    assert result.is_err()
    assert result.error.code == errors.UNKNOWN_ERROR
