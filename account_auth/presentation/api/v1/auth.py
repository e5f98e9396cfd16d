"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, status

from account_auth.application.dtos.account_dto import AccountDTO
from account_auth.application.dtos.auth_dto import ChangePasswordDTO, LoginDTO
from account_auth.application.services.auth_service import AuthService
from account_auth.presentation.dependencies import get_auth_service
from account_auth.presentation.error_schemas import error_responses


router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/login",
    response_model=AccountDTO,
    status_code=status.HTTP_200_OK,
    responses=error_responses(status.HTTP_401_UNAUTHORIZED),
    summary="Verify credentials",
    description="Check a username and password; returns the public account record.",
)
async def login(
    dto: LoginDTO,
    auth_service: AuthService = Depends(get_auth_service),
) -> AccountDTO:
    """
    Verify credentials.

    Raises:
        401 Unauthorized: If the username is unknown or the password is wrong
            (same body in both cases)
    """
    account = await auth_service.authenticate(dto.username, dto.password)
    return AccountDTO.from_entity(account)


@router.post(
    "/change-password",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=error_responses(status.HTTP_401_UNAUTHORIZED, status.HTTP_503_SERVICE_UNAVAILABLE),
    summary="Change password",
    description="Replace the password after verifying the current one.",
)
async def change_password(
    dto: ChangePasswordDTO,
    auth_service: AuthService = Depends(get_auth_service),
) -> None:
    """
    Change an account's password.

    Raises:
        401 Unauthorized: If the username is unknown or old_password is wrong
        503 Service Unavailable: If the new password could not be saved
    """
    await auth_service.change_password(dto.username, dto.old_password, dto.new_password)
