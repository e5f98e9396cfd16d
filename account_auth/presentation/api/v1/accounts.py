"""Account API endpoints."""

from fastapi import APIRouter, Depends, status

from account_auth.application.dtos.account_dto import AccountDTO, CreateAccountDTO
from account_auth.application.services.account_service import AccountService
from account_auth.presentation.dependencies import get_account_service
from account_auth.presentation.error_schemas import error_responses

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post(
    "",
    response_model=AccountDTO,
    status_code=status.HTTP_201_CREATED,
    responses=error_responses(status.HTTP_409_CONFLICT, status.HTTP_503_SERVICE_UNAVAILABLE),
    summary="Register an account",
    description="Create an account with a username and password.",
)
async def create_account(
    dto: CreateAccountDTO,
    service: AccountService = Depends(get_account_service),
) -> AccountDTO:
    """
    Register a new account.

    Raises:
        409 Conflict: If the username is taken
        422 Unprocessable Entity: If the username or password is malformed
    """
    return await service.create_account(dto)
