"""Data Transfer Objects for application layer."""

from account_auth.application.dtos.account_dto import AccountDTO, CreateAccountDTO
from account_auth.application.dtos.auth_dto import ChangePasswordDTO, LoginDTO

__all__ = ["AccountDTO", "CreateAccountDTO", "ChangePasswordDTO", "LoginDTO"]
