"""Repository interfaces - define contracts for data access."""

from account_auth.domain.repositories.account_repository import IAccountRepository
from account_auth.domain.repositories.base import IRepository
from account_auth.domain.repositories.unit_of_work import IUnitOfWork

__all__ = ["IRepository", "IAccountRepository", "IUnitOfWork"]
