from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from account_service.domain.entities import Account


class DuplicateAccountError(Exception):
    """Raised when a write violates the username or email unique constraint"""


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by email address"""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[Account]:
        """Get account by username"""
        pass

    @abstractmethod
    async def get_by_reset_token(self, token: str, now: datetime) -> Optional[Account]:
        """Get account holding this reset token, only if it expires after now"""
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Create a new account, raising DuplicateAccountError on conflict"""
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Update existing account"""
        pass
