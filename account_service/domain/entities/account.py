"""
Account Entity

A persisted user identity with a unique username/email and a password hash.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import utcnow


class Account(SQLModel, table=True):
    """
    Account entity - one per signup.

    Business Rules:
    - Username and email are each unique across all accounts
    - Password stored as bcrypt hash, never plaintext
    - reset_token and reset_token_expires_at are set together by
      forgot-password and cleared together (NULL) by a successful reset
    - An expired reset token is simply ignored at lookup time
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Password reset (forgot-password / reset-password)
    reset_token: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=128
    )
    reset_token_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    def issue_reset_token(self, token: str, expires_at: datetime) -> None:
        """Start a pending reset; replaces any previous token."""
        self.reset_token = token
        self.reset_token_expires_at = expires_at

    def clear_reset_token(self) -> None:
        self.reset_token = None
        self.reset_token_expires_at = None

    def has_pending_reset(self, now: datetime) -> bool:
        return (
            self.reset_token is not None
            and self.reset_token_expires_at is not None
            and self.reset_token_expires_at > now
        )
