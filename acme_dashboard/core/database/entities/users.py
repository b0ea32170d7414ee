"""
User entity models.

Dashboard login accounts. Passwords are stored as bcrypt hashes only.
"""

from __future__ import annotations

from uuid import uuid4

from sqlmodel import Field

from ..base import Base


class User(Base, table=True):
    """Dashboard user account.

    Table: users
    """

    __tablename__ = "users"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True, max_length=36)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255, unique=True, index=True)
    password: str = Field(max_length=255, description="bcrypt hash")

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email})"
