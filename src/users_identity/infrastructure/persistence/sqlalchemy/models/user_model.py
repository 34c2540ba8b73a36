"""SQLAlchemy model for User aggregate."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from users_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase


class UserModel(IdentityBase):
    """SQLAlchemy model for persisting User aggregates.

    Only the email address, display name and password hash are stored.
    """

    __tablename__ = "users"

    email_address: Mapped[str] = mapped_column(
        String(255),
        primary_key=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(email_address={self.email_address}, name={self.name})>"
