"""
Quora Backend — User Session (Bearer Token) Model
==================================================

What:  ORM model for the `user_auth` table: one row per successful sign-in.
How:   The access token is stored verbatim and looked up directly; it is
       never decoded to establish validity.

Lifecycle:
    1. Created at sign-in with login_at = now, expires_at = now + ttl
    2. logout_at set at sign-out (the only mutation)

    A session is active iff logout_at IS NULL. expires_at is recorded but
    not compared against the clock.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quora.database import Base
from quora.models.user import User


class UserSession(Base):
    __tablename__ = "user_auth"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Eager: the Guard hands session.user to services after the query returns
    user: Mapped[User] = relationship(lazy="joined")

    access_token: Mapped[str] = mapped_column(String(500), nullable=False)
    login_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    logout_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    __table_args__ = (
        UniqueConstraint("access_token", name="uq_user_auth_access_token"),
    )

    @property
    def is_active(self) -> bool:
        return self.logout_at is None

    def __repr__(self) -> str:
        return f"<UserSession(uuid='{self.uuid}', user_id={self.user_id}, active={self.is_active})>"
