"""Quora Backend — Question SQLAlchemy Model."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quora.database import Base
from quora.models.user import User


class Question(Base):
    """
    A question posted by a signed-in user.

    Only the owner may edit the content; the owner or an admin may delete it.
    """

    __tablename__ = "question"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    content: Mapped[str] = mapped_column(String(500), nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user: Mapped[User] = relationship(lazy="joined")

    def __repr__(self) -> str:
        return f"<Question(uuid='{self.uuid}', user_id={self.user_id})>"
