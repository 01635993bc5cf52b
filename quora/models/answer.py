"""Quora Backend — Answer SQLAlchemy Model."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quora.database import Base
from quora.models.question import Question
from quora.models.user import User


class Answer(Base):
    """
    An answer to a question. Same ownership rules as Question.

    Both foreign keys cascade: removing the author or the question removes
    the answer.
    """

    __tablename__ = "answer"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    answer: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    question_id: Mapped[int] = mapped_column(
        ForeignKey("question.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user: Mapped[User] = relationship(lazy="joined")
    question: Mapped[Question] = relationship(lazy="joined")

    def __repr__(self) -> str:
        return f"<Answer(uuid='{self.uuid}', question_id={self.question_id})>"
