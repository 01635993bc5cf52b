"""
Quora Backend — User SQLAlchemy Model
======================================

What:  ORM model representing the `users` table.
Who:   Used by the user/admin services (through the store layer) and by Alembic.

Table Design:
    - id: Integer surrogate key, internal only (foreign keys point here)
    - uuid: Public identifier returned to clients and used in URLs
    - username / email: Natural keys, each with a unique constraint. The
      service layer pre-checks them; the constraints settle races.
    - password / salt: PBKDF2 hash and the salt it was derived with
    - role: 'admin' or 'nonadmin'
"""

from enum import Enum

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from quora.database import Base


class UserRole(str, Enum):
    ADMIN = "admin"
    NONADMIN = "nonadmin"


class User(Base):
    """A registered member. Created at sign-up; removed only by an admin."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)

    first_name: Mapped[str] = mapped_column(String(30), nullable=False)
    last_name: Mapped[str] = mapped_column(String(30), nullable=False)
    username: Mapped[str] = mapped_column(String(30), nullable=False)
    email: Mapped[str] = mapped_column(String(50), nullable=False)

    # ── Credentials ───────────────────────────────────────────────────────
    # Never serialized into API responses
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    salt: Mapped[str] = mapped_column(String(200), nullable=False)

    # ── Profile ───────────────────────────────────────────────────────────
    country: Mapped[str | None] = mapped_column(String(30), nullable=True)
    about_me: Mapped[str | None] = mapped_column(String(50), nullable=True)
    dob: Mapped[str | None] = mapped_column(String(30), nullable=True)
    contact_number: Mapped[str | None] = mapped_column(String(30), nullable=True)

    role: Mapped[str] = mapped_column(
        String(30),
        nullable=False,
        default=UserRole.NONADMIN.value,
    )

    __table_args__ = (
        UniqueConstraint("username", name="uq_users_username"),
        UniqueConstraint("email", name="uq_users_email"),
    )

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    def __repr__(self) -> str:
        return f"<User(uuid='{self.uuid}', username='{self.username}', role='{self.role}')>"
