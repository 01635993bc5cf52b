"""Create users, user_auth, question and answer tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Initial Quora schema.
How:   Integer surrogate keys, public `uuid` strings, unique username/email,
       unique access tokens. Every child row cascades on parent deletion.

Rollback: downgrade() drops all four tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("uuid", sa.String(length=200), nullable=False),
        sa.Column("first_name", sa.String(length=30), nullable=False),
        sa.Column("last_name", sa.String(length=30), nullable=False),
        sa.Column("username", sa.String(length=30), nullable=False),
        sa.Column("email", sa.String(length=50), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("salt", sa.String(length=200), nullable=False),
        sa.Column("country", sa.String(length=30), nullable=True),
        sa.Column("about_me", sa.String(length=50), nullable=True),
        sa.Column("dob", sa.String(length=30), nullable=True),
        sa.Column("contact_number", sa.String(length=30), nullable=True),
        sa.Column("role", sa.String(length=30), nullable=False, server_default="nonadmin"),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("uuid", name="uq_users_uuid"),
        sa.UniqueConstraint("username", name="uq_users_username"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    op.create_table(
        "user_auth",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("uuid", sa.String(length=200), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("access_token", sa.String(length=500), nullable=False),
        sa.Column("login_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("logout_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_user_auth"),
        sa.UniqueConstraint("uuid", name="uq_user_auth_uuid"),
        sa.UniqueConstraint("access_token", name="uq_user_auth_access_token"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_user_auth_user_id", "user_auth", ["user_id"])

    op.create_table(
        "question",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("uuid", sa.String(length=200), nullable=False),
        sa.Column("content", sa.String(length=500), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_question"),
        sa.UniqueConstraint("uuid", name="uq_question_uuid"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_question_user_id", "question", ["user_id"])

    op.create_table(
        "answer",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("uuid", sa.String(length=200), nullable=False),
        sa.Column("answer", sa.String(length=255), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("question_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_answer"),
        sa.UniqueConstraint("uuid", name="uq_answer_uuid"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["question_id"], ["question.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_answer_user_id", "answer", ["user_id"])
    op.create_index("ix_answer_question_id", "answer", ["question_id"])


def downgrade() -> None:
    # Children first
    op.drop_index("ix_answer_question_id", table_name="answer")
    op.drop_index("ix_answer_user_id", table_name="answer")
    op.drop_table("answer")
    op.drop_index("ix_question_user_id", table_name="question")
    op.drop_table("question")
    op.drop_index("ix_user_auth_user_id", table_name="user_auth")
    op.drop_table("user_auth")
    op.drop_table("users")
