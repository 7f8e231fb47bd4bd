"""Create users, documents, access grants, share requests, linked researchers

Revision ID: 3f2a9c1e7b40
Revises:
Create Date: 2026-10-01 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2a9c1e7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(mutable: bool) -> list[sa.Column]:
    columns = [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        )
    ]
    if mutable:
        columns.append(
            sa.Column(
                "updated_at",
                sa.DateTime(timezone=True),
                server_default=sa.text("now()"),
                nullable=False,
            )
        )
    return columns


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="Email address, also the relationship graph subject key",
        ),
        sa.Column(
            "auth_subject",
            sa.String(length=255),
            nullable=False,
            comment="Identity provider subject claim",
        ),
        *_timestamps(mutable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
        sa.UniqueConstraint("auth_subject"),
    )
    op.create_index("idx_users_email", "users", ["email"])

    op.create_table(
        "documents",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("owner_id", sa.Uuid(), nullable=False),
        sa.Column(
            "work_id",
            sa.String(length=255),
            nullable=False,
            comment="External work reference",
        ),
        sa.Column("work_title", sa.Text(), nullable=False),
        sa.Column("orcid_id", sa.String(length=64), nullable=True),
        sa.Column("researcher_name", sa.String(length=255), nullable=True),
        sa.Column(
            "file_name",
            sa.String(length=255),
            nullable=False,
            comment="Stored file name inside the upload directory",
        ),
        sa.Column("original_name", sa.String(length=255), nullable=False),
        sa.Column("uploaded_at", sa.DateTime(timezone=True), nullable=False),
        *_timestamps(mutable=True),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("owner_id", "work_id", name="uq_documents_owner_work"),
    )
    op.create_index("ix_documents_owner_id", "documents", ["owner_id"])
    op.create_index("idx_documents_work_id", "documents", ["work_id"])

    op.create_table(
        "access_grants",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("document_id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        *_timestamps(mutable=False),
        sa.ForeignKeyConstraint(["document_id"], ["documents.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("document_id", "user_id", name="uq_access_grants_document_user"),
    )
    op.create_index("ix_access_grants_document_id", "access_grants", ["document_id"])
    op.create_index("ix_access_grants_user_id", "access_grants", ["user_id"])

    op.create_table(
        "share_requests",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("document_id", sa.Uuid(), nullable=False),
        sa.Column("from_user_id", sa.Uuid(), nullable=False),
        sa.Column("to_user_id", sa.Uuid(), nullable=False),
        *_timestamps(mutable=False),
        sa.ForeignKeyConstraint(["document_id"], ["documents.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["from_user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["to_user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "document_id", "to_user_id", name="uq_share_requests_document_recipient"
        ),
    )
    op.create_index("ix_share_requests_to_user_id", "share_requests", ["to_user_id"])

    op.create_table(
        "linked_researchers",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("orcid_id", sa.String(length=64), nullable=False),
        sa.Column("researcher_name", sa.String(length=255), nullable=False),
        *_timestamps(mutable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "orcid_id", name="uq_linked_researchers_user_orcid"),
    )
    op.create_index("ix_linked_researchers_user_id", "linked_researchers", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_linked_researchers_user_id", table_name="linked_researchers")
    op.drop_table("linked_researchers")
    op.drop_index("ix_share_requests_to_user_id", table_name="share_requests")
    op.drop_table("share_requests")
    op.drop_index("ix_access_grants_user_id", table_name="access_grants")
    op.drop_index("ix_access_grants_document_id", table_name="access_grants")
    op.drop_table("access_grants")
    op.drop_index("idx_documents_work_id", table_name="documents")
    op.drop_index("ix_documents_owner_id", table_name="documents")
    op.drop_table("documents")
    op.drop_index("idx_users_email", table_name="users")
    op.drop_table("users")
