"""Initial schema: professionals and contacts.

Revision ID: 001_initial_schema
Revises: 
Create Date: 2026-10-19 10:00:00
"""

revision = "001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None

from alembic import op
import sqlalchemy as sa


def upgrade() -> None:
    op.create_table(
        "professionals",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=50), nullable=False),
        sa.Column("birth_date", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "contacts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("contact", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("professional_id", sa.Integer(), sa.ForeignKey("professionals.id"), nullable=False),
        sa.Column("deleted_via_professional", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_contacts_professional_id", "contacts", ["professional_id"])


def downgrade() -> None:
    op.drop_index("ix_contacts_professional_id", table_name="contacts")
    op.drop_table("contacts")
    op.drop_table("professionals")
