"""Create customers table

Revision ID: 001
Revises: None
Create Date: 2025-06-02 00:00:00.000000+00:00

What:  Creates the `customers` table backing the /customer API.
How:   Portable column types (Uuid, Date) so the same migration runs on
       PostgreSQL and SQLite.

Rollback: downgrade() drops the table (all customer records are lost).
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
        "customers",
        sa.Column("id", sa.Uuid(), nullable=False,
                  comment="Identifier assigned at creation; used for all addressing"),
        sa.Column("name", sa.String(255), nullable=False, comment="Customer display name"),
        sa.Column("date_of_birth", sa.Date(), nullable=False, comment="Calendar date of birth"),
        sa.Column("member_num", sa.Integer(), nullable=False,
                  comment="Membership number (not unique)"),
        sa.Column("interests", sa.Text(), nullable=False,
                  comment="Free-text interests and hobbies"),
        sa.PrimaryKeyConstraint("id", name="pk_customers"),
    )

    # Non-unique: duplicate member numbers are allowed
    op.create_index("idx_customers_member_num", "customers", ["member_num"])


def downgrade() -> None:
    op.drop_index("idx_customers_member_num", table_name="customers")
    op.drop_table("customers")
