"""Initial schema: companies, invoices, industries and their join table"""

revision = "001"
down_revision = None
branch_labels = None
depends_on = None

from alembic import op
import sqlalchemy as sa


def upgrade():
    op.create_table(
        "companies",
        sa.Column("code", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
    )

    op.create_table(
        "invoices",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "comp_code",
            sa.String(),
            sa.ForeignKey("companies.code", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("amt", sa.Float(), nullable=False),
        sa.Column("paid", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("add_date", sa.Date(), nullable=False, server_default=sa.func.current_date()),
        sa.Column("paid_date", sa.Date(), nullable=True),
    )

    op.create_table(
        "industries",
        sa.Column("industry", sa.String(), primary_key=True),
        sa.Column("description", sa.Text(), nullable=True),
    )

    op.create_table(
        "companies_industries",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "company_id",
            sa.String(),
            sa.ForeignKey("companies.code", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "industry_id",
            sa.String(),
            sa.ForeignKey("industries.industry", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.UniqueConstraint("company_id", "industry_id"),
    )


def downgrade():
    op.drop_table("companies_industries")
    op.drop_table("industries")
    op.drop_table("invoices")
    op.drop_table("companies")
