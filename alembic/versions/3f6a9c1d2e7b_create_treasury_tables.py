"""create treasury tables

Revision ID: 3f6a9c1d2e7b
Revises:
Create Date: 2026-10-17 10:12:04.118230

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f6a9c1d2e7b'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("created_by", sa.String(length=150), nullable=False, server_default=sa.text("'system'")),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("username", sa.String(length=150), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        *_audit_columns(),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )

    op.create_table(
        "transactions",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("type", sa.String(length=10), nullable=False),
        sa.Column("category", sa.String(length=150), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("payment_method", sa.String(length=20), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("field", sa.String(length=150), nullable=True),
        sa.Column("month", sa.String(length=20), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("document_number", sa.String(length=100), nullable=True),
        sa.Column("date", sa.Date(), nullable=False),
        *_audit_columns(),
    )
    op.create_index("ix_transactions_field", "transactions", ["field"])
    op.create_index("ix_transactions_date", "transactions", ["date"])

    op.create_table(
        "prebendas",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("type", sa.String(length=10), nullable=False),
        sa.Column("pastor", sa.String(length=255), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("month", sa.String(length=20), nullable=False),
        sa.Column("field", sa.String(length=150), nullable=True),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("payment_method", sa.String(length=20), nullable=False),
        sa.Column("document_number", sa.String(length=100), nullable=True),
        sa.Column("is_auxilio", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("is_prebenda", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("date", sa.Date(), nullable=False),
        *_audit_columns(),
    )
    op.create_index("ix_prebendas_pastor", "prebendas", ["pastor"])
    op.create_index("ix_prebendas_field", "prebendas", ["field"])
    op.create_index("ix_prebendas_date", "prebendas", ["date"])

    op.create_table(
        "registrations",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("field", sa.String(length=150), nullable=False),
        sa.Column("month", sa.String(length=20), nullable=False),
        sa.Column("category", sa.String(length=150), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        *_audit_columns(),
    )
    op.create_index("ix_registrations_field", "registrations", ["field"])
    op.create_index("ix_registrations_date", "registrations", ["date"])

    op.create_table(
        "payments",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("category", sa.String(length=150), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("payment_method", sa.String(length=20), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("field", sa.String(length=150), nullable=True),
        sa.Column("month", sa.String(length=20), nullable=True),
        sa.Column("date", sa.Date(), nullable=False),
        *_audit_columns(),
    )
    op.create_index("ix_payments_date", "payments", ["date"])

    op.create_table(
        "pastor_registrations",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("pastor_name", sa.String(length=255), nullable=False),
        sa.Column("spouse_name", sa.String(length=255), nullable=False),
        sa.Column("current_field", sa.String(length=150), nullable=False),
        sa.Column("field_period", sa.String(length=100), nullable=False),
        sa.Column("children", sa.Text(), nullable=False, server_default=sa.text("'[]'")),
        sa.Column("birth_date", sa.Date(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=False),
        sa.Column("previous_fields", sa.Text(), nullable=False, server_default=sa.text("'[]'")),
        sa.Column("date", sa.Date(), nullable=False),
        *_audit_columns(),
    )

    op.create_table(
        "obreiro_registrations",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("nome_completo", sa.String(length=255), nullable=False),
        sa.Column("setor", sa.String(length=100), nullable=False),
        sa.Column("campo", sa.String(length=150), nullable=False),
        sa.Column("campo_missionario", sa.String(length=150), nullable=True),
        sa.Column("tipo", sa.String(length=20), nullable=False),
        sa.Column("pagamento", sa.Text(), nullable=False),
        sa.Column("observacoes", sa.Text(), nullable=True),
        sa.Column("date", sa.Date(), nullable=False),
        *_audit_columns(),
    )

    op.create_table(
        "document_ranges",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=150), nullable=False),
        sa.Column("start_number", sa.String(length=100), nullable=False),
        sa.Column("end_number", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        *_audit_columns(),
    )

    op.create_table(
        "document_number_claims",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("number_key", sa.String(length=100), nullable=False),
        sa.Column("document_number", sa.String(length=100), nullable=False),
        sa.Column("owner_type", sa.String(length=20), nullable=False),
        sa.Column("owner_id", sa.String(length=36), nullable=False),
        *_audit_columns(),
        sa.UniqueConstraint("number_key", name="uq_document_number_claims_key"),
        sa.UniqueConstraint("owner_type", "owner_id", name="uq_document_number_claims_owner"),
    )

    op.create_table(
        "financial_goals",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("field", sa.String(length=150), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("monthly_goals", sa.Text(), nullable=False, server_default=sa.text("'{}'")),
        sa.Column("annual_goal", sa.Numeric(12, 2), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        *_audit_columns(),
    )
    op.create_index("ix_financial_goals_field", "financial_goals", ["field"])
    op.create_index("ix_financial_goals_year", "financial_goals", ["year"])


def downgrade() -> None:
    op.drop_table("financial_goals")
    op.drop_table("document_number_claims")
    op.drop_table("document_ranges")
    op.drop_table("obreiro_registrations")
    op.drop_table("pastor_registrations")
    op.drop_table("payments")
    op.drop_table("registrations")
    op.drop_table("prebendas")
    op.drop_table("transactions")
    op.drop_table("users")
