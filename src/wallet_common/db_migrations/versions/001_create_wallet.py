"""001: create wallet table

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE OR REPLACE FUNCTION fn_wallet_touch_updated_at()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql;
    """)
    op.execute("""
        CREATE TABLE wallet (
            id          TEXT        PRIMARY KEY,
            balance     BIGINT      NOT NULL DEFAULT 0,
            created_at  TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at  TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_wallet_balance_gte_0 CHECK (balance >= 0)
        );
    """)
    op.execute("""
        CREATE TRIGGER trg_wallet_updated_at
            BEFORE UPDATE ON wallet
            FOR EACH ROW EXECUTE FUNCTION fn_wallet_touch_updated_at();
    """)
    op.execute("COMMENT ON TABLE wallet IS 'Wallet balances in the smallest currency unit';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS wallet CASCADE;")
    op.execute("DROP FUNCTION IF EXISTS fn_wallet_touch_updated_at();")
