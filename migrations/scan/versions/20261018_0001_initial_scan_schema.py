"""Initial scan schema.

Revision ID: 0001
Revises: None
Create Date: 2026-10-18

Scan Domain Migration
Schema: public

- users: 계정 생성 시 만들어지는 행. points/badges 컬럼만 이 서비스가 갱신
- classifications: append-only 분류 원장
"""

from typing import Sequence

from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create scan tables.

    Note: IF NOT EXISTS로 기존 테이블 보존
    """
    op.execute("""
        CREATE TABLE IF NOT EXISTS users (
            id UUID PRIMARY KEY,
            points INTEGER NOT NULL DEFAULT 0,
            badges TEXT[] NOT NULL DEFAULT '{}'::text[]
        )
    """)

    # 기존 users 테이블에 컬럼이 없으면 추가
    op.execute("ALTER TABLE users ADD COLUMN IF NOT EXISTS points INTEGER NOT NULL DEFAULT 0")
    op.execute(
        "ALTER TABLE users ADD COLUMN IF NOT EXISTS badges TEXT[] NOT NULL DEFAULT '{}'::text[]"
    )

    op.execute("""
        CREATE TABLE IF NOT EXISTS classifications (
            id BIGSERIAL PRIMARY KEY,
            user_id UUID NOT NULL,
            item TEXT NOT NULL,
            result TEXT NOT NULL,
            weight DOUBLE PRECISION NOT NULL DEFAULT 0,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_classifications_user_id
        ON classifications(user_id)
    """)


def downgrade() -> None:
    """Drop scan tables (users는 다른 서비스 소유라 컬럼만 제거)."""
    op.execute("DROP TABLE IF EXISTS classifications")
    op.execute("ALTER TABLE users DROP COLUMN IF EXISTS badges")
    op.execute("ALTER TABLE users DROP COLUMN IF EXISTS points")
