"""Table definitions for users / classifications."""

from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    Float,
    Integer,
    MetaData,
    Table,
    Text,
    func,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, UUID

metadata = MetaData()

# 계정 생성 시점에 다른 서비스가 행을 만든다. 여기서는 points/badges만 갱신.
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=False), primary_key=True),
    Column("points", Integer, nullable=False, server_default=text("0")),
    Column("badges", ARRAY(Text), nullable=False, server_default=text("'{}'::text[]")),
)

# append-only 분류 원장
classifications_table = Table(
    "classifications",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("user_id", UUID(as_uuid=False), nullable=False, index=True),
    Column("item", Text, nullable=False),
    Column("result", Text, nullable=False),
    Column("weight", Float, nullable=False, server_default=text("0")),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)
