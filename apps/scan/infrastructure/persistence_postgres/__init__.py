"""PostgreSQL persistence."""

from apps.scan.infrastructure.persistence_postgres.health import check_store_connection
from apps.scan.infrastructure.persistence_postgres.progress_gateway_sqla import (
    SqlaProgressGateway,
)
from apps.scan.infrastructure.persistence_postgres.transaction_manager_sqla import (
    SqlaTransactionManager,
)

__all__ = ["SqlaProgressGateway", "SqlaTransactionManager", "check_store_connection"]
