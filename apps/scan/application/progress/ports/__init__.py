"""Progress Ports."""

from apps.scan.application.progress.ports.progress_gateway import ProgressGateway
from apps.scan.application.progress.ports.transaction_manager import TransactionManager

__all__ = ["ProgressGateway", "TransactionManager"]
