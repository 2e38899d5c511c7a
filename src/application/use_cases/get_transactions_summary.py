"""Use case to summarise recorded transactions."""

from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.models import TransactionsSummary
from src.domain.services.transactions import compute_transactions_summary


class GetTransactionsSummaryUseCase:
    """Compute income and expense totals from stored transactions."""

    def __init__(self, repository: TransactionsRepositoryPort) -> None:
        self._repository = repository

    def execute(self) -> TransactionsSummary:
        return compute_transactions_summary(self._repository.list_transactions())


__all__ = ["GetTransactionsSummaryUseCase", "TransactionsSummary"]
