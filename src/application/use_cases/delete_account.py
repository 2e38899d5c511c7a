"""Use case to delete a stored account."""

from uuid import UUID

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.domain.errors import AccountNotFoundError
from src.infrastructure.logging.logger import get_app_logger


class DeleteAccountUseCase:
    """Delete an account permanently.

    Deletion is terminal. Transactions are not linked to accounts, so
    nothing else is removed.
    """

    def __init__(
        self,
        repository: AccountsRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, account_id: UUID) -> None:
        """Delete the account.

        Args:
            account_id: Identifier of the account to delete.

        Raises:
            AccountNotFoundError: If no account has this identifier.
        """
        if not self._repository.delete_account(account_id):
            raise AccountNotFoundError(account_id)
        self._logger.info(f"Account deleted: id={account_id}")


__all__ = ["DeleteAccountUseCase"]
