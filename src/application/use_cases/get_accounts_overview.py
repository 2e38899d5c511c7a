"""Use case assembling every figure the accounts screen renders."""

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.domain.models import AccountsOverview, AccountType
from src.domain.services.finance import (
    business_total,
    cash_total,
    compute_asset_allocation,
    compute_category_breakdown,
    compute_holdings_partition,
    compute_net_worth_summary,
    personal_total,
)
from src.infrastructure.logging.logger import get_app_logger

_BANKING_TYPES = (AccountType.PERSONAL, AccountType.BUSINESS)


class GetAccountsOverviewUseCase:
    """Build an AccountsOverview from one account snapshot."""

    def __init__(
        self,
        repository: AccountsRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self) -> AccountsOverview:
        """Return totals, banking sections and holdings per account type."""
        accounts = self._repository.list_accounts()
        overview = AccountsOverview(
            summary=compute_net_worth_summary(accounts, logger=self._logger),
            personal_total=personal_total(accounts),
            business_total=business_total(accounts),
            cash_total=cash_total(accounts),
            banking={
                account_type: compute_category_breakdown(account_type, accounts)
                for account_type in _BANKING_TYPES
            },
            holdings={
                account_type: compute_holdings_partition(account_type, accounts)
                for account_type in _BANKING_TYPES
            },
            cash_accounts=[
                account
                for account in accounts
                if account.account_type is AccountType.CASH
            ],
            asset_allocation=compute_asset_allocation(accounts),
        )
        self._logger.info(f"Accounts overview built for {len(accounts)} accounts")
        return overview


__all__ = ["GetAccountsOverviewUseCase", "AccountsOverview"]
