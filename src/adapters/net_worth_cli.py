"""CLI adapter printing the net worth overview of the stored accounts."""

from src.application.use_cases.get_accounts_overview import (
    GetAccountsOverviewUseCase,
)
from src.domain.services.formatting import format_currency
from src.infrastructure.container import build_accounts_repository
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Compute the overview and print the headline figures."""
    logger = get_app_logger()
    repository = build_accounts_repository()
    use_case = GetAccountsOverviewUseCase(repository=repository, logger=logger)

    overview = use_case.execute()
    summary = overview.summary

    print(f"Assets:      {format_currency(summary.asset_total)}")
    print(f"Liabilities: {format_currency(summary.liability_total)}")
    print(f"Net worth:   {format_currency(summary.net_worth)}")
    print(f"Personal:    {format_currency(overview.personal_total)}")
    print(f"Business:    {format_currency(overview.business_total)}")
    print(f"Cash:        {format_currency(overview.cash_total)}")


if __name__ == "__main__":  # pragma: no cover
    main()
