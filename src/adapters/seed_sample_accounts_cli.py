"""CLI adapter seeding the account store with the sample accounts.

Accounts whose name already exists are skipped, so the job can be re-run.
"""

from src.application.use_cases.create_account import CreateAccountUseCase
from src.domain.errors import DuplicateAccountNameError
from src.infrastructure.container import build_accounts_repository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.sample_data import SAMPLE_ACCOUNT_REQUESTS


def main() -> None:
    """Create every sample account missing from the store."""
    logger = get_app_logger()
    repository = build_accounts_repository()
    use_case = CreateAccountUseCase(repository=repository, logger=logger)

    created = 0
    for request in SAMPLE_ACCOUNT_REQUESTS:
        try:
            use_case.execute(request)
        except DuplicateAccountNameError as exc:
            logger.warning(f"Skipping sample account: {exc}")
            continue
        created += 1

    print(f"Seeded {created} sample accounts.")


if __name__ == "__main__":  # pragma: no cover
    main()
