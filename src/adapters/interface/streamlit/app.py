"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import altair as alt
import streamlit as st

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.preferences_store import AppPreferences
from src.application.use_cases.create_account import (
    CreateAccountRequest,
    CreateAccountUseCase,
)
from src.application.use_cases.delete_account import DeleteAccountUseCase
from src.application.use_cases.edit_account import (
    EditAccountRequest,
    EditAccountUseCase,
)
from src.application.use_cases.get_accounts_overview import (
    AccountsOverview,
    GetAccountsOverviewUseCase,
)
from src.application.use_cases.get_transactions_summary import (
    GetTransactionsSummaryUseCase,
    TransactionsSummary,
)
from src.domain.errors import AccountNotFoundError, AccountValidationError
from src.domain.models import (
    Account,
    AccountCategory,
    AccountType,
    CategoryAmount,
)
from src.domain.services.formatting import (
    format_compact_currency,
    format_currency,
)
from src.infrastructure.container import (
    build_accounts_repository,
    build_preferences_store,
    build_transactions_repository,
)
from src.infrastructure.logging.logger import get_usage_logger


@st.cache_resource(show_spinner=False)
def _get_accounts_repository() -> AccountsRepositoryPort:
    """Build the accounts repository once per Streamlit process."""
    return build_accounts_repository()


def _load_overview() -> AccountsOverview:
    """Compute the overview from a fresh account snapshot."""
    use_case = GetAccountsOverviewUseCase(repository=_get_accounts_repository())
    return use_case.execute()


def _load_transactions_summary() -> TransactionsSummary:
    """Compute transaction totals from the configured store."""
    use_case = GetTransactionsSummaryUseCase(
        repository=build_transactions_repository()
    )
    return use_case.execute()


def _load_preferences() -> AppPreferences:
    """Read user preferences from the configured store."""
    return build_preferences_store().load()


def _save_preferences(preferences: AppPreferences) -> None:
    """Persist user preferences to the configured store."""
    build_preferences_store().save(preferences)


def _display_balance(account: Account) -> str:
    """Format a balance the way account rows show it.

    Liability categories show what is owed as a positive figure.
    """
    amount = (
        -account.balance
        if account.effective_category.is_liability
        else account.balance
    )
    return format_currency(amount)


def _account_rows(accounts: Sequence[Account]) -> list[dict[str, str]]:
    """Convert accounts into dataframe rows."""
    rows = []
    for account in accounts:
        row = {
            "Name": account.name,
            "Category": account.effective_category.value,
            "Balance": _display_balance(account),
        }
        if account.effective_category is AccountCategory.CREDIT_CARD:
            row["Available Credit"] = format_currency(account.available_credit)
        rows.append(row)
    return rows


def _render_summary_metrics(overview: AccountsOverview) -> None:
    """Render the headline figures in compact currency."""
    summary = overview.summary
    assets_col, liabilities_col, net_worth_col = st.columns(3)
    assets_col.metric("Assets", format_compact_currency(summary.asset_total))
    liabilities_col.metric(
        "Liabilities",
        format_compact_currency(summary.liability_total),
    )
    net_worth_col.metric(
        "Net Worth",
        format_compact_currency(summary.net_worth),
    )


def _prepare_donut_chart_data(
    allocation: Sequence[CategoryAmount],
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        allocation: Asset totals by category, largest first.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    top_items = [
        (item.category.display_name, item.amount)
        for item in allocation[:max_categories]
    ]
    other_amount = sum(
        (item.amount for item in allocation[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top_items.append(("Other", other_amount))
    total_amount = sum((item.amount for item in allocation), start=Decimal("0"))
    data: list[dict[str, str | float]] = []
    for label, amount in top_items:
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": label,
                "amount": float(amount),
                "amount_label": format_compact_currency(amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _render_asset_allocation_chart(
    allocation: Sequence[CategoryAmount],
    chart_size: int = 320,
) -> None:
    """Render a donut chart of assets by category."""
    if not allocation:
        st.info("No assets to chart yet.")
        return
    data, _ = _prepare_donut_chart_data(allocation)
    chart = (
        alt.Chart(alt.Data(values=data))
        .mark_arc(innerRadius=chart_size * 0.4, cornerRadius=8, padAngle=0.02)
        .encode(
            theta=alt.Theta("amount:Q"),
            color=alt.Color(
                "category:N",
                legend=alt.Legend(orient="bottom", title=None),
            ),
            order=alt.Order("amount:Q", sort="descending"),
            tooltip=[
                alt.Tooltip("category:N"),
                alt.Tooltip("amount_label:N"),
                alt.Tooltip("share_label:N"),
            ],
        )
        .properties(width=chart_size, height=chart_size)
    )
    st.subheader("Assets by Category")
    st.altair_chart(chart)


def _render_account_type(overview: AccountsOverview, account_type: AccountType) -> None:
    """Render banking sections and holdings of one account type."""
    total = (
        overview.personal_total
        if account_type is AccountType.PERSONAL
        else overview.business_total
    )
    st.subheader(f"{account_type.value} Accounts · {format_compact_currency(total)}")
    for section in overview.banking[account_type].categories:
        st.caption(
            f"{section.category.display_name} · {format_currency(section.amount)}"
        )
        st.dataframe(_account_rows(section.accounts), hide_index=True)

    holdings = overview.holdings[account_type]
    if holdings.assets:
        st.caption(f"Assets · {format_currency(holdings.assets_total)}")
        st.dataframe(_account_rows(holdings.assets), hide_index=True)
    if holdings.liabilities:
        st.caption(f"Liabilities · {format_currency(holdings.liabilities_total)}")
        st.dataframe(_account_rows(holdings.liabilities), hide_index=True)


def _submit_new_account(
    request: CreateAccountRequest,
    repository: AccountsRepositoryPort,
) -> str | None:
    """Create an account and return an error message when rejected."""
    try:
        CreateAccountUseCase(repository=repository).execute(request)
    except AccountValidationError as exc:
        return f"{exc.message}. {exc.recovery_suggestion}."
    return None


def _render_add_account_form() -> None:
    """Render the add-account form."""
    with st.form("add_account", clear_on_submit=True):
        name = st.text_input("Account name")
        account_type = st.selectbox(
            "Type",
            list(AccountType),
            format_func=lambda value: value.value,
        )
        category = st.selectbox(
            "Category",
            list(AccountCategory),
            format_func=lambda value: value.value,
        )
        balance = st.text_input("Initial balance", placeholder="$0.00")
        submitted = st.form_submit_button("Add account")
    if not submitted:
        return
    error = _submit_new_account(
        CreateAccountRequest(
            name=name,
            account_type=account_type,
            category=category,
            initial_balance=balance,
        ),
        _get_accounts_repository(),
    )
    if error:
        st.error(error)
    else:
        st.rerun()


def _submit_account_edit(
    request: EditAccountRequest,
    repository: AccountsRepositoryPort,
) -> str | None:
    """Apply an edit and return an error message when rejected."""
    try:
        EditAccountUseCase(repository=repository).execute(request)
    except AccountValidationError as exc:
        return f"{exc.message}. {exc.recovery_suggestion}."
    except AccountNotFoundError as exc:
        return str(exc)
    return None


def _submit_account_deletion(
    account: Account,
    repository: AccountsRepositoryPort,
) -> str | None:
    """Delete an account and return an error message when it is gone."""
    try:
        DeleteAccountUseCase(repository=repository).execute(account.id)
    except AccountNotFoundError as exc:
        return str(exc)
    return None


def _render_manage_account_form() -> None:
    """Render the edit and delete controls for one stored account."""
    repository = _get_accounts_repository()
    accounts = repository.list_accounts()
    if not accounts:
        return
    st.subheader("Edit account")
    account = st.selectbox(
        "Account",
        accounts,
        format_func=lambda value: f"{value.name} ({value.account_type.value})",
    )
    with st.form("edit_account"):
        name = st.text_input(
            "Account name", value=account.name, key=f"name_{account.id}"
        )
        balance = st.text_input(
            "Balance", value=str(account.balance), key=f"balance_{account.id}"
        )
        save = st.form_submit_button("Save changes")
        delete = st.form_submit_button("Delete account")
    if save:
        error = _submit_account_edit(
            EditAccountRequest(
                account_id=account.id,
                name=name,
                account_type=account.account_type,
                category=account.effective_category,
                balance=balance,
            ),
            repository,
        )
    elif delete:
        error = _submit_account_deletion(account, repository)
    else:
        return
    if error:
        st.error(error)
    else:
        st.rerun()


def _render_dashboard(overview: AccountsOverview) -> None:
    _render_summary_metrics(overview)
    _render_asset_allocation_chart(overview.asset_allocation)


def _has_accounts(overview: AccountsOverview) -> bool:
    """Return True when any section of the overview lists an account."""
    if overview.cash_accounts:
        return True
    if any(breakdown.categories for breakdown in overview.banking.values()):
        return True
    return any(
        holdings.assets or holdings.liabilities
        for holdings in overview.holdings.values()
    )


def _render_accounts(overview: AccountsOverview) -> None:
    if not _has_accounts(overview):
        st.warning("No accounts yet. Add one below.")
    else:
        _render_account_type(overview, AccountType.PERSONAL)
        _render_account_type(overview, AccountType.BUSINESS)
        if overview.cash_accounts:
            st.subheader(f"Cash · {format_compact_currency(overview.cash_total)}")
            st.dataframe(_account_rows(overview.cash_accounts), hide_index=True)
    _render_add_account_form()
    _render_manage_account_form()


def _render_transactions(summary: TransactionsSummary) -> None:
    income_col, expense_col, net_col = st.columns(3)
    income_col.metric("Income", format_compact_currency(summary.income_total))
    expense_col.metric("Expenses", format_compact_currency(summary.expense_total))
    net_col.metric("Net", format_compact_currency(summary.net))


def _render_settings(preferences: AppPreferences) -> None:
    dark_mode = st.checkbox("Dark mode", value=preferences.is_dark_mode)
    if dark_mode != preferences.is_dark_mode:
        _save_preferences(preferences.toggle_dark_mode())
    if st.button("Show welcome screen again"):
        _save_preferences(preferences.reset_onboarding())


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Net Worth", layout="wide")
    st.title("Net Worth")

    preferences = _load_preferences()
    page = st.sidebar.selectbox("Page", list(preferences.tab_order))
    get_usage_logger().info(f"page={page}")

    if page == "Transactions":
        _render_transactions(_load_transactions_summary())
    elif page == "Settings":
        _render_settings(preferences)
    elif page == "Accounts":
        _render_accounts(_load_overview())
    else:
        _render_dashboard(_load_overview())


if __name__ == "__main__":  # pragma: no cover
    main()
