"""Tests for the Streamlit app module."""

from contextlib import contextmanager
from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters.interface.streamlit import app
from src.application.ports.preferences_store import AppPreferences
from src.application.use_cases.create_account import CreateAccountRequest
from src.application.use_cases.get_accounts_overview import (
    GetAccountsOverviewUseCase,
)
from src.domain.models import AccountType, TransactionsSummary
from src.domain.services.finance import compute_asset_allocation
from src.infrastructure.memory_repositories import InMemoryAccountsRepository


class _FakeColumn:
    def __init__(self, owner: "_FakeStreamlit") -> None:
        self._owner = owner

    def metric(self, label: str, value: str) -> None:
        self._owner.metrics.append((label, value))


class _FakeSidebar:
    def __init__(self, page: str) -> None:
        self.page = page
        self.options = None

    def selectbox(self, label, options):
        self.options = options
        return self.page


class _FakeStreamlit:
    def __init__(self, page: str = "Dashboard") -> None:
        self.sidebar = _FakeSidebar(page)
        self.metrics: list[tuple[str, str]] = []
        self.subheaders: list[str] = []
        self.captions: list[str] = []
        self.dataframes: list[tuple[list, dict]] = []
        self.infos: list[str] = []
        self.warnings: list[str] = []
        self.charts = []
        self.checkbox_value = False
        self.button_value = False

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def columns(self, count: int):
        return [_FakeColumn(self) for _ in range(count)]

    def subheader(self, text: str):
        self.subheaders.append(text)

    def caption(self, text: str):
        self.captions.append(text)

    def dataframe(self, data, **kwargs):
        self.dataframes.append((data, kwargs))

    def info(self, text: str):
        self.infos.append(text)

    def warning(self, text: str):
        self.warnings.append(text)

    def altair_chart(self, chart, **kwargs):
        self.charts.append(chart)

    def checkbox(self, label: str, value: bool = False):
        return self.checkbox_value

    def button(self, label: str):
        return self.button_value


class _FakeFormStreamlit:
    """Form widgets answering from preset inputs and pressed buttons."""

    def __init__(self, inputs=None, pressed=()) -> None:
        self.inputs = inputs or {}
        self.pressed = set(pressed)
        self.errors: list[str] = []
        self.subheaders: list[str] = []
        self.reruns = 0

    @contextmanager
    def form(self, key, **kwargs):
        yield

    def text_input(self, label, value="", **kwargs):
        return self.inputs.get(label, value)

    def selectbox(self, label, options, **kwargs):
        return options[0]

    def form_submit_button(self, label):
        return label in self.pressed

    def subheader(self, text: str):
        self.subheaders.append(text)

    def error(self, text: str):
        self.errors.append(text)

    def rerun(self):
        self.reruns += 1


def _overview(accounts):
    use_case = GetAccountsOverviewUseCase(
        repository=InMemoryAccountsRepository(accounts),
        logger=MagicMock(),
    )
    return use_case.execute()


def _patch_app(monkeypatch, fake_st, overview=None):
    usage_logger = MagicMock()
    form_calls = []
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_preferences", lambda: AppPreferences())
    monkeypatch.setattr(app, "_load_overview", lambda: overview)
    monkeypatch.setattr(app, "get_usage_logger", lambda: usage_logger)
    monkeypatch.setattr(
        app, "_render_add_account_form", lambda: form_calls.append("add")
    )
    monkeypatch.setattr(
        app, "_render_manage_account_form", lambda: form_calls.append("manage")
    )
    return usage_logger, form_calls


def test_main_renders_dashboard_metrics(monkeypatch, sample_accounts):
    """The default page shows compact headline figures and the chart."""
    fake_st = _FakeStreamlit()
    usage_logger, _ = _patch_app(monkeypatch, fake_st, _overview(sample_accounts))

    app.main()

    assert fake_st.config_kwargs["page_title"] == "Net Worth"
    assert fake_st.sidebar.options == [
        "Dashboard",
        "Accounts",
        "Transactions",
        "Settings",
    ]
    assert fake_st.metrics == [
        ("Assets", "$305k"),
        ("Liabilities", "$231k"),
        ("Net Worth", "$74k"),
    ]
    assert len(fake_st.charts) == 1
    usage_logger.info.assert_called_once_with("page=Dashboard")


def test_dashboard_without_assets_shows_info(monkeypatch):
    fake_st = _FakeStreamlit()
    _patch_app(monkeypatch, fake_st, _overview([]))

    app.main()

    assert fake_st.charts == []
    assert fake_st.infos == ["No assets to chart yet."]


def test_accounts_page_lists_sections(monkeypatch, sample_accounts):
    fake_st = _FakeStreamlit(page="Accounts")
    _, form_calls = _patch_app(monkeypatch, fake_st, _overview(sample_accounts))

    app.main()

    assert fake_st.warnings == []
    assert fake_st.subheaders[0] == "Personal Accounts · $1.4k"
    assert "Credit Cards · -$3,258.74" in fake_st.captions
    first_rows, kwargs = fake_st.dataframes[0]
    assert first_rows == [
        {"Name": "Bank of America", "Category": "Checking", "Balance": "$1,500.00"}
    ]
    assert kwargs["hide_index"] is True
    card_rows = fake_st.dataframes[2][0]
    assert card_rows[0]["Balance"] == "$3,258.74"
    assert card_rows[0]["Available Credit"] == "$1,741.26"
    # Personal: three banking sections plus two holding tables. Business: three.
    assert len(fake_st.dataframes) == 8
    assert form_calls == ["add", "manage"]


def test_accounts_page_warns_when_empty(monkeypatch):
    fake_st = _FakeStreamlit(page="Accounts")
    _, form_calls = _patch_app(monkeypatch, fake_st, _overview([]))

    app.main()

    assert fake_st.warnings == ["No accounts yet. Add one below."]
    assert fake_st.dataframes == []
    assert form_calls == ["add", "manage"]


def test_transactions_page_shows_totals(monkeypatch):
    fake_st = _FakeStreamlit(page="Transactions")
    _patch_app(monkeypatch, fake_st)
    monkeypatch.setattr(
        app,
        "_load_transactions_summary",
        lambda: TransactionsSummary(Decimal("3000"), Decimal("1200")),
    )

    app.main()

    assert fake_st.metrics == [
        ("Income", "$3.0k"),
        ("Expenses", "$1.2k"),
        ("Net", "$1.8k"),
    ]


def test_settings_page_saves_changes(monkeypatch):
    fake_st = _FakeStreamlit(page="Settings")
    fake_st.checkbox_value = True
    fake_st.button_value = True
    _patch_app(monkeypatch, fake_st)
    saved = []
    monkeypatch.setattr(app, "_save_preferences", saved.append)

    app.main()

    assert saved == [
        AppPreferences(is_dark_mode=True),
        AppPreferences(has_completed_onboarding=False),
    ]


def test_prepare_donut_chart_data_groups_small_categories(sample_accounts):
    allocation = compute_asset_allocation(sample_accounts)

    data, total = app._prepare_donut_chart_data(allocation, max_categories=2)

    assert total == Decimal("304700.00")
    assert [row["category"] for row in data] == ["Real Estate", "Vehicles", "Other"]
    assert data[2]["amount"] == 19700.0
    assert data[0]["share_label"] == "82.0%"
    assert data[0]["amount_label"] == "$250k"


def test_submit_new_account_reports_validation_errors(sample_accounts):
    repository = InMemoryAccountsRepository(sample_accounts)

    error = app._submit_new_account(
        CreateAccountRequest(
            "bank of america", AccountType.PERSONAL, initial_balance="10"
        ),
        repository,
    )
    success = app._submit_new_account(
        CreateAccountRequest("Credit Union", AccountType.PERSONAL, initial_balance="10"),
        repository,
    )

    assert error.startswith("An account named 'bank of america' already exists")
    assert error.endswith("Please choose a different account name.")
    assert success is None
    assert len(repository.list_accounts()) == len(sample_accounts) + 1


def test_add_account_form_reruns_after_success(monkeypatch):
    """A stored account triggers a rerun so the lists pick it up."""
    repository = InMemoryAccountsRepository()
    fake_st = _FakeFormStreamlit(
        inputs={"Account name": "Credit Union", "Initial balance": "10"},
        pressed={"Add account"},
    )
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_get_accounts_repository", lambda: repository)

    app._render_add_account_form()

    assert [account.name for account in repository.list_accounts()] == [
        "Credit Union"
    ]
    assert fake_st.errors == []
    assert fake_st.reruns == 1


def test_add_account_form_keeps_page_on_error(monkeypatch):
    repository = InMemoryAccountsRepository()
    fake_st = _FakeFormStreamlit(
        inputs={"Account name": "  ", "Initial balance": "10"},
        pressed={"Add account"},
    )
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_get_accounts_repository", lambda: repository)

    app._render_add_account_form()

    assert repository.list_accounts() == []
    assert len(fake_st.errors) == 1
    assert fake_st.reruns == 0


def test_manage_account_form_saves_edit(monkeypatch, sample_accounts):
    repository = InMemoryAccountsRepository(sample_accounts)
    selected = repository.list_accounts()[0]
    fake_st = _FakeFormStreamlit(
        inputs={"Account name": "Renamed", "Balance": "42"},
        pressed={"Save changes"},
    )
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_get_accounts_repository", lambda: repository)

    app._render_manage_account_form()

    updated = repository.get_account(selected.id)
    assert updated.name == "Renamed"
    assert updated.balance == Decimal("42.00")
    assert updated.account_type is selected.account_type
    assert updated.effective_category is selected.effective_category
    assert fake_st.errors == []
    assert fake_st.reruns == 1


def test_manage_account_form_reports_duplicate_name(monkeypatch, sample_accounts):
    repository = InMemoryAccountsRepository(sample_accounts)
    selected, other = [
        account
        for account in repository.list_accounts()
        if account.account_type is AccountType.PERSONAL
    ][:2]
    fake_st = _FakeFormStreamlit(
        inputs={"Account name": other.name, "Balance": str(selected.balance)},
        pressed={"Save changes"},
    )
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_get_accounts_repository", lambda: repository)

    app._render_manage_account_form()

    assert repository.get_account(selected.id).name == selected.name
    assert len(fake_st.errors) == 1
    assert fake_st.reruns == 0


def test_manage_account_form_deletes_selected_account(monkeypatch, sample_accounts):
    repository = InMemoryAccountsRepository(sample_accounts)
    selected = repository.list_accounts()[0]
    fake_st = _FakeFormStreamlit(pressed={"Delete account"})
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_get_accounts_repository", lambda: repository)

    app._render_manage_account_form()

    assert repository.get_account(selected.id) is None
    assert len(repository.list_accounts()) == len(sample_accounts) - 1
    assert fake_st.reruns == 1


def test_manage_account_form_hidden_without_accounts(monkeypatch):
    fake_st = _FakeFormStreamlit(pressed={"Delete account"})
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app, "_get_accounts_repository", lambda: InMemoryAccountsRepository()
    )

    app._render_manage_account_form()

    assert fake_st.subheaders == []
    assert fake_st.reruns == 0


def test_submit_account_deletion_reports_missing_account(sample_accounts):
    repository = InMemoryAccountsRepository()

    error = app._submit_account_deletion(sample_accounts[0], repository)

    assert error == f"Account not found: {sample_accounts[0].id}"
