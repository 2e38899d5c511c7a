"""Domain errors raised at the account creation and edit boundary."""


class AccountValidationError(ValueError):
    """Base class for rejected account input.

    Attributes:
        message: Short description of the failure.
        recovery_suggestion: Hint shown to the user next to the message.
    """

    recovery_suggestion = "Please check the account details"

    def __init__(self, message: str, recovery_suggestion: str | None = None):
        super().__init__(message)
        self.message = message
        if recovery_suggestion is not None:
            self.recovery_suggestion = recovery_suggestion


class MissingRequiredFieldError(AccountValidationError):
    """A required form field was left empty."""

    recovery_suggestion = "Please fill in all required fields"

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field: {field}")
        self.field = field


class InvalidAmountError(AccountValidationError):
    """An amount could not be parsed as a finite decimal."""

    recovery_suggestion = "Please enter a valid amount"

    def __init__(self, raw_value: object) -> None:
        super().__init__(f"Invalid amount: {raw_value!r}")
        self.raw_value = raw_value


class DuplicateAccountNameError(AccountValidationError):
    """Another account of the same type already uses the name."""

    recovery_suggestion = "Please choose a different account name"

    def __init__(self, name: str, account_type: str) -> None:
        super().__init__(
            f"An account named {name!r} already exists for type {account_type}"
        )
        self.name = name
        self.account_type = account_type


class CashAccountExistsError(AccountValidationError):
    """A second Cash-type account was requested."""

    recovery_suggestion = "Edit the existing cash account instead"

    def __init__(self) -> None:
        super().__init__("A cash account already exists")


class AccountNotFoundError(LookupError):
    """No stored account matches the requested identifier."""

    def __init__(self, account_id) -> None:
        super().__init__(f"Account not found: {account_id}")
        self.account_id = account_id


__all__ = [
    "AccountValidationError",
    "MissingRequiredFieldError",
    "InvalidAmountError",
    "DuplicateAccountNameError",
    "CashAccountExistsError",
    "AccountNotFoundError",
]
