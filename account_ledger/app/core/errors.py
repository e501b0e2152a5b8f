class LedgerError(Exception):
    """Base class for every failure raised by the ledger service."""


class AccountNotFoundError(LedgerError):
    """Raised when an account id is missing from the store."""

    def __init__(self, account_id: str) -> None:
        super().__init__(f"Account {account_id} does not exist")
        self.account_id = account_id


class AccountAlreadyExistsError(LedgerError):
    """Raised when creating an account whose id is already stored."""

    def __init__(self, account_id: str) -> None:
        super().__init__(f"Account {account_id} already exists")
        self.account_id = account_id


class InsufficientFundsError(LedgerError):
    """Raised when a transfer would take more than the source balance."""

    def __init__(self, account_id: str, amount: float, balance: float) -> None:
        super().__init__(
            f"Insufficient funds in account {account_id}: "
            f"requested {amount}, available {balance}"
        )
        self.account_id = account_id
        self.amount = amount
        self.balance = balance


class InvalidAmountError(LedgerError):
    """Raised when a transfer amount is not a finite positive number."""

    def __init__(self, amount: float) -> None:
        super().__init__(f"Transfer amount must be positive, got {amount}")
        self.amount = amount


class SameAccountTransferError(LedgerError):
    def __init__(self, account_id: str) -> None:
        super().__init__("Cannot transfer to the same account")
        self.account_id = account_id


class InvalidAccountIdError(LedgerError):
    def __init__(self, account_id: str) -> None:
        super().__init__("Account id must be a non-empty string")
        self.account_id = account_id


class EncodingError(LedgerError):
    """Raised when an account cannot be turned into a stored record."""


class DecodingError(LedgerError):
    """Raised when stored bytes do not parse as an account record."""


class StoreError(LedgerError):
    """Wraps a failure reported by the underlying key-value store."""
