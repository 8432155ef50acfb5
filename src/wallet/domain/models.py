"""Domain models for wallet — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass

from src.wallet_common.enums import OperationType
from src.wallet_common.errors import InsufficientFundsError, InvalidRequestError

# Upper bound of a PostgreSQL BIGINT column
MAX_AMOUNT = 2**63 - 1


@dataclass
class Wallet:
    id: str
    balance: int   # smallest currency unit, never negative


@dataclass(frozen=True)
class Operation:
    """A single deposit or withdrawal; applied once and discarded."""

    wallet_id: str
    kind: OperationType
    amount: int

    def __post_init__(self) -> None:
        if not self.wallet_id:
            raise InvalidRequestError("Wallet ID is required")
        if self.kind not in (OperationType.DEPOSIT, OperationType.WITHDRAW):
            raise InvalidRequestError("Operation type must be DEPOSIT or WITHDRAW")
        if self.amount <= 0:
            raise InvalidRequestError("Amount must be more than 0")
        if self.amount > MAX_AMOUNT:
            raise InvalidRequestError("Amount is too large")

    @property
    def delta(self) -> int:
        return self.amount if self.kind == OperationType.DEPOSIT else -self.amount

    def apply_to(self, balance: int) -> int:
        """Return the balance after this operation, refusing to go below zero."""
        new_balance = balance + self.delta
        if new_balance < 0:
            raise InsufficientFundsError(self.wallet_id, self.amount, balance)
        return new_balance
