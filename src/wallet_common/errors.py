"""Error taxonomy for the wallet service.

Every error carries an ErrorKind tag so callers branch on the kind (or the
class), never on message text:

  VALIDATION          malformed or missing input, never reaches the store
  INSUFFICIENT_FUNDS  a withdrawal would take the balance below zero
  NOT_FOUND           wallet absent on read, or gone between lock and update
  STORE               any persistence failure (connectivity, constraint, abort)
  INTERNAL            anything else the HTTP layer refuses to explain
"""

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "VALIDATION"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    NOT_FOUND = "NOT_FOUND"
    STORE = "STORE"
    INTERNAL = "INTERNAL"


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.kind = kind
        self.message = message
        self.http_status = http_status
        super().__init__(message)


class InvalidRequestError(AppError):
    def __init__(self, message: str) -> None:
        super().__init__(ErrorKind.VALIDATION, message, 400)


class InsufficientFundsError(AppError):
    def __init__(self, wallet_id: str, required: int, available: int) -> None:
        self.wallet_id = wallet_id
        self.required = required
        self.available = available
        super().__init__(ErrorKind.INSUFFICIENT_FUNDS, "insufficient funds", 400)


class WalletNotFoundError(AppError):
    def __init__(self, wallet_id: str) -> None:
        self.wallet_id = wallet_id
        super().__init__(ErrorKind.NOT_FOUND, "Wallet not found", 404)


class StoreError(AppError):
    """Persistence failure. The message is for logs only, never for clients."""

    def __init__(self, detail: str) -> None:
        super().__init__(ErrorKind.STORE, detail, 500)


class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(ErrorKind.INTERNAL, detail, 500)
