"""Pydantic schemas for the wallet API.

Field validators raise PydanticCustomError with the exact client-facing
message; the RequestValidationError handler in src.main turns those into
400 {"error": message}. Any other validation failure (bad JSON, wrong types)
is reported as INVALID_BODY_MESSAGE.
"""

from pydantic import AliasChoices, BaseModel, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from src.wallet.domain.models import MAX_AMOUNT
from src.wallet_common.enums import OperationType

INVALID_BODY_MESSAGE = "Invalid request body"

_OPERATION_TYPES = tuple(op.value for op in OperationType)

# PydanticCustomError types whose message is safe to return verbatim
CLIENT_ERROR_TYPES = frozenset({
    "wallet_id_required",
    "operation_type_invalid",
    "amount_not_positive",
    "amount_too_large",
})


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class WalletOperationRequest(BaseModel):
    wallet_id: str = Field(
        default="",
        validation_alias=AliasChoices("walletId", "valletId"),
        validate_default=True,
        description="Opaque wallet identifier",
    )
    operation_type: OperationType = Field(
        default=None,  # type: ignore[assignment]
        validation_alias="operationType",
        validate_default=True,
        description="DEPOSIT or WITHDRAW",
    )
    amount: int = Field(
        default=0,
        strict=True,
        validate_default=True,
        description="Amount in the smallest currency unit",
    )

    @field_validator("wallet_id", "amount", mode="before")
    @classmethod
    def _null_as_missing(cls, value: object, info: ValidationInfo) -> object:
        # An explicit null reads the same as an absent field
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @field_validator("wallet_id")
    @classmethod
    def _wallet_id_required(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("wallet_id_required", "Wallet ID is required")
        return value

    @field_validator("operation_type", mode="before")
    @classmethod
    def _known_operation_type(cls, value: object) -> object:
        if value not in _OPERATION_TYPES:
            raise PydanticCustomError(
                "operation_type_invalid", "Operation type must be DEPOSIT or WITHDRAW"
            )
        return value

    @field_validator("amount")
    @classmethod
    def _amount_in_range(cls, value: int) -> int:
        if value <= 0:
            raise PydanticCustomError("amount_not_positive", "Amount must be more than 0")
        if value > MAX_AMOUNT:
            raise PydanticCustomError("amount_too_large", "Amount is too large")
        return value


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class BalanceResponse(BaseModel):
    wallet_id: str
    balance: int


def client_error_message(errors: list[dict]) -> str:
    """Pick the message for a failed request validation.

    Structural problems win over field rules: a body that is not valid JSON,
    or has a field of the wrong type, is rejected as a whole.
    """
    if any(err.get("type") not in CLIENT_ERROR_TYPES for err in errors):
        return INVALID_BODY_MESSAGE
    return str(errors[0]["msg"]) if errors else INVALID_BODY_MESSAGE
