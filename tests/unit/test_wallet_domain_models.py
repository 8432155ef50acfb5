"""Tests for wallet domain models."""

import pytest

from src.wallet.domain.models import MAX_AMOUNT, Operation, Wallet
from src.wallet_common.enums import OperationType
from src.wallet_common.errors import InsufficientFundsError, InvalidRequestError


class TestOperationDelta:
    def test_deposit_is_positive(self) -> None:
        op = Operation("w1", OperationType.DEPOSIT, 1000)
        assert op.delta == 1000

    def test_withdraw_is_negative(self) -> None:
        op = Operation("w1", OperationType.WITHDRAW, 1000)
        assert op.delta == -1000

    def test_plain_string_kind_accepted(self) -> None:
        op = Operation("w1", "WITHDRAW", 5)  # type: ignore[arg-type]
        assert op.delta == -5


class TestOperationApplyTo:
    def test_deposit_adds(self) -> None:
        assert Operation("w1", OperationType.DEPOSIT, 1000).apply_to(0) == 1000

    def test_withdraw_subtracts(self) -> None:
        assert Operation("w1", OperationType.WITHDRAW, 500).apply_to(1000) == 500

    def test_withdraw_entire_balance(self) -> None:
        assert Operation("w1", OperationType.WITHDRAW, 1000).apply_to(1000) == 0

    def test_overdraft_rejected(self) -> None:
        op = Operation("w1", OperationType.WITHDRAW, 1500)
        with pytest.raises(InsufficientFundsError) as exc_info:
            op.apply_to(1000)
        assert exc_info.value.required == 1500
        assert exc_info.value.available == 1000

    def test_deposit_then_withdraw_round_trip(self) -> None:
        start = 4242
        after_deposit = Operation("w1", OperationType.DEPOSIT, 700).apply_to(start)
        assert Operation("w1", OperationType.WITHDRAW, 700).apply_to(after_deposit) == start


class TestOperationGuards:
    def test_empty_wallet_id(self) -> None:
        with pytest.raises(InvalidRequestError, match="Wallet ID is required"):
            Operation("", OperationType.DEPOSIT, 1)

    def test_unknown_kind(self) -> None:
        with pytest.raises(InvalidRequestError, match="DEPOSIT or WITHDRAW"):
            Operation("w1", "TRANSFER", 1)  # type: ignore[arg-type]

    @pytest.mark.parametrize("amount", [0, -1, -1000])
    def test_non_positive_amount(self, amount: int) -> None:
        with pytest.raises(InvalidRequestError, match="more than 0"):
            Operation("w1", OperationType.DEPOSIT, amount)

    def test_amount_over_bigint(self) -> None:
        with pytest.raises(InvalidRequestError, match="too large"):
            Operation("w1", OperationType.DEPOSIT, MAX_AMOUNT + 1)


class TestWallet:
    def test_fields(self) -> None:
        wallet = Wallet(id="w1", balance=500)
        assert wallet.id == "w1"
        assert wallet.balance == 500
