"""WalletApplicationService — transaction applier and balance reader.

apply_operation runs lock → check → update → commit inside one session, so
the row lock taken by the repository is the exclusive scope for the wallet.
Any error rolls the whole scope back; nothing is retried here.
get_balance is a plain read without an explicit transaction.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.wallet.domain.models import Operation, Wallet
from src.wallet.domain.repository import WalletRepositoryProtocol
from src.wallet.infrastructure.persistence import WalletRepository
from src.wallet_common.enums import OperationType
from src.wallet_common.errors import (
    InsufficientFundsError,
    StoreError,
    WalletNotFoundError,
)

logger = logging.getLogger("wallet.service")


class WalletApplicationService:
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        repo: WalletRepositoryProtocol | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._repo: WalletRepositoryProtocol = repo or WalletRepository()

    async def apply_operation(
        self, wallet_id: str, kind: OperationType, amount: int
    ) -> Wallet:
        operation = Operation(wallet_id=wallet_id, kind=kind, amount=amount)

        async with self._session_factory() as db:
            try:
                wallet = await self._repo.lock_or_create(db, wallet_id)
                operation.apply_to(wallet.balance)
                wallet = await self._repo.apply_delta(db, wallet_id, operation.delta)
                try:
                    await db.commit()
                except SQLAlchemyError as exc:
                    raise StoreError(f"failed to commit transaction for wallet {wallet_id}") from exc
            except InsufficientFundsError as exc:
                await db.rollback()
                logger.info(
                    "withdraw rejected wallet=%s amount=%d balance=%d",
                    wallet_id,
                    exc.required,
                    exc.available,
                )
                raise
            except Exception:
                await db.rollback()
                raise

        logger.info(
            "%s applied wallet=%s amount=%d balance=%d",
            OperationType(operation.kind).value,
            wallet_id,
            amount,
            wallet.balance,
        )
        return wallet

    async def get_balance(self, wallet_id: str) -> int:
        async with self._session_factory() as db:
            wallet = await self._repo.get_wallet(db, wallet_id)
        if wallet is None:
            raise WalletNotFoundError(wallet_id)
        return wallet.balance
