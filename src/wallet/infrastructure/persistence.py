"""WalletRepository — concrete implementation of WalletRepositoryProtocol.

The exclusive scope for a wallet is its row lock: `lock_or_create` takes
SELECT ... FOR UPDATE, and the lock is held until the caller commits or rolls
back. Concurrent writers to the same wallet queue on that lock; writers to
different wallets never touch each other's rows.

Transaction ownership: the CALLER (application service) commits or rolls
back. Every SQLAlchemy failure is re-raised as StoreError with context.
"""

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.wallet.domain.models import Wallet
from src.wallet_common.errors import StoreError, WalletNotFoundError

_LOCK_WALLET_SQL = text("""
    SELECT id, balance
    FROM wallet
    WHERE id = :wallet_id
    FOR UPDATE
""")

# ON CONFLICT: two first-time writers for one id both proceed; the loser
# waits on the unique index, inserts nothing, then locks the winner's row.
_CREATE_WALLET_SQL = text("""
    INSERT INTO wallet (id, balance)
    VALUES (:wallet_id, 0)
    ON CONFLICT (id) DO NOTHING
""")

_APPLY_DELTA_SQL = text("""
    UPDATE wallet
    SET balance = balance + :delta
    WHERE id = :wallet_id
    RETURNING id, balance
""")

_GET_WALLET_SQL = text("""
    SELECT id, balance
    FROM wallet
    WHERE id = :wallet_id
""")


def _row_to_wallet(row: object) -> Wallet:
    return Wallet(
        id=row.id,  # type: ignore[attr-defined]
        balance=row.balance,  # type: ignore[attr-defined]
    )


class WalletRepository:
    async def lock_or_create(self, db: AsyncSession, wallet_id: str) -> Wallet:
        """Lock the wallet row, creating it with balance 0 if it does not exist."""
        row = await self._lock(db, wallet_id)
        if row is not None:
            return _row_to_wallet(row)

        try:
            await db.execute(_CREATE_WALLET_SQL, {"wallet_id": wallet_id})
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to create wallet {wallet_id}") from exc

        row = await self._lock(db, wallet_id)
        if row is None:
            raise WalletNotFoundError(wallet_id)
        return _row_to_wallet(row)

    async def apply_delta(
        self, db: AsyncSession, wallet_id: str, delta: int
    ) -> Wallet:
        try:
            result = await db.execute(
                _APPLY_DELTA_SQL, {"wallet_id": wallet_id, "delta": delta}
            )
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to update balance of wallet {wallet_id}") from exc
        row = result.fetchone()
        if row is None:
            raise WalletNotFoundError(wallet_id)
        return _row_to_wallet(row)

    async def get_wallet(self, db: AsyncSession, wallet_id: str) -> Wallet | None:
        try:
            result = await db.execute(_GET_WALLET_SQL, {"wallet_id": wallet_id})
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to get balance of wallet {wallet_id}") from exc
        row = result.fetchone()
        return _row_to_wallet(row) if row else None

    async def _lock(self, db: AsyncSession, wallet_id: str) -> object | None:
        try:
            result = await db.execute(_LOCK_WALLET_SQL, {"wallet_id": wallet_id})
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to lock wallet {wallet_id}") from exc
        return result.fetchone()
