"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.wallet.domain.models import Wallet


class WalletRepositoryProtocol(Protocol):
    async def lock_or_create(self, db: AsyncSession, wallet_id: str) -> Wallet: ...

    async def apply_delta(
        self, db: AsyncSession, wallet_id: str, delta: int
    ) -> Wallet: ...

    async def get_wallet(self, db: AsyncSession, wallet_id: str) -> Wallet | None: ...
