"""wallet REST API — balance mutation and balance query."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from src.wallet.application.schemas import BalanceResponse, WalletOperationRequest
from src.wallet.application.service import WalletApplicationService
from src.wallet_common.errors import InternalError, InvalidRequestError, WalletNotFoundError
from src.wallet_common.response import ErrorResponse

logger = logging.getLogger("wallet.api")

router = APIRouter(tags=["wallet"])

_ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_wallet_service(request: Request) -> WalletApplicationService:
    """FastAPI dependency: the service built by the application lifespan."""
    return request.app.state.wallet_service  # type: ignore[no-any-return]


@router.post("/wallet", responses=_ERROR_RESPONSES)
async def wallet_operation(
    body: WalletOperationRequest,
    service: Annotated[WalletApplicationService, Depends(get_wallet_service)],
) -> Response:
    try:
        await service.apply_operation(body.wallet_id, body.operation_type, body.amount)
    except WalletNotFoundError as exc:
        # Wallet vanished between lock and update: a server-side fault here
        logger.error("wallet %s disappeared during %s", exc.wallet_id, body.operation_type.value)
        raise InternalError() from exc
    return Response(status_code=200)


@router.get("/wallets/", include_in_schema=False)
async def wallet_id_missing() -> None:
    raise InvalidRequestError("Wallet ID is required")


@router.get(
    "/wallets/{wallet_id}",
    response_model=BalanceResponse,
    responses={**_ERROR_RESPONSES, 404: {"model": ErrorResponse}},
)
async def get_balance(
    wallet_id: str,
    service: Annotated[WalletApplicationService, Depends(get_wallet_service)],
) -> BalanceResponse:
    if not wallet_id.strip():
        raise InvalidRequestError("Wallet ID is required")
    balance = await service.get_balance(wallet_id)
    return BalanceResponse(wallet_id=wallet_id, balance=balance)
