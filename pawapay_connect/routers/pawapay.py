import logging
from functools import lru_cache
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..exceptions import PawapayError, ValidationError
from ..gateway.client import PawapayClient
from ..schemas.deposits import DepositRequest
from ..schemas.payment_page import PaymentPageRequest
from ..schemas.providers import PredictProviderRequest
from ..utils.security import mask_phone

logger = logging.getLogger("pawapay_connect.api")

router = APIRouter(prefix="/pawapay")


@lru_cache
def get_client() -> PawapayClient:
    return PawapayClient.from_config()


def _ok(success: bool, result: Any) -> Dict[str, Any]:
    return {"success": success, "data": result.model_dump(mode="json", exclude_none=True)}


def _failed(error: str, exc: PawapayError) -> JSONResponse:
    code = 422 if isinstance(exc, ValidationError) else 500
    return JSONResponse(status_code=code, content={"success": False, "error": error, "message": exc.message})


@router.post("/predict-provider")
async def predict_provider(body: PredictProviderRequest, client: PawapayClient = Depends(get_client)):
    try:
        result = await client.predict_provider(body.phoneNumber)
    except PawapayError as e:
        logger.error("Provider prediction failed phone=%s error=%s", mask_phone(body.phoneNumber), e.message)
        return _failed("Unable to predict provider", e)
    return _ok(result.is_success, result)


@router.post("/payment-page")
async def create_payment_page(body: PaymentPageRequest, client: PawapayClient = Depends(get_client)):
    try:
        result = await client.create_payment_page(body)
    except PawapayError as e:
        logger.error("Payment page creation failed depositId=%s error=%s", body.depositId, e.message)
        return _failed("Unable to create payment page", e)
    return _ok(result.is_success, result)


@router.post("/deposits")
async def initiate_deposit(body: DepositRequest, client: PawapayClient = Depends(get_client)):
    try:
        result = await client.initiate_deposit(body)
    except PawapayError as e:
        logger.error("Deposit initiation failed depositId=%s error=%s", body.depositId, e.message)
        return _failed("Unable to initiate deposit", e)
    return _ok(result.is_successful(), result)


@router.get("/deposits/{deposit_id}")
async def check_deposit_status(deposit_id: str, client: PawapayClient = Depends(get_client)):
    try:
        result = await client.check_deposit_status(deposit_id)
    except PawapayError as e:
        logger.error("Deposit status check failed depositId=%s error=%s", deposit_id, e.message)
        return _failed("Unable to check deposit status", e)
    return _ok(result.is_found(), result)
