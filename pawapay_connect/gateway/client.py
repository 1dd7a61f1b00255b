import asyncio
import logging
from typing import Any, Callable, Dict, Optional, TypeVar

from ..enums import Endpoint
from ..exceptions import MalformedResponse, TransportError, ValidationError
from ..schemas.common import check_deposit_id
from ..schemas.deposits import DepositRequest, DepositResult, DepositStatusResult
from ..schemas.payment_page import PaymentPageRequest, PaymentPageResult
from ..schemas.providers import PredictProviderResult
from ..utils.security import mask_phone
from . import discriminator, payloads
from .base import Transport
from .config import GatewayConfig
from .payloads import MetadataProfile
from .transport import HttpTransport

logger = logging.getLogger("pawapay_connect.client")

R = TypeVar("R")


class PawapayClient:
    """
    One coroutine per gateway operation:
      - POST /predict-provider
      - POST /paymentpage
      - POST /deposits
      - GET  /deposits/{depositId}
    Payloads are built locally, sent through the transport, and whatever body
    comes back (including bodies of HTTP errors) goes through the discriminator.
    """

    def __init__(self, transport: Transport):
        self.transport = transport

    @classmethod
    def from_config(cls, config: Optional[GatewayConfig] = None) -> "PawapayClient":
        return cls(HttpTransport(config or GatewayConfig.from_settings()))

    async def _call(
        self,
        operation: str,
        method: str,
        path: str,
        parse: Callable[[Dict[str, Any]], R],
        json_body: Optional[Dict[str, Any]] = None,
        on_not_found: Optional[Callable[[], R]] = None,
    ) -> R:
        try:
            resp = await self.transport.execute(method, path, json_body)
        except TransportError as e:
            if e.is_not_found and on_not_found is not None:
                logger.info("%s: HTTP 404 absorbed into a domain result", operation)
                return on_not_found()
            data = self._error_body(e)
            if data is None:
                raise
            logger.error(
                "%s: HTTP %s with structured body, discriminating it like a regular answer", operation, e.status_code
            )
            return parse(data)

        return parse(discriminator.decode_body(resp.body))

    @staticmethod
    def _error_body(error: TransportError) -> Optional[Dict[str, Any]]:
        if not error.body:
            return None
        try:
            return discriminator.decode_body(error.body)
        except MalformedResponse:
            return None

    async def predict_provider(self, phone_number: str) -> PredictProviderResult:
        body = payloads.build_predict_provider_payload(phone_number)
        result = await self._call(
            "predict-provider", "POST", Endpoint.PREDICT_PROVIDER.value,
            discriminator.parse_predict_provider, body,
        )
        logger.info(
            "Provider prediction completed phone=%s success=%s provider=%s",
            mask_phone(body["phoneNumber"]),
            result.is_success,
            result.provider.value if result.is_success else None,
        )
        return result

    async def create_payment_page(
        self, request: PaymentPageRequest, metadata_profile: MetadataProfile = MetadataProfile.FLAT
    ) -> PaymentPageResult:
        body = payloads.build_payment_page_payload(request, metadata_profile)
        result = await self._call(
            "payment-page", "POST", Endpoint.PAYMENT_PAGE.value,
            discriminator.parse_payment_page, body,
        )
        logger.info("Payment page creation completed depositId=%s success=%s", request.depositId, result.is_success)
        return result

    async def initiate_deposit(self, request: DepositRequest) -> DepositResult:
        body = payloads.build_deposit_payload(request)
        result = await self._call(
            "deposit", "POST", Endpoint.DEPOSITS.value,
            discriminator.parse_deposit, body,
        )
        logger.info(
            "Deposit initiation completed depositId=%s status=%s success=%s",
            request.depositId, result.status.value, result.is_successful(),
        )
        return result

    async def check_deposit_status(self, deposit_id: str) -> DepositStatusResult:
        try:
            deposit_id = check_deposit_id(deposit_id)
        except ValueError as e:
            raise ValidationError(f"depositId must be a UUID, got {deposit_id!r}", {"field": "depositId"}) from e
        path = Endpoint.DEPOSIT_STATUS.build_path(depositId=deposit_id)
        # TODO: confirm against the live gateway that 404 only ever means an unknown depositId
        result = await self._call(
            "deposit-status", "GET", path,
            discriminator.parse_deposit_status, on_not_found=DepositStatusResult.not_found,
        )
        logger.info("Deposit status check completed depositId=%s status=%s", deposit_id, result.status.value)
        return result

    async def wait_for_final_status(
        self, deposit_id: str, interval_sec: float = 5.0, max_attempts: int = 12
    ) -> DepositStatusResult:
        """
        Poll check_deposit_status until the deposit reaches COMPLETED/FAILED,
        the gateway reports NOT_FOUND, or max_attempts is exhausted.
        Returns the last result seen.
        """
        result = None
        for attempt in range(max(1, max_attempts)):
            if attempt:
                await asyncio.sleep(interval_sec)
            result = await self.check_deposit_status(deposit_id)
            if result.is_not_found() or result.data is None:
                return result
            if result.data.is_final_status():
                return result
        return result
