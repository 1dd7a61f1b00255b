from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from ..enums import Country, Language, TransactionStatus
from .common import AmountDetails, FailureReason, build_request, check_deposit_id


class PaymentPageRequest(BaseModel):
    """Build with from_dict, as for DepositRequest."""

    depositId: str
    returnUrl: str
    amountDetails: AmountDetails
    customerMessage: Optional[str] = None
    phoneNumber: Optional[str] = None
    language: Optional[Language] = None
    country: Optional[Country] = None
    reason: Optional[str] = None
    metadata: Optional[List[Any]] = None

    @field_validator("depositId", mode="before")
    @classmethod
    def deposit_id_is_uuid(cls, v: Any) -> str:
        return check_deposit_id(v)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PaymentPageRequest":
        return build_request(cls, data)


class PaymentPageSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    redirectUrl: str

    @property
    def is_success(self) -> bool:
        return True


class PaymentPageError(BaseModel):
    model_config = ConfigDict(frozen=True)

    failureReason: FailureReason
    depositId: Optional[str] = None
    status: Optional[TransactionStatus] = None

    @property
    def is_success(self) -> bool:
        return False


PaymentPageResult = Union[PaymentPageSuccess, PaymentPageError]
