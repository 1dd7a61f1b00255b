from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..enums import Country, Currency, TransactionStatus
from ..gateway import state_machine
from .common import AMOUNT_PATTERN, FailureReason, Payer, build_request, check_deposit_id


class DepositRequest(BaseModel):
    """
    Build with from_dict: it reports bad input as the package ValidationError.
    Direct construction raises pydantic's own ValidationError instead.
    """

    depositId: str
    payer: Payer
    amount: str = Field(pattern=AMOUNT_PATTERN)
    currency: Currency
    preAuthorisationCode: Optional[str] = None
    clientReferenceId: Optional[str] = None
    customerMessage: Optional[str] = None
    metadata: Optional[List[Any]] = None

    @field_validator("depositId", mode="before")
    @classmethod
    def deposit_id_is_uuid(cls, v: Any) -> str:
        return check_deposit_id(v)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DepositRequest":
        return build_request(cls, data)


class DepositResult(BaseModel):
    """Immediate answer of the gateway to a deposit submission."""

    model_config = ConfigDict(frozen=True)

    status: TransactionStatus
    depositId: Optional[str] = None
    created: Optional[str] = None
    failureReason: Optional[FailureReason] = None

    def is_accepted(self) -> bool:
        return self.status is TransactionStatus.ACCEPTED

    def is_rejected(self) -> bool:
        return self.status is TransactionStatus.REJECTED

    def is_duplicate_ignored(self) -> bool:
        return self.status is TransactionStatus.DUPLICATE_IGNORED

    def is_successful(self) -> bool:
        return state_machine.is_successful(self.status)


class DepositDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    depositId: str
    status: TransactionStatus
    amount: str
    currency: Currency
    country: Country
    payer: Payer
    customerMessage: Optional[str] = None
    clientReferenceId: Optional[str] = None
    providerTransactionId: Optional[str] = None
    created: Optional[str] = None
    failureReason: Optional[FailureReason] = None
    metadata: Optional[List[Dict[str, Any]]] = None

    def is_final_status(self) -> bool:
        return state_machine.is_final(self.status)

    def is_processing(self) -> bool:
        return state_machine.is_processing(self.status)


class DepositStatusResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: TransactionStatus
    data: Optional[DepositDetails] = None

    def is_found(self) -> bool:
        return self.status is TransactionStatus.FOUND

    def is_not_found(self) -> bool:
        return self.status is TransactionStatus.NOT_FOUND

    @classmethod
    def not_found(cls) -> "DepositStatusResult":
        return cls(status=TransactionStatus.NOT_FOUND)
