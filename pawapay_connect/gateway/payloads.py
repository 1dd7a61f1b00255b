"""
Outbound payloads. Only fields that were set are sent: an absent optional
field never shows up as a null key.
"""
import re
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel

from ..exceptions import ValidationError
from ..schemas.common import PHONE_PATTERN, normalize_phone_number, validate_metadata
from ..schemas.deposits import DepositRequest
from ..schemas.payment_page import PaymentPageRequest


class MetadataProfile(str, Enum):
    """
    How metadata is laid out for the payment page.

    FLAT sends the list of maps as given. UNWRAP_DATA expects items shaped like
    {"data": {...}} and sends the inner maps, which is what the standalone
    payment-page integration has always done.
    """

    FLAT = "FLAT"
    UNWRAP_DATA = "UNWRAP_DATA"


def _dump(model: BaseModel) -> Dict[str, Any]:
    # mode="json" turns enums into their wire strings
    return model.model_dump(mode="json", exclude_none=True)


def _unwrap_metadata(metadata: Any) -> List[Dict[str, Any]]:
    if not isinstance(metadata, list):
        raise ValidationError("Metadata must be a list of associative arrays.", {"field": "metadata"})
    unwrapped = []
    for index, item in enumerate(metadata):
        if not isinstance(item, dict) or "data" not in item:
            raise ValidationError(
                f"Metadata item at index {index} must carry a 'data' entry.",
                {"field": "metadata", "index": index},
            )
        unwrapped.append(item["data"])
    return unwrapped


def build_predict_provider_payload(phone_number: str) -> Dict[str, Any]:
    return {"phoneNumber": normalize_phone_number(phone_number)}


def _checked_phone(phone: str, field: str) -> str:
    phone = normalize_phone_number(phone)
    if not re.fullmatch(PHONE_PATTERN, phone):
        raise ValidationError(f"{field} must contain 6 to 14 digits.", {"field": field})
    return phone


def build_deposit_payload(request: DepositRequest) -> Dict[str, Any]:
    metadata = validate_metadata(request.metadata) if request.metadata is not None else None
    phone = _checked_phone(request.payer.accountDetails.phoneNumber, "payer.accountDetails.phoneNumber")

    payload = _dump(request.model_copy(update={"metadata": None}))
    payload["payer"]["accountDetails"]["phoneNumber"] = phone
    if metadata is not None:
        payload["metadata"] = metadata
    return payload


def build_payment_page_payload(
    request: PaymentPageRequest, metadata_profile: MetadataProfile = MetadataProfile.FLAT
) -> Dict[str, Any]:
    metadata = None
    if request.metadata is not None:
        metadata = request.metadata
        if metadata_profile is MetadataProfile.UNWRAP_DATA:
            metadata = _unwrap_metadata(metadata)
        metadata = validate_metadata(metadata)
    phone = _checked_phone(request.phoneNumber, "phoneNumber") if request.phoneNumber is not None else None

    payload = _dump(request.model_copy(update={"metadata": None}))
    if phone is not None:
        payload["phoneNumber"] = phone
    if metadata is not None:
        payload["metadata"] = metadata
    return payload
