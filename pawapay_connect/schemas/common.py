import uuid
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..enums import Currency, FailureCode, Provider
from ..exceptions import ValidationError

AMOUNT_PATTERN = r"^[0-9]+(\.[0-9]{1,2})?$"
PHONE_PATTERN = r"^[0-9]{6,14}$"
DEFAULT_FAILURE_MESSAGE = "Unknown error"

SCALAR_TYPES = (str, int, float, bool)

M = TypeVar("M", bound=BaseModel)


def normalize_phone_number(phone: Optional[str]) -> str:
    return str(phone or "").strip().lstrip("+")


def check_deposit_id(value: Any) -> str:
    # depositId is the idempotency key: only the canonical hyphenated form is accepted
    value = str(value or "").strip()
    canonical = str(uuid.UUID(value))
    if canonical != value.lower():
        raise ValueError(f"depositId must be a hyphenated UUID, got {value!r}")
    return canonical


def validate_metadata(metadata: Any) -> List[Dict[str, Any]]:
    """
    Metadata is a list of maps with string keys and scalar values.
    Raises ValidationError naming the first offending item.
    """
    if not isinstance(metadata, list):
        raise ValidationError("Metadata must be a list of associative arrays.", {"field": "metadata"})

    for index, item in enumerate(metadata):
        if not isinstance(item, dict):
            raise ValidationError(
                f"Metadata item at index {index} must be an associative array.",
                {"field": "metadata", "index": index},
            )
        for key, value in item.items():
            if not isinstance(key, str):
                raise ValidationError(
                    f"Metadata item at index {index} must have string keys.",
                    {"field": "metadata", "index": index},
                )
            if not isinstance(value, SCALAR_TYPES):
                raise ValidationError(
                    f"Metadata item at index {index} must have scalar values.",
                    {"field": "metadata", "index": index, "key": key},
                )
    return metadata


class FailureReason(BaseModel):
    model_config = ConfigDict(frozen=True)

    failureCode: FailureCode = FailureCode.UNKNOWN_ERROR
    failureMessage: str = DEFAULT_FAILURE_MESSAGE

    @classmethod
    def from_payload(cls, data: Any) -> "FailureReason":
        # Incomplete failure blocks still yield a usable description
        data = data if isinstance(data, dict) else {}
        message = data.get("failureMessage")
        return cls(
            failureCode=FailureCode.parse(data.get("failureCode") or FailureCode.UNKNOWN_ERROR.value),
            failureMessage=str(message) if message else DEFAULT_FAILURE_MESSAGE,
        )


class AccountDetails(BaseModel):
    phoneNumber: str
    provider: Provider

    @field_validator("phoneNumber", mode="before")
    @classmethod
    def strip_plus(cls, v: Any) -> str:
        return normalize_phone_number(v)


class Payer(BaseModel):
    type: str = "MMO"
    accountDetails: AccountDetails


class AmountDetails(BaseModel):
    amount: str = Field(pattern=AMOUNT_PATTERN)
    currency: Currency


def build_request(model: Type[M], data: Dict[str, Any]) -> M:
    """Build a request model from a plain dict, reporting problems as ValidationError."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise ValidationError(f"Invalid {model.__name__}: {', '.join(fields)}", {"fields": fields}) from e
