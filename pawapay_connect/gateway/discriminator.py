"""
Turns decoded gateway bodies into typed results.

The gateway does not tag its responses, so each operation has an ordered list
of shapes recognised by key presence. The first shape that matches wins;
a body matching none of them raises UnrecognizedResponseFormat.
"""
import json
from typing import Any, Callable, Dict, List, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..enums import TransactionStatus
from ..exceptions import MalformedResponse, UnrecognizedResponseFormat, ValidationError
from ..schemas.common import FailureReason, normalize_phone_number, validate_metadata
from ..schemas.deposits import DepositDetails, DepositResult, DepositStatusResult
from ..schemas.payment_page import PaymentPageError, PaymentPageResult, PaymentPageSuccess
from ..schemas.providers import PredictProviderFailure, PredictProviderResult, PredictProviderSuccess

M = TypeVar("M", bound=BaseModel)

Shape = Tuple[str, Callable[[Dict[str, Any]], bool], Callable[[Dict[str, Any]], Any]]

FAILURE_KEYS = ("failureMessage", "failureReason", "failureCode")
LOOKUP_STATUSES = (TransactionStatus.FOUND, TransactionStatus.NOT_FOUND)


def decode_body(body: bytes) -> Dict[str, Any]:
    if not body:
        raise MalformedResponse("Empty response body")
    try:
        data = json.loads(body)
    except ValueError as e:
        raise MalformedResponse("Response body is not valid JSON", {"body": body[:300].decode("utf-8", "replace")}) from e
    if not isinstance(data, dict):
        raise MalformedResponse("Response body is not a JSON object", {"body": data})
    return data


def _has(data: Dict[str, Any], *keys: str) -> bool:
    return all(data.get(k) is not None for k in keys)


def _has_any(data: Dict[str, Any], *keys: str) -> bool:
    return any(data.get(k) is not None for k in keys)


def _build(model: Type[M], data: Dict[str, Any], raw: Dict[str, Any]) -> M:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise UnrecognizedResponseFormat(
            f"Response does not fit {model.__name__}: {', '.join(fields)}", {"response": raw}
        ) from e


def discriminate(data: Dict[str, Any], shapes: Sequence[Shape], operation: str) -> Any:
    for _name, matches, build in shapes:
        if matches(data):
            return build(data)
    raise UnrecognizedResponseFormat(
        f"Unrecognized {operation} response format: {json.dumps(data, default=str)[:300]}", {"response": data}
    )


# ---- predict provider ----

def _predict_success(data: Dict[str, Any]) -> PredictProviderSuccess:
    return _build(
        PredictProviderSuccess,
        {
            "country": data["country"],
            "provider": data["provider"],
            "phoneNumber": normalize_phone_number(data["phoneNumber"]),
        },
        data,
    )


def _predict_failure(data: Dict[str, Any]) -> PredictProviderFailure:
    # Failure details come either nested under failureReason or flat
    source = data["failureReason"] if isinstance(data.get("failureReason"), dict) else data
    return PredictProviderFailure(failureReason=FailureReason.from_payload(source))


PREDICT_PROVIDER_SHAPES: List[Shape] = [
    ("success", lambda d: _has(d, "provider", "phoneNumber", "country"), _predict_success),
    ("failure", lambda d: _has_any(d, *FAILURE_KEYS), _predict_failure),
]


def parse_predict_provider(data: Dict[str, Any]) -> PredictProviderResult:
    return discriminate(data, PREDICT_PROVIDER_SHAPES, "predict-provider")


# ---- payment page ----

def _payment_page_error(data: Dict[str, Any]) -> PaymentPageError:
    return _build(
        PaymentPageError,
        {
            "depositId": data.get("depositId"),
            "status": data.get("status"),
            "failureReason": FailureReason.from_payload(data.get("failureReason")),
        },
        data,
    )


PAYMENT_PAGE_SHAPES: List[Shape] = [
    ("success", lambda d: _has(d, "redirectUrl"), lambda d: _build(PaymentPageSuccess, {"redirectUrl": d["redirectUrl"]}, d)),
    # key presence only: an empty or null failureReason still means failure
    ("error", lambda d: "failureReason" in d, _payment_page_error),
]


def parse_payment_page(data: Dict[str, Any]) -> PaymentPageResult:
    return discriminate(data, PAYMENT_PAGE_SHAPES, "payment page")


# ---- deposit initiation ----

def _deposit_result(data: Dict[str, Any]) -> DepositResult:
    failure = data.get("failureReason")
    return _build(
        DepositResult,
        {
            "depositId": data.get("depositId"),
            "status": data["status"],
            "created": data.get("created"),
            "failureReason": FailureReason.from_payload(failure) if isinstance(failure, dict) else None,
        },
        data,
    )


DEPOSIT_SHAPES: List[Shape] = [
    ("result", lambda d: _has(d, "status"), _deposit_result),
]


def parse_deposit(data: Dict[str, Any]) -> DepositResult:
    return discriminate(data, DEPOSIT_SHAPES, "deposit")


# ---- deposit status lookup ----

def _deposit_details(detail: Dict[str, Any], raw: Dict[str, Any]) -> DepositDetails:
    detail = dict(detail)

    payer = detail.get("payer")
    if isinstance(payer, dict) and isinstance(payer.get("accountDetails"), dict):
        account = dict(payer["accountDetails"])
        # the gateway has been seen sending "phoneNUmber"
        if "phoneNumber" not in account and "phoneNUmber" in account:
            account["phoneNumber"] = account.pop("phoneNUmber")
        detail["payer"] = {**payer, "accountDetails": account}

    failure = detail.get("failureReason")
    detail["failureReason"] = FailureReason.from_payload(failure) if isinstance(failure, dict) else None

    if detail.get("metadata") is not None:
        try:
            validate_metadata(detail["metadata"])
        except ValidationError as e:
            raise UnrecognizedResponseFormat(f"Deposit metadata rejected: {e.message}", {"response": raw}) from e

    return _build(DepositDetails, detail, raw)


def _deposit_status(data: Dict[str, Any]) -> DepositStatusResult:
    status = data["status"]
    detail = None
    if status == TransactionStatus.FOUND.value and isinstance(data.get("data"), dict):
        detail = _deposit_details(data["data"], data)
    return DepositStatusResult(status=TransactionStatus(status), data=detail)


DEPOSIT_STATUS_SHAPES: List[Shape] = [
    ("lookup", lambda d: d.get("status") in [s.value for s in LOOKUP_STATUSES], _deposit_status),
]


def parse_deposit_status(data: Dict[str, Any]) -> DepositStatusResult:
    return discriminate(data, DEPOSIT_STATUS_SHAPES, "deposit status")
