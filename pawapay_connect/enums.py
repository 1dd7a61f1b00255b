from enum import Enum
from typing import Dict, List
from urllib.parse import quote


class Currency(str, Enum):
    XOF = "XOF"  # Benin, Burkina Faso, Côte d'Ivoire, Senegal
    XAF = "XAF"  # Cameroon, Republic of Congo, Gabon
    CDF = "CDF"  # DR Congo
    USD = "USD"  # DR Congo
    ETB = "ETB"
    GHS = "GHS"
    KES = "KES"
    LSL = "LSL"
    MWK = "MWK"
    MZN = "MZN"
    NGN = "NGN"
    RWF = "RWF"
    SLE = "SLE"
    TZS = "TZS"
    UGX = "UGX"
    ZMW = "ZMW"


class Language(str, Enum):
    EN = "EN"
    FR = "FR"


class Country(str, Enum):
    BEN = "BEN"  # Benin
    BFA = "BFA"  # Burkina Faso
    CMR = "CMR"  # Cameroon
    CIV = "CIV"  # Côte d'Ivoire
    COD = "COD"  # DR Congo
    ETH = "ETH"  # Ethiopia
    GAB = "GAB"  # Gabon
    GHA = "GHA"  # Ghana
    KEN = "KEN"  # Kenya
    LSO = "LSO"  # Lesotho
    MWI = "MWI"  # Malawi
    MOZ = "MOZ"  # Mozambique
    NGA = "NGA"  # Nigeria
    COG = "COG"  # Republic of Congo
    RWA = "RWA"  # Rwanda
    SEN = "SEN"  # Senegal
    SLE = "SLE"  # Sierra Leone
    TZA = "TZA"  # Tanzania
    UGA = "UGA"  # Uganda
    ZMB = "ZMB"  # Zambia

    @classmethod
    def from_provider(cls, provider: "Provider") -> "Country":
        return _PROVIDER_COUNTRY[provider]

    def providers(self) -> List["Provider"]:
        return [p for p in Provider if _PROVIDER_COUNTRY[p] is self]


class Provider(str, Enum):
    MTN_MOMO_BEN = "MTN_MOMO_BEN"
    MOOV_BEN = "MOOV_BEN"
    MOOV_BFA = "MOOV_BFA"
    ORANGE_BFA = "ORANGE_BFA"
    MTN_MOMO_CMR = "MTN_MOMO_CMR"
    ORANGE_CMR = "ORANGE_CMR"
    MTN_MOMO_CIV = "MTN_MOMO_CIV"
    ORANGE_CIV = "ORANGE_CIV"
    WAVE_CIV = "WAVE_CIV"
    VODACOM_MPESA_COD = "VODACOM_MPESA_COD"
    AIRTEL_COD = "AIRTEL_COD"
    ORANGE_COD = "ORANGE_COD"
    MPESA_ETH = "MPESA_ETH"
    AIRTEL_GAB = "AIRTEL_GAB"
    MTN_MOMO_GHA = "MTN_MOMO_GHA"
    AIRTELTIGO_GHA = "AIRTELTIGO_GHA"
    VODAFONE_GHA = "VODAFONE_GHA"
    MPESA_KEN = "MPESA_KEN"
    MPESA_LSO = "MPESA_LSO"
    AIRTEL_MWI = "AIRTEL_MWI"
    TNM_MWI = "TNM_MWI"
    MOVITEL_MOZ = "MOVITEL_MOZ"
    VODACOM_MOZ = "VODACOM_MOZ"
    AIRTEL_NGA = "AIRTEL_NGA"
    MTN_MOMO_NGA = "MTN_MOMO_NGA"
    AIRTEL_COG = "AIRTEL_COG"
    MTN_MOMO_COG = "MTN_MOMO_COG"
    AIRTEL_RWA = "AIRTEL_RWA"
    MTN_MOMO_RWA = "MTN_MOMO_RWA"
    FREE_SEN = "FREE_SEN"
    ORANGE_SEN = "ORANGE_SEN"
    WAVE_SEN = "WAVE_SEN"
    ORANGE_SLE = "ORANGE_SLE"
    AIRTEL_TZA = "AIRTEL_TZA"
    VODACOM_TZA = "VODACOM_TZA"
    TIGO_TZA = "TIGO_TZA"
    HALOTEL_TZA = "HALOTEL_TZA"
    AIRTEL_OAPI_UGA = "AIRTEL_OAPI_UGA"
    MTN_MOMO_UGA = "MTN_MOMO_UGA"
    AIRTEL_OAPI_ZMB = "AIRTEL_OAPI_ZMB"
    MTN_MOMO_ZMB = "MTN_MOMO_ZMB"
    ZAMTEL_ZMB = "ZAMTEL_ZMB"

    @property
    def country(self) -> Country:
        return _PROVIDER_COUNTRY[self]


_PROVIDER_COUNTRY: Dict[Provider, Country] = {
    Provider.MTN_MOMO_BEN: Country.BEN,
    Provider.MOOV_BEN: Country.BEN,
    Provider.MOOV_BFA: Country.BFA,
    Provider.ORANGE_BFA: Country.BFA,
    Provider.MTN_MOMO_CMR: Country.CMR,
    Provider.ORANGE_CMR: Country.CMR,
    Provider.MTN_MOMO_CIV: Country.CIV,
    Provider.ORANGE_CIV: Country.CIV,
    Provider.WAVE_CIV: Country.CIV,
    Provider.VODACOM_MPESA_COD: Country.COD,
    Provider.AIRTEL_COD: Country.COD,
    Provider.ORANGE_COD: Country.COD,
    Provider.MPESA_ETH: Country.ETH,
    Provider.AIRTEL_GAB: Country.GAB,
    Provider.MTN_MOMO_GHA: Country.GHA,
    Provider.AIRTELTIGO_GHA: Country.GHA,
    Provider.VODAFONE_GHA: Country.GHA,
    Provider.MPESA_KEN: Country.KEN,
    Provider.MPESA_LSO: Country.LSO,
    Provider.AIRTEL_MWI: Country.MWI,
    Provider.TNM_MWI: Country.MWI,
    Provider.MOVITEL_MOZ: Country.MOZ,
    Provider.VODACOM_MOZ: Country.MOZ,
    Provider.AIRTEL_NGA: Country.NGA,
    Provider.MTN_MOMO_NGA: Country.NGA,
    Provider.AIRTEL_COG: Country.COG,
    Provider.MTN_MOMO_COG: Country.COG,
    Provider.AIRTEL_RWA: Country.RWA,
    Provider.MTN_MOMO_RWA: Country.RWA,
    Provider.FREE_SEN: Country.SEN,
    Provider.ORANGE_SEN: Country.SEN,
    Provider.WAVE_SEN: Country.SEN,
    Provider.ORANGE_SLE: Country.SLE,
    Provider.AIRTEL_TZA: Country.TZA,
    Provider.VODACOM_TZA: Country.TZA,
    Provider.TIGO_TZA: Country.TZA,
    Provider.HALOTEL_TZA: Country.TZA,
    Provider.AIRTEL_OAPI_UGA: Country.UGA,
    Provider.MTN_MOMO_UGA: Country.UGA,
    Provider.AIRTEL_OAPI_ZMB: Country.ZMB,
    Provider.MTN_MOMO_ZMB: Country.ZMB,
    Provider.ZAMTEL_ZMB: Country.ZMB,
}

# Every provider must be mapped, and the table must agree with the id suffix
_unmapped = [p.value for p in Provider if p not in _PROVIDER_COUNTRY]
_mismatched = [p.value for p, c in _PROVIDER_COUNTRY.items() if p.value.rsplit("_", 1)[-1] != c.value]
if _unmapped or _mismatched:
    raise RuntimeError(f"Provider/country table out of sync: unmapped={_unmapped} mismatched={_mismatched}")


class FailureCode(str, Enum):
    # Technical failures
    NO_AUTHENTICATION = "NO_AUTHENTICATION"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    AUTHORISATION_ERROR = "AUTHORISATION_ERROR"
    HTTP_SIGNATURE_ERROR = "HTTP_SIGNATURE_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    MISSING_PARAMETER = "MISSING_PARAMETER"
    UNSUPPORTED_PARAMETER = "UNSUPPORTED_PARAMETER"
    INVALID_PARAMETER = "INVALID_PARAMETER"
    AMOUNT_OUT_OF_BOUNDS = "AMOUNT_OUT_OF_BOUNDS"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_PHONE_NUMBER = "INVALID_PHONE_NUMBER"
    INVALID_CURRENCY = "INVALID_CURRENCY"
    INVALID_PROVIDER = "INVALID_PROVIDER"
    DUPLICATE_METADATA_FIELD = "DUPLICATE_METADATA_FIELD"
    DEPOSITS_NOT_ALLOWED = "DEPOSITS_NOT_ALLOWED"
    PAYOUTS_NOT_ALLOWED = "PAYOUTS_NOT_ALLOWED"
    REFUNDS_NOT_ALLOWED = "REFUNDS_NOT_ALLOWED"
    PROVIDER_TEMPORARILY_UNAVAILABLE = "PROVIDER_TEMPORARILY_UNAVAILABLE"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    # Transaction failures
    PAYMENT_NOT_APPROVED = "PAYMENT_NOT_APPROVED"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"
    PAYMENT_IN_PROGRESS = "PAYMENT_IN_PROGRESS"
    PAYER_NOT_FOUND = "PAYER_NOT_FOUND"
    RECIPIENT_NOT_FOUND = "RECIPIENT_NOT_FOUND"
    MANUALLY_CANCELLED = "MANUALLY_CANCELLED"
    PAWAPAY_WALLET_OUT_OF_FUNDS = "PAWAPAY_WALLET_OUT_OF_FUNDS"
    DEPOSIT_ALREADY_REFUNDED = "DEPOSIT_ALREADY_REFUNDED"
    AMOUNT_TOO_LARGE = "AMOUNT_TOO_LARGE"
    REFUND_IN_PROGRESS = "REFUND_IN_PROGRESS"
    WALLET_LIMIT_REACHED = "WALLET_LIMIT_REACHED"
    UNSPECIFIED_FAILURE = "UNSPECIFIED_FAILURE"

    @classmethod
    def parse(cls, value) -> "FailureCode":
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN_ERROR

    @property
    def http_status_code(self) -> int:
        return _FAILURE_HTTP_STATUS.get(self, 200)


# Codes missing here are reported with HTTP 200 by the gateway
_FAILURE_HTTP_STATUS: Dict[FailureCode, int] = {
    FailureCode.NO_AUTHENTICATION: 401,
    FailureCode.AUTHENTICATION_ERROR: 403,
    FailureCode.AUTHORISATION_ERROR: 403,
    FailureCode.HTTP_SIGNATURE_ERROR: 403,
    FailureCode.INVALID_INPUT: 400,
    FailureCode.MISSING_PARAMETER: 400,
    FailureCode.UNSUPPORTED_PARAMETER: 400,
    FailureCode.INVALID_PARAMETER: 400,
    FailureCode.DUPLICATE_METADATA_FIELD: 400,
    FailureCode.DEPOSITS_NOT_ALLOWED: 403,
    FailureCode.PAYOUTS_NOT_ALLOWED: 403,
    FailureCode.REFUNDS_NOT_ALLOWED: 403,
    FailureCode.PROVIDER_TEMPORARILY_UNAVAILABLE: 503,
    FailureCode.UNKNOWN_ERROR: 500,
    FailureCode.UNSPECIFIED_FAILURE: 500,
}


class TransactionStatus(str, Enum):
    # Initiation outcomes
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    DUPLICATE_IGNORED = "DUPLICATE_IGNORED"
    # Intermediate
    SUBMITTED = "SUBMITTED"
    ENQUEUED = "ENQUEUED"
    PROCESSING = "PROCESSING"
    IN_RECONCILIATION = "IN_RECONCILIATION"
    # Terminal
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    # Lookup outcomes
    FOUND = "FOUND"
    NOT_FOUND = "NOT_FOUND"


class Endpoint(str, Enum):
    PREDICT_PROVIDER = "/predict-provider"
    PAYMENT_PAGE = "/paymentpage"
    DEPOSITS = "/deposits"
    DEPOSIT_STATUS = "/deposits/{depositId}"

    def build_path(self, **params: str) -> str:
        path = self.value
        for key, value in params.items():
            path = path.replace("{" + key + "}", quote(str(value), safe=""))
        if "{" in path:
            raise ValueError(f"Unresolved path parameter in {path}")
        return path
