from typing import Any, Dict, Optional


class PawapayError(Exception):
    """Base class for every error raised by the gateway client."""

    code: str = "PAWAPAY_ERROR"

    def __init__(self, message: str = "", data: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.data = data or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "code": self.code, "data": self.data}


class ConfigurationError(PawapayError):
    code = "CONFIGURATION_ERROR"


class ValidationError(PawapayError, ValueError):
    """Request data rejected before anything is sent to the gateway."""

    code = "VALIDATION_ERROR"


class MalformedResponse(PawapayError):
    """The gateway body is not a JSON object."""

    code = "MALFORMED_RESPONSE"


class UnrecognizedResponseFormat(PawapayError):
    """The gateway body is valid JSON but matches none of the known shapes."""

    code = "UNRECOGNIZED_RESPONSE_FORMAT"


class TransportError(PawapayError):
    """
    Network failure or non-2xx response.
    status_code is None when no response was received at all.
    """

    code = "TRANSPORT_ERROR"

    def __init__(self, message: str = "", status_code: Optional[int] = None, body: bytes = b""):
        super().__init__(message, {"status_code": status_code})
        self.status_code = status_code
        self.body = body or b""

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404
