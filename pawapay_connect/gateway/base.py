from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    body: bytes = b""


class Transport(Protocol):
    """
    Executes one request against the gateway.
    Non-2xx answers and network failures raise TransportError;
    retries, timeouts and backoff are the transport's business.
    """

    async def execute(self, method: str, path: str, json_body: Optional[Dict[str, Any]] = None) -> RawResponse:
        ...
