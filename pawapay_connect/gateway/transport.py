import logging
from typing import Any, Dict, Optional

import httpx

from ..exceptions import TransportError
from ..utils.http import client, retry_policy
from ..utils.security import redact_headers
from .base import RawResponse
from .config import GatewayConfig

logger = logging.getLogger("pawapay_connect.transport")


class HttpTransport:
    """
    httpx-backed transport. Timeout, retry count and the delay between
    attempts all come from GatewayConfig.
    """

    def __init__(self, config: GatewayConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        # Injectable for tests (httpx.MockTransport)
        self._transport = transport
        self._send = retry_policy(config.retry_times, config.retry_sleep)(self._send_once)

    async def _send_once(self, method: str, url: str, json_body: Optional[Dict[str, Any]]) -> httpx.Response:
        async with client(self.config.timeout, self._transport) as c:
            resp = await c.request(method, url, json=json_body, headers=self.config.headers())
            resp.raise_for_status()
            return resp

    async def execute(self, method: str, path: str, json_body: Optional[Dict[str, Any]] = None) -> RawResponse:
        url = self.config.url_for(path)
        logger.debug("%s %s headers=%s", method, url, redact_headers(self.config.headers()))
        try:
            resp = await self._send(method, url, json_body)
        except httpx.HTTPStatusError as e:
            logger.warning("%s %s -> HTTP %s", method, url, e.response.status_code)
            raise TransportError(
                f"HTTP {e.response.status_code} from {method} {path}",
                status_code=e.response.status_code,
                body=e.response.content,
            ) from e
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise TransportError(f"Gateway unreachable: {e}") from e

        logger.debug("%s %s -> HTTP %s", method, url, resp.status_code)
        return RawResponse(status_code=resp.status_code, body=resp.content)
