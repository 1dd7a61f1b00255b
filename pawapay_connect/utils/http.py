import httpx
from tenacity import retry, stop_after_attempt, wait_fixed, retry_if_exception

RETRYABLE_STATUS = {429, 500, 502, 503, 504}


def client(timeout_sec: float = 30, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=timeout_sec, transport=transport)


def _is_retryable(exc: BaseException) -> bool:
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in RETRYABLE_STATUS
    return isinstance(exc, httpx.TransportError)


def retry_policy(max_attempts: int = 3, sleep_ms: int = 100):
    # Fixed delay between attempts; 4xx responses are final
    return retry(
        stop=stop_after_attempt(max(1, max_attempts)),
        wait=wait_fixed(max(0, sleep_ms) / 1000),
        retry=retry_if_exception(_is_retryable),
        reraise=True,
    )
