from typing import Dict, Mapping

SENSITIVE_HEADERS = {"authorization", "x-api-key"}


def redact_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    return {k: ("REDACTED" if k.lower() in SENSITIVE_HEADERS else v) for k, v in (headers or {}).items()}


def mask_phone(phone: str | None) -> str:
    """Keep the country prefix and the last two digits: 260763456789 -> 260*******89."""
    s = str(phone or "")
    if len(s) <= 5:
        return "*" * len(s)
    return s[:3] + "*" * (len(s) - 5) + s[-2:]
