from dataclasses import dataclass, field
from typing import Dict

from ..exceptions import ConfigurationError
from ..settings import Settings, settings as default_settings

ENVIRONMENTS = ("sandbox", "production")
DEFAULT_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


@dataclass(frozen=True)
class GatewayConfig:
    sandbox_url: str
    production_url: str
    token: str
    environment: str = "sandbox"
    timeout: int = 30
    retry_times: int = 3
    retry_sleep: int = 100
    default_headers: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))

    @classmethod
    def from_settings(cls, s: Settings = None) -> "GatewayConfig":
        s = s or default_settings
        environment = (s.PAWAPAY_ENVIRONMENT or "sandbox").strip().lower()
        if environment not in ENVIRONMENTS:
            raise ConfigurationError(
                f"Invalid PAWAPAY_ENVIRONMENT={environment!r}. Allowed: {', '.join(ENVIRONMENTS)}"
            )
        token = (s.PAWAPAY_API_TOKEN or "").strip()
        if not token:
            raise ConfigurationError("PAWAPAY_API_TOKEN is not set")
        return cls(
            sandbox_url=s.PAWAPAY_SANDBOX_URL,
            production_url=s.PAWAPAY_PRODUCTION_URL,
            token=token,
            environment=environment,
            timeout=s.PAWAPAY_TIMEOUT,
            retry_times=s.PAWAPAY_RETRY_TIMES,
            retry_sleep=s.PAWAPAY_RETRY_SLEEP,
        )

    @property
    def base_url(self) -> str:
        url = self.production_url if self.environment == "production" else self.sandbox_url
        return url.rstrip("/")

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def headers(self) -> Dict[str, str]:
        return {**self.default_headers, "Authorization": f"Bearer {self.token}"}
