import pytest

from pawapay_connect.exceptions import ConfigurationError
from pawapay_connect.gateway.config import GatewayConfig
from pawapay_connect.settings import Settings


def test_config_from_settings(monkeypatch):
    monkeypatch.setenv("PAWAPAY_API_TOKEN", "tok")
    monkeypatch.setenv("PAWAPAY_ENVIRONMENT", "Production")
    monkeypatch.setenv("PAWAPAY_RETRY_TIMES", "5")

    config = GatewayConfig.from_settings(Settings())

    assert config.environment == "production"
    assert config.base_url == "https://api.pawapay.io/v2"
    assert config.retry_times == 5
    assert config.headers() == {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "Authorization": "Bearer tok",
    }
    assert config.url_for("/paymentpage") == "https://api.pawapay.io/v2/paymentpage"


def test_missing_token_is_a_configuration_error(monkeypatch):
    monkeypatch.setenv("PAWAPAY_API_TOKEN", "  ")
    with pytest.raises(ConfigurationError):
        GatewayConfig.from_settings(Settings())


def test_unknown_environment_is_rejected(monkeypatch):
    monkeypatch.setenv("PAWAPAY_API_TOKEN", "tok")
    monkeypatch.setenv("PAWAPAY_ENVIRONMENT", "staging")
    with pytest.raises(ConfigurationError):
        GatewayConfig.from_settings(Settings())
