from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "PawapayConnect"
    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # sandbox | production
    PAWAPAY_ENVIRONMENT: str = "sandbox"
    PAWAPAY_SANDBOX_URL: str = "https://api.sandbox.pawapay.io/v2"
    PAWAPAY_PRODUCTION_URL: str = "https://api.pawapay.io/v2"
    PAWAPAY_API_TOKEN: str = ""

    # Transport: seconds / attempts / milliseconds between attempts
    PAWAPAY_TIMEOUT: int = 30
    PAWAPAY_RETRY_TIMES: int = 3
    PAWAPAY_RETRY_SLEEP: int = 100

settings = Settings()
