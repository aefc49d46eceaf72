from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Paygate"
    debug: bool = False
    port: int = 3000

    # CORS
    frontend_url: str = "http://localhost:5173"
    allowed_origins: list[str] = []

    # Paystack
    paystack_secret_key: str = ""
    paystack_base_url: str = "https://api.paystack.co"
    gateway_timeout_seconds: float = 10.0
    gateway_mode: str = "paystack"  # env: GATEWAY_MODE, "paystack" or "fake"

    # Redirect flow falls back to this when the client sends no callback_url
    default_callback_url: str = ""

    # First header present wins
    webhook_signature_headers: list[str] = [
        "x-paystack-signature",
        "x-gateway-signature",
    ]

    @property
    def cors_origins(self) -> list[str]:
        return [self.frontend_url, *self.allowed_origins]


@lru_cache
def get_settings() -> Settings:
    return Settings()
