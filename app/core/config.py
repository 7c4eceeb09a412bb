from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

DESKTOP_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Budgets (milliseconds). Each one must stay shorter than the one above it.
    request_timeout_ms: int = 20_000
    navigation_timeout_ms: int = 15_000
    network_idle_timeout_ms: int = 5_000
    navigation_attempts: int = 2

    # Browser
    user_agent: str = DESKTOP_USER_AGENT
    viewport_width: int = 1280
    viewport_height: int = 720
    # --no-sandbox is required when running as root inside a container.
    browser_args: list[str] = [
        "--no-sandbox",
        "--disable-setuid-sandbox",
        "--disable-dev-shm-usage",
        "--disable-gpu",
        "--no-first-run",
        "--no-zygote",
        "--single-process",
    ]

    # HTTP
    cache_control: str = "public, s-maxage=3600, stale-while-revalidate=86400"

    # Logging
    log_level: str = "INFO"


settings = Settings()
