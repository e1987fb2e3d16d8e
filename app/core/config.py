from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env from the project root so it loads regardless of cwd
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(str(_ENV_FILE), ".env", "../.env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Upstream scheduling API
    schedule_api_url: str = "http://localhost:3333"
    provider_id: str = ""
    api_token: str = ""
    request_timeout_seconds: float = 10.0

    # All appointment datetimes are shown in this timezone
    timezone: str = "America/Sao_Paulo"
    locale: str = "pt_BR"

    # Schedule panel rules
    morning_cutoff_hour: int = 12  # appointments before this hour are "morning"
    # Re-evaluate the next appointment against the clock; 0 disables the tick
    next_appointment_tick_seconds: int = 0

    # CORS
    cors_origins: str = "http://localhost:3000"

    # Env
    env: str = "development"

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def auth_configured(self) -> bool:
        return bool(self.api_token)


settings = Settings()
