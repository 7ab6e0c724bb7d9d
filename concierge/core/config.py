from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ASSISTANT_NAME: str = "Appointment Concierge"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    AVAILABILITY_BUSINESS_DAYS: int = 21
    AVAILABILITY_TIMES: list[str] = ["09:00", "11:30", "14:00", "16:00"]
    ALTERNATIVE_SLOT_LIMIT: int = 3

    SESSION_HISTORY_LIMIT: int = 200


settings = Settings()
