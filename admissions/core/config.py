from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    STORE_PROVIDER: str | None = None  # "memory" | "json"; defaults by ENV when unset
    DATA_DIR: str = "./data/applications"

    UPLOAD_DIR: str = "./data/uploads"
    PUBLIC_UPLOAD_BASE_URL: str | None = None
    MAX_DOCUMENT_BYTES: int = 10 * 1024 * 1024

    SUBMISSION_ENDPOINT: str | None = None  # POST /api/applications; in-process when unset
    SUBMISSION_TIMEOUT_SECONDS: float = 10.0

    DEMO_USER_ID: str | None = None
    DEMO_USER_EMAIL: str | None = None


settings = Settings()
