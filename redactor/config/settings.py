from pydantic_settings import BaseSettings, SettingsConfigDict

STORAGE_BACKENDS = ("s3", "memory")


class ConfigurationError(Exception):
    """Raised when configuration values are missing or unusable."""


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    storage_backend: str = "s3"
    ingest_bucket: str = ""
    redacted_bucket: str = ""
    aws_region: str = "us-east-1"
    aws_endpoint_url: str | None = None

    key_prefix: str = "text"

    poll_max_attempts: int = 20
    poll_initial_delay_seconds: float = 1.0
    poll_max_delay_seconds: float = 10.0

    download_file_name: str = "redacted_file.txt"
    allowed_file_types: list[str] = ["txt"]

    def require_runtime_config(self) -> None:
        """Raise ConfigurationError for settings the app cannot run with.

        Checked before any storage client is created, so the user sees the
        problem without a network call being made.
        """
        missing = [
            env_name
            for env_name, value in (
                ("INGEST_BUCKET", self.ingest_bucket),
                ("REDACTED_BUCKET", self.redacted_bucket),
            )
            if not value.strip()
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}"
            )
        if self.storage_backend.lower() not in STORAGE_BACKENDS:
            raise ConfigurationError(
                f"Unknown STORAGE_BACKEND '{self.storage_backend}'. "
                f"Choose from: {list(STORAGE_BACKENDS)}"
            )
        if self.poll_max_attempts < 1:
            raise ConfigurationError("POLL_MAX_ATTEMPTS must be at least 1")
        if self.poll_initial_delay_seconds <= 0 or self.poll_max_delay_seconds <= 0:
            raise ConfigurationError(
                "POLL_INITIAL_DELAY_SECONDS and POLL_MAX_DELAY_SECONDS must be positive"
            )
