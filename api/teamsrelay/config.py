from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Teams incoming webhook / workflow URL. Left unvalidated: an empty value
    # surfaces as a delivery failure in the logs.
    teams_webhook_url: str = ""

    app_name: str = "Chromatic Teams Relay"
    debug: bool = False
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()


def get_settings() -> Settings:
    """Re-read settings from the environment; used per request."""
    return Settings()
