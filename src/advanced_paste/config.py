"""Service configuration and env handling."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """Base settings with common env config."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class AdvancedPasteSettings(BaseAppSettings):
    model_config = SettingsConfigDict(env_prefix="ADVANCED_PASTE_")

    host: str = "127.0.0.1"
    port: int = 8003
    base_url: str = "http://localhost:11434/v1/"
    model: str = "phi3"
    api_key: str = "ollama"
    # Reported in usage telemetry; differs from the model actually called.
    telemetry_model_name: str = "gpt-3.5-turbo-instruct"
    credential_resource: str = "https://platform.openai.com/api-keys"
    credential_username: str = "PowerToys_AdvancedPaste_OpenAIKey"
    mock: bool = False
    json_logs: bool = True
