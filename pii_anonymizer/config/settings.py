from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    min_text_length: int = 10

    anonymize_names: bool = True
    anonymize_emails: bool = True
    anonymize_phones: bool = True
    anonymize_ids: bool = True
    anonymize_cards: bool = True
    anonymize_addresses: bool = True
    anonymize_companies: bool = False
    anonymize_locations: bool = False
