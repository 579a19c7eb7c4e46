"""Configuration settings for the RobCo qualification service."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Provider
    openai_api_key: str = ""  # empty means stub mode
    openai_model: str = "gpt-4.1-mini"
    openai_base_url: str = "https://api.openai.com/v1"
    provider_timeout: Optional[float] = None  # seconds; None disables the timeout

    # Evidence
    evidence_provider: str = "stub"  # "stub" or "website"
    max_evidence_chars: int = 20000
    evidence_pages: list[str] = ["", "about", "pricing", "careers"]
    max_page_chars: int = 5000

    # HTTP Client Settings (website evidence)
    user_agent: str = "RobCoQualifier/1.0 (+contact@example.com)"
    connect_timeout: float = 10.0
    read_timeout: float = 30.0

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
