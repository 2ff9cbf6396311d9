"""
Application configuration loader and it handles:
- Environment variables
- Provider selection and credential
- Model configuration
- Outbound timeouts

And, the main purpose:
Central place for system configuration.
"""


from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # LLM
    LLM_PROVIDER: str = "gemini"  # gemini | mock (for no-key dev)
    API_KEY: str = ""
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    LLM_MODEL: str = "gemini-2.5-flash"

    # Outbound call limits
    LLM_TIMEOUT_SECONDS: float = 40.0
    LLM_CONNECT_TIMEOUT_SECONDS: float = 10.0

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
