from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Empty key is a valid configuration: plans come from the built-in fallback
    google_gemini_api_key: str = ""
    gemini_api_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_default_model: str = "models/gemini-pro"
    gemini_model_family: str = "gemini"
    gemini_request_timeout_seconds: int = 90
    cors_origins: str = "http://localhost:5173,http://localhost:8081,http://localhost:19006"
    enable_hsts: bool = False  # Set True in production behind HTTPS
    debug: bool = False

    # slowapi limit strings
    default_rate_limit: str = "200/minute"
    plan_generate_rate_limit: str = "10/minute"

    @property
    def gemini_configured(self) -> bool:
        """True if a Gemini API key is set (whitespace-only counts as unset)."""
        return bool(self.google_gemini_api_key.strip())


settings = Settings()
