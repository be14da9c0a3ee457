from pydantic_settings import BaseSettings, SettingsConfigDict


class GenAIConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TEXTSQL_GENAI__",
        env_file=".env",
        extra="ignore",
    )

    api_key: str = ""
    # Gemini's OpenAI-compatible endpoint; any chat-completions server works.
    base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    model: str = "gemini-2.0-flash"
    temperature: float = 0.0

    @property
    def configured(self) -> bool:
        return bool(self.api_key)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    genai: GenAIConfig = GenAIConfig()
    static_dir: str = "static"


settings = Settings()
