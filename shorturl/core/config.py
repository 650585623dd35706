from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    PROJECT_NAME: str = "Short URL Codec"

    # Codec configs (Env Vars - unset alphabets fall back to the built-in defaults)
    CODEC_ALPHABET: Optional[str] = None
    CODEC_SHUFFLED_ALPHABET: Optional[str] = None
    CODEC_USE_SHUFFLED_ALPHABET: bool = False
    CODEC_OFFSET: int = 0

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
