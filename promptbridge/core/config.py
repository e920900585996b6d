from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    DATABASE_URL: str
    DALL_E_API_KEY: str
    STABLE_DIFFUSION_API_KEY: str
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 3000

    # 외부 API 호출 타임아웃(초)
    UPSTREAM_TIMEOUT: float = 120.0

    # 외부 API 엔드포인트 / 모델
    OPENAI_IMAGE_URL: str = "https://api.openai.com/v1/images/generations"
    OPENAI_CHAT_URL: str = "https://api.openai.com/v1/chat/completions"
    STABLE_DIFFUSION_URL: str = "https://stablediffusionapi.com/api/v3/text2img"
    MODELSLAB_REALTIME_URL: str = "https://modelslab.com/api/v6/realtime/text2img"
    OPENAI_IMAGE_MODEL: str = "dall-e-3"
    OPENAI_CHAT_MODEL: str = "gpt-4-turbo-preview"

    class Config:
        env_file = ".env"
        extra = "ignore"

@lru_cache()
def get_settings():
    return Settings()
