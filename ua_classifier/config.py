# ua_classifier/config.py

from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Catalog labels
    locale: str = "en"
    text_domain: str = "ua_classifier"
    locale_dir: Optional[str] = None

    # Classification memo (bounded, one entry per distinct user agent)
    classification_cache_size: int = 10000

    # HTTP service
    host: str = "0.0.0.0"
    port: int = 5000

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "UA_"


settings = Settings()
