import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel

# Load environment variables
load_dotenv()

DEFAULT_FEED_URL = "https://api.nasa.gov/neo/rest/v1/feed"


class Settings(BaseModel):
    nasa_api_key: str = "DEMO_KEY"
    nasa_feed_url: str = DEFAULT_FEED_URL
    host: str = "localhost"
    port: int = 3000
    log_level: str = "info"
    cors_origins: List[str] = ["http://localhost:5173"]
    request_timeout: float = 30.0


def load_settings() -> Settings:
    """Build Settings from the process environment (and .env, if present)."""
    origins = os.getenv("CORS_ORIGINS", "http://localhost:5173")
    return Settings(
        nasa_api_key=os.getenv("NASA_API_KEY") or "DEMO_KEY",
        nasa_feed_url=os.getenv("NASA_FEED_URL", DEFAULT_FEED_URL),
        host=os.getenv("HOST", "localhost"),
        port=int(os.getenv("PORT", "3000")),
        log_level=os.getenv("LOG_LEVEL", "info"),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        request_timeout=float(os.getenv("REQUEST_TIMEOUT", "30")),
    )


@lru_cache()
def get_settings() -> Settings:
    return load_settings()
