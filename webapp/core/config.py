
import os
from functools import lru_cache


class Settings:
    """Simple settings loader using environment variables.

    Values are read once per process through get_settings() and never change.
    """

    service_name: str = "webapp"
    version: str = "1.0.0"
    # Always listen on every interface so the orchestrator can reach the task
    host: str = "0.0.0.0"

    def __init__(self) -> None:
        # Empty values fall back to the defaults, same as an unset variable
        self.port: int = int(os.getenv("PORT") or "3000")
        self.environment: str = os.getenv("NODE_ENV") or "development"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
