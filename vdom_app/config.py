import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    log_level: str


def get_settings() -> Settings:
    """
    Read server settings from the environment:
      VDOM_HOST (default 127.0.0.1), VDOM_PORT (default 3030), VDOM_LOG_LEVEL (default INFO)
    """
    return Settings(
        host=os.environ.get("VDOM_HOST", "127.0.0.1"),
        port=int(os.environ.get("VDOM_PORT", "3030")),
        log_level=os.environ.get("VDOM_LOG_LEVEL", "INFO").upper(),
    )
