from santa.core.config import Settings, load_settings
from santa.core.logging import setup_logging


def configure() -> Settings:
    settings = load_settings()
    setup_logging(settings)
    return settings


__all__ = ["Settings", "configure", "load_settings", "setup_logging"]
