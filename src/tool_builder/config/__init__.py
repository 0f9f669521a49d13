from tool_builder.config.log_setup import configure_logging
from tool_builder.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
