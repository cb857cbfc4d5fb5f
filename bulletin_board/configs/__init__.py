from .settings import MAX_MSG, Settings, get_settings

__all__ = ["MAX_MSG", "Settings", "get_settings"]
