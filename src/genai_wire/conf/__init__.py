from .defaults import DEFAULTS
from .settings import CONFIG_MODULE_ENVVAR, NAMESPACE, Settings

settings = Settings()
settings.update_from_envvar()

__all__ = [
    "DEFAULTS",
    "CONFIG_MODULE_ENVVAR",
    "NAMESPACE",
    "Settings",
    "settings",
]
