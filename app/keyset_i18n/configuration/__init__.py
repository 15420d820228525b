"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings. Nothing is
read from the environment until get_settings() is first called.

Exports:
    get_settings: Cached Settings accessor (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18NSettings: i18n engine settings class

Example:
    ```python
    from keyset_i18n.configuration import get_settings

    settings = get_settings()
    default_lang = settings.i18n.DEFAULT_LANG
    ```
"""

from keyset_i18n.configuration.i18n import I18NSettings
from keyset_i18n.configuration.settings import Settings, get_settings

__all__ = ["get_settings", "Settings", "I18NSettings"]
