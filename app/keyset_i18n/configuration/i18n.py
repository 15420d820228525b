"""i18n engine settings."""

from typing import Any

from pydantic import Field, field_validator

from keyset_i18n.configuration.base import FeatureSettings


class I18NSettings(FeatureSettings):
    """Runtime configuration for the i18n engine.

    Environment Variables:
        I18N_DEFAULT_LANG: Language activated when the engine is created
            (default: none, lookups return keys until set_lang() is called)
        I18N_WARN_UNCONFIGURED_PLURALIZATION: Log a diagnostic when a language
            without a pluralization rule falls back to the default rule
            (default: True)

    Example:
        ```python
        from keyset_i18n.configuration import get_settings

        settings = get_settings()

        if settings.i18n.DEFAULT_LANG:
            engine.set_lang(settings.i18n.DEFAULT_LANG)
        ```
    """

    DEFAULT_LANG: str | None = Field(default=None, alias="I18N_DEFAULT_LANG")
    WARN_UNCONFIGURED_PLURALIZATION: bool = Field(
        default=True,
        alias="I18N_WARN_UNCONFIGURED_PLURALIZATION",
        description="Log when pluralization falls back to the default rule",
    )

    @field_validator("DEFAULT_LANG", mode="before")
    @classmethod
    def validate_default_lang(cls, v: Any) -> Any:
        """Treat an empty language identifier as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v
