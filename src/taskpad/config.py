"""Configuration for taskpad.

Settings Management:
    The module provides both a global default and context-based settings:

    1. Global default (simple cases):
        set_settings(my_settings)
        settings = get_settings()

    2. Context-based (tests, embedding):
        with SettingsContext(my_settings):
            settings = get_settings()  # Returns my_settings

Settings Loading Priority (highest to lowest):
    1. Constructor arguments
    2. Environment variables (TASKPAD_* prefix)
    3. Project config (./.taskpad/settings.json)
    4. User config (~/.taskpad/settings.json)
    5. .env file
    6. Default values

Only settings are process-wide. The task store is always constructed
explicitly and handed to the editor view.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Generator, Literal, Tuple, Type

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from taskpad.logging import Loggers

__all__ = [
    "Settings",
    "SettingsContext",
    "get_settings",
    "set_settings",
    "reload_settings",
]

APP_NAME = "taskpad"

logger = Loggers.config()


def _get_json_config_source(
    settings_cls: Type[BaseSettings],
    json_file: Path,
) -> PydanticBaseSettingsSource | None:
    """Create a JSON config source if the file exists.

    Args:
        settings_cls: The settings class
        json_file: Path to JSON config file

    Returns:
        JsonConfigSettingsSource if file exists, None otherwise
    """
    if not json_file.exists():
        return None
    return JsonConfigSettingsSource(settings_cls, json_file=json_file)


class Settings(BaseSettings):
    """Settings for the taskpad terminal application.

    Settings are loaded from (in order of precedence):
    1. Constructor arguments
    2. Environment variables (TASKPAD_ prefix)
    3. Project config (./.taskpad/settings.json)
    4. User config (~/.taskpad/settings.json)
    5. .env file
    6. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="TASKPAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(
        default=APP_NAME,
        title="App Name",
        description="Application name shown in the banner",
    )

    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        title="Log Level",
        description="Logging verbosity level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        title="Log Format",
        description="Log output format (console for dev, json for production)",
    )
    log_file: Path | None = Field(
        default=None,
        title="Log File",
        description="Append logs to this file instead of stderr",
    )

    prompt: str = Field(
        default="taskpad> ",
        title="Prompt",
        description="Input prompt shown in the terminal",
    )
    show_form_after_edit: bool = Field(
        default=True,
        title="Show Form After Edit",
        description="Render the form panel when /edit loads a task",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Layer JSON config files between env vars and .env.

        Note: JSON sources are only included if the files exist.
        """
        sources: list[PydanticBaseSettingsSource] = [
            init_settings,
            env_settings,
        ]

        project_json = _get_json_config_source(
            settings_cls,
            Path.cwd() / f".{APP_NAME}" / "settings.json",
        )
        if project_json:
            sources.append(project_json)

        user_json = _get_json_config_source(
            settings_cls,
            Path.home() / f".{APP_NAME}" / "settings.json",
        )
        if user_json:
            sources.append(user_json)

        sources.append(dotenv_settings)

        return tuple(sources)


# Context variable for settings (takes precedence over the global default)
_settings_context: ContextVar[Settings | None] = ContextVar(
    "settings_context", default=None
)

_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get the current settings instance.

    Resolution order:
    1. Context variable (set via SettingsContext)
    2. Global default (set via set_settings)
    3. Fresh Settings instance (created on first access)
    """
    context_settings = _settings_context.get()
    if context_settings is not None:
        return context_settings

    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings_instance
    _settings_instance = settings


@contextmanager
def SettingsContext(settings: Settings) -> Generator[Settings, None, None]:
    """Context manager for isolated settings.

    Example:
        with SettingsContext(test_settings) as s:
            app = TaskpadApp()  # picks up test_settings

    Args:
        settings: Settings to use within the context

    Yields:
        The settings instance
    """
    token = _settings_context.set(settings)
    try:
        yield settings
    finally:
        _settings_context.reset(token)


def reload_settings() -> Settings:
    """Drop the cached global settings and build a fresh instance."""
    global _settings_instance
    _settings_instance = None
    _settings_context.set(None)
    settings = get_settings()
    logger.debug("settings_reloaded", log_level=settings.log_level)
    return settings
