"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, default_configuration, load_configuration
from .runtime_settings import (
    DEFAULT_SHEET_NAME,
    BrowserSettings,
    Configuration,
    SiteSettings,
    TimingSettings,
    WorkbookSettings,
)

__all__ = [
    "BrowserSettings",
    "Configuration",
    "SiteSettings",
    "TimingSettings",
    "WorkbookSettings",
    "ConfigurationError",
    "default_configuration",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_SHEET_NAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
