"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_SHEET_NAME,
    DEFAULT_WORKBOOK_PATH,
    SUPPORTED_BROWSER_ENGINES,
    BrowserSettings,
    Configuration,
    SiteSettings,
    TimingSettings,
    WorkbookSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def default_configuration(base_path: Path | str | None = None) -> Configuration:
    """Return the built-in configuration, resolving the workbook path against base_path."""
    base = Path(base_path) if base_path is not None else Path.cwd()
    return Configuration(
        path=None,
        site=SiteSettings(),
        timing=TimingSettings(),
        workbook=WorkbookSettings(path=_resolve_path(base, DEFAULT_WORKBOOK_PATH)),
        browser=BrowserSettings(),
    )


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    return Configuration(
        path=path,
        site=_parse_site_section(parsed.get("site")),
        timing=_parse_timing_section(parsed.get("timing")),
        workbook=_parse_workbook_section(parsed.get("workbook"), base_path),
        browser=_parse_browser_section(parsed.get("browser")),
    )


def _parse_site_section(value: Any) -> SiteSettings:
    section = _optional_mapping(value, "site")
    defaults = SiteSettings()
    return SiteSettings(
        url=_string_or_default(section.get("url"), "site.url", defaults.url),
        input_label=_string_or_default(
            section.get("input_label"), "site.input_label", defaults.input_label
        ),
        output_selector=_string_or_default(
            section.get("output_selector"), "site.output_selector", defaults.output_selector
        ),
        source_input_selector=_string_or_default(
            section.get("source_input_selector"),
            "site.source_input_selector",
            defaults.source_input_selector,
        ),
    )


def _parse_timing_section(value: Any) -> TimingSettings:
    section = _optional_mapping(value, "timing")
    defaults = TimingSettings()
    durations = {
        name: _require_non_negative_int(
            section.get(name, getattr(defaults, name)), f"timing.{name}"
        )
        for name in (
            "page_load_ms",
            "after_clear_ms",
            "translation_settle_ms",
            "between_tests_ms",
        )
    }
    output_timeout_ms = _require_positive_int(
        section.get("output_timeout_ms", defaults.output_timeout_ms), "timing.output_timeout_ms"
    )
    output_poll_interval_ms = _require_positive_int(
        section.get("output_poll_interval_ms", defaults.output_poll_interval_ms),
        "timing.output_poll_interval_ms",
    )
    return TimingSettings(
        output_timeout_ms=output_timeout_ms,
        output_poll_interval_ms=output_poll_interval_ms,
        **durations,
    )


def _parse_workbook_section(value: Any, base_path: Path) -> WorkbookSettings:
    section = _optional_mapping(value, "workbook")
    raw_path = _string_or_default(section.get("path"), "workbook.path", DEFAULT_WORKBOOK_PATH)
    sheet_name = _string_or_default(
        section.get("sheet_name"), "workbook.sheet_name", DEFAULT_SHEET_NAME
    )
    return WorkbookSettings(path=_resolve_path(base_path, raw_path), sheet_name=sheet_name)


def _parse_browser_section(value: Any) -> BrowserSettings:
    section = _optional_mapping(value, "browser")
    defaults = BrowserSettings()
    engine = _string_or_default(section.get("engine"), "browser.engine", defaults.engine).lower()
    if engine not in SUPPORTED_BROWSER_ENGINES:
        supported = ", ".join(SUPPORTED_BROWSER_ENGINES)
        raise ConfigurationError(f"browser.engine must be one of: {supported}.")
    headless = section.get("headless", defaults.headless)
    if not isinstance(headless, bool):
        raise ConfigurationError("browser.headless must be a boolean.")
    return BrowserSettings(engine=engine, headless=headless)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _string_or_default(value: Any, field_name: str, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    value = _require_non_negative_int(value, field_name)
    if value == 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
