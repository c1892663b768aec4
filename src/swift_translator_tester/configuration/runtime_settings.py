"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_SITE_URL = "https://www.swifttranslator.com/"
DEFAULT_INPUT_LABEL = "Input Your Singlish Text Here."
DEFAULT_OUTPUT_SELECTOR = "div.w-full.h-80.p-3.rounded-lg.ring-1.ring-slate-300.whitespace-pre-wrap"
DEFAULT_SOURCE_INPUT_SELECTOR = "textarea"

DEFAULT_WORKBOOK_PATH = "test_data/test_cases.xlsx"
DEFAULT_SHEET_NAME = "Test Cases"

SUPPORTED_BROWSER_ENGINES: tuple[str, ...] = ("chromium", "firefox", "webkit")


@dataclass(frozen=True)
class SiteSettings:
    """Target page address and the selectors the page driver depends on."""

    url: str = DEFAULT_SITE_URL
    input_label: str = DEFAULT_INPUT_LABEL
    output_selector: str = DEFAULT_OUTPUT_SELECTOR
    source_input_selector: str = DEFAULT_SOURCE_INPUT_SELECTOR


@dataclass(frozen=True)
class TimingSettings:
    """Dwell times and output polling bounds, in milliseconds."""

    page_load_ms: int = 2000
    after_clear_ms: int = 1000
    translation_settle_ms: int = 3000
    between_tests_ms: int = 2000
    output_timeout_ms: int = 10000
    output_poll_interval_ms: int = 250


@dataclass(frozen=True)
class WorkbookSettings:
    """Location of the test-case workbook."""

    path: Path
    sheet_name: str = DEFAULT_SHEET_NAME


@dataclass(frozen=True)
class BrowserSettings:
    """Playwright browser launch options."""

    engine: str = "chromium"
    headless: bool = True


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    site: SiteSettings
    timing: TimingSettings
    workbook: WorkbookSettings
    browser: BrowserSettings
