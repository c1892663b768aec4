"""Playwright browser lifecycle for the translator page object."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from playwright.sync_api import sync_playwright

from swift_translator_tester.configuration.runtime_settings import Configuration

from .translator_page import TranslatorPage


@contextmanager
def open_translator_page(configuration: Configuration) -> Iterator[TranslatorPage]:
    """Launch the configured browser, open one page and yield its page object."""
    with sync_playwright() as playwright:
        browser_type = getattr(playwright, configuration.browser.engine)
        browser = browser_type.launch(headless=configuration.browser.headless)
        try:
            page = browser.new_page()
            yield TranslatorPage(page, configuration.site, configuration.timing)
        finally:
            browser.close()
