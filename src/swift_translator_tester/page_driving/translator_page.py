"""Page object driving the translator web page."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any, Protocol

from swift_translator_tester.configuration.runtime_settings import SiteSettings, TimingSettings

Clock = Callable[[], float]
Pause = Callable[[int], None]


class OutputTimeoutError(Exception):
    """Raised when no output container shows text within the configured bound."""


class LocatorProtocol(Protocol):
    """Subset of the Playwright locator API required by the page object."""

    @property
    def first(self) -> LocatorProtocol: ...

    def fill(self, value: str) -> None: ...

    def filter(self, *, has_not: Any = None) -> LocatorProtocol: ...

    def count(self) -> int: ...

    def text_content(self) -> str | None: ...

    def all_text_contents(self) -> list[str]: ...


class PageProtocol(Protocol):
    """Subset of the Playwright page API required by the page object."""

    def goto(self, url: str) -> Any: ...

    def wait_for_load_state(self, state: str) -> None: ...

    def wait_for_timeout(self, timeout: float) -> None: ...

    def get_by_role(self, role: str, *, name: str) -> LocatorProtocol: ...

    def locator(self, selector: str) -> LocatorProtocol: ...


class TranslatorPage:
    """Drives one browser page through the clear, type, wait and read protocol."""

    def __init__(
        self,
        page: PageProtocol,
        site: SiteSettings,
        timing: TimingSettings,
        *,
        clock: Clock | None = None,
        pause: Pause | None = None,
    ) -> None:
        self.page = page
        self._site = site
        self._timing = timing
        self._clock = clock or time.monotonic
        self._pause = pause or page.wait_for_timeout

    def navigate(self) -> None:
        self.page.goto(self._site.url)
        self.page.wait_for_load_state("networkidle")
        self._pause(self._timing.page_load_ms)

    def input_field(self) -> LocatorProtocol:
        return self.page.get_by_role("textbox", name=self._site.input_label)

    def output_field(self) -> LocatorProtocol:
        """First output container that is not the editable source panel."""
        return (
            self.page.locator(self._site.output_selector)
            .filter(has_not=self.page.locator(self._site.source_input_selector))
            .first
        )

    def clear_input(self) -> None:
        self.input_field().fill("")
        self._pause(self._timing.after_clear_ms)

    def type_input(self, text: str) -> None:
        self.input_field().fill(text)

    def wait_for_output(self) -> None:
        """Poll until any output container holds non-blank text, then let it settle.

        Raises:
          OutputTimeoutError: If nothing appears within ``output_timeout_ms``.
        """
        deadline = self._clock() + self._timing.output_timeout_ms / 1000.0
        while not self._output_has_text():
            if self._clock() >= deadline:
                raise OutputTimeoutError(
                    f"No translated output appeared within {self._timing.output_timeout_ms} ms."
                )
            self._pause(self._timing.output_poll_interval_ms)
        self._pause(self._timing.translation_settle_ms)

    def read_output(self) -> str | None:
        output = self.output_field()
        if output.count() == 0:
            return None
        text = output.text_content()
        return text.strip() if text is not None else None

    def translate(self, text: str) -> str | None:
        self.clear_input()
        self.type_input(text)
        self.wait_for_output()
        return self.read_output()

    def _output_has_text(self) -> bool:
        texts = self.page.locator(self._site.output_selector).all_text_contents()
        return any(text.strip() for text in texts)
