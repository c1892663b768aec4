"""Page driving exports."""

from .browser_session import open_translator_page
from .translator_page import OutputTimeoutError, TranslatorPage

__all__ = [
    "OutputTimeoutError",
    "TranslatorPage",
    "open_translator_page",
]
