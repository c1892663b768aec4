"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Test configuration template for swift-translator-tester.
# Every key is optional. Remove a key to fall back to the built-in default.

site:
  url: "https://www.swifttranslator.com/"
  # Accessible name of the Singlish input textbox.
  input_label: "Input Your Singlish Text Here."
  # CSS selector matching the output containers.
  output_selector: "div.w-full.h-80.p-3.rounded-lg.ring-1.ring-slate-300.whitespace-pre-wrap"
  # Containers holding this element are editable source panels, not results.
  source_input_selector: "textarea"

timing:
  # Dwell times in milliseconds.
  page_load_ms: 2000
  after_clear_ms: 1000
  translation_settle_ms: 3000
  between_tests_ms: 2000
  # Upper bound and poll interval while waiting for translated output.
  output_timeout_ms: 10000
  output_poll_interval_ms: 250

workbook:
  # Relative paths resolve against the directory of this file.
  path: "test_data/test_cases.xlsx"
  sheet_name: "Test Cases"

browser:
  # One of chromium, firefox, webkit.
  engine: "chromium"
  headless: true
"""


def build_placeholder_configuration() -> str:
    """Build a YAML test configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the test configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Test configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
