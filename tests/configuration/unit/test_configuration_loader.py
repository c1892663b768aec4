"""Configuration loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from swift_translator_tester.configuration.loader import (
    ConfigurationError,
    default_configuration,
    load_configuration,
)
from swift_translator_tester.configuration.runtime_settings import (
    DEFAULT_OUTPUT_SELECTOR,
    DEFAULT_SITE_URL,
)


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_empty_configuration_file_uses_defaults(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "")

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.site.url == DEFAULT_SITE_URL
    assert configuration.site.input_label == "Input Your Singlish Text Here."
    assert configuration.site.output_selector == DEFAULT_OUTPUT_SELECTOR
    assert configuration.site.source_input_selector == "textarea"
    assert configuration.timing.page_load_ms == 2000
    assert configuration.timing.after_clear_ms == 1000
    assert configuration.timing.translation_settle_ms == 3000
    assert configuration.timing.between_tests_ms == 2000
    assert configuration.timing.output_timeout_ms == 10000
    assert configuration.timing.output_poll_interval_ms == 250
    assert configuration.workbook.sheet_name == "Test Cases"
    assert configuration.workbook.path == (tmp_path / "test_data" / "test_cases.xlsx").resolve()
    assert configuration.browser.engine == "chromium"
    assert configuration.browser.headless is True


def test_loads_overrides_and_resolves_workbook_relative_to_config(tmp_path: Path) -> None:
    config_dir = tmp_path / "settings"
    config_dir.mkdir()
    config_path = _write_file(
        config_dir / "config.yaml",
        """
site:
  url: "http://localhost:8080/"
timing:
  page_load_ms: 0
  output_timeout_ms: 5000
workbook:
  path: "../data/cases.xlsx"
  sheet_name: "Regression"
browser:
  engine: "Firefox"
  headless: false
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.site.url == "http://localhost:8080/"
    assert configuration.site.input_label == "Input Your Singlish Text Here."
    assert configuration.timing.page_load_ms == 0
    assert configuration.timing.output_timeout_ms == 5000
    assert configuration.timing.after_clear_ms == 1000
    assert configuration.workbook.path == (tmp_path / "data" / "cases.xlsx").resolve()
    assert configuration.workbook.sheet_name == "Regression"
    assert configuration.browser.engine == "firefox"
    assert configuration.browser.headless is False


def test_absolute_workbook_path_is_kept(tmp_path: Path) -> None:
    workbook_path = tmp_path / "elsewhere" / "cases.xlsx"
    config_path = _write_file(
        tmp_path / "config.yaml",
        f'workbook:\n  path: "{workbook_path.as_posix()}"\n',
    )

    configuration = load_configuration(config_path)

    assert configuration.workbook.path == workbook_path


def test_default_configuration_resolves_against_base_path(tmp_path: Path) -> None:
    configuration = default_configuration(tmp_path)

    assert configuration.path is None
    assert configuration.workbook.path == (tmp_path / "test_data" / "test_cases.xlsx").resolve()


def test_missing_configuration_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_non_mapping_root_is_rejected(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "- just\n- a list\n")

    with pytest.raises(ConfigurationError, match="root must be a mapping"):
        load_configuration(config_path)


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("site: nope\n", "Configuration section 'site' must be a mapping"),
        ("site:\n  url: 42\n", "site.url must be a string"),
        ("site:\n  url: '  '\n", "site.url must not be empty"),
        ("timing:\n  page_load_ms: -1\n", "timing.page_load_ms must not be negative"),
        ("timing:\n  after_clear_ms: true\n", "timing.after_clear_ms must be an integer"),
        ("timing:\n  output_timeout_ms: 0\n", "timing.output_timeout_ms must be greater than zero"),
        (
            "timing:\n  output_poll_interval_ms: 1.5\n",
            "timing.output_poll_interval_ms must be an integer",
        ),
        ("browser:\n  engine: opera\n", "browser.engine must be one of"),
        ("browser:\n  headless: 'yes'\n", "browser.headless must be a boolean"),
    ],
)
def test_invalid_values_are_rejected(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "config.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)
