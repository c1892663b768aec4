"""Configuration scaffold generation tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from swift_translator_tester.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from swift_translator_tester.configuration.loader import load_configuration
from swift_translator_tester.configuration.runtime_settings import TimingSettings


def test_scaffold_is_valid_yaml_with_all_sections() -> None:
    parsed = yaml.safe_load(build_placeholder_configuration())

    assert set(parsed) == {"site", "timing", "workbook", "browser"}
    assert parsed["workbook"]["sheet_name"] == "Test Cases"


def test_written_scaffold_loads_to_default_settings(tmp_path: Path) -> None:
    destination = write_placeholder_configuration(tmp_path / "config.yaml")

    configuration = load_configuration(destination)

    assert destination == (tmp_path / "config.yaml").resolve()
    assert configuration.timing == TimingSettings()
    assert configuration.workbook.path == (tmp_path / "test_data" / "test_cases.xlsx").resolve()


def test_write_refuses_to_overwrite_existing_file(tmp_path: Path) -> None:
    destination = tmp_path / "config.yaml"
    destination.write_text("keep: me\n", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(destination)

    assert destination.read_text(encoding="utf-8") == "keep: me\n"
