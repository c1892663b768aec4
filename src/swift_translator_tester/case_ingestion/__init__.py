"""Test case ingestion exports."""

from .testcase_models import TestCaseReadResult, TranslationTestCase
from .workbook_reader import CaseIngestionError, SheetNotFoundError, read_test_cases

__all__ = [
    "CaseIngestionError",
    "SheetNotFoundError",
    "TestCaseReadResult",
    "TranslationTestCase",
    "read_test_cases",
]
