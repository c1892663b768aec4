"""Results writing domain exports."""

from .report_models import ResultStatus, WriteOutcome
from .result_writer import write_test_result

__all__ = [
    "ResultStatus",
    "WriteOutcome",
    "write_test_result",
]
