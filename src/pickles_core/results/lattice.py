from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Union


class TestResult(Enum):
    __test__ = False

    INCONCLUSIVE = 0
    PASSED = 1
    FAILED = 2

    @property
    def was_executed(self) -> bool:
        return self is not TestResult.INCONCLUSIVE

    @property
    def was_successful(self) -> bool:
        return self is TestResult.PASSED


RawResult = Union[TestResult, Optional[str]]


def to_test_result(value: RawResult) -> TestResult:
    """Normalize a raw outcome, anything that is not passed or failed is inconclusive."""
    if isinstance(value, TestResult):
        return value

    if value is None:
        return TestResult.INCONCLUSIVE

    normalized = value.lower()

    if normalized == 'passed':
        return TestResult.PASSED
    elif normalized == 'failed':
        return TestResult.FAILED

    return TestResult.INCONCLUSIVE


def merge(results: Iterable[RawResult]) -> TestResult:
    """Join outcomes, failed dominates passed which dominates inconclusive.

    The join is the maximum over a total order, so the result does not depend
    on the order or grouping of `results`. An empty input is inconclusive.
    """
    merged = TestResult.INCONCLUSIVE

    for result in results:
        merged = max(merged, to_test_result(result), key=lambda r: r.value)

        if merged is TestResult.FAILED:
            break

    return merged
