from pickles_core.results.lattice import TestResult, merge, to_test_result
from pickles_core.results.base import ReportFeature, ReportScenario, TestResults
from pickles_core.results.specrun import SpecRunResults

__all__ = [
    'TestResult',
    'merge',
    'to_test_result',
    'ReportFeature',
    'ReportScenario',
    'TestResults',
    'SpecRunResults',
]
