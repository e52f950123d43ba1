from __future__ import annotations

import logging

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple
from dataclasses import dataclass, field

from pickles_core.constants import SCENARIO_OUTLINE_TITLE_SEPARATOR
from pickles_core.model import Feature, Scenario, ScenarioOutline
from pickles_core.results.lattice import TestResult, merge, to_test_result


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportScenario:
    title: str
    result: Optional[str] = field(default=None)


@dataclass(frozen=True)
class ReportFeature:
    title: str
    scenarios: Tuple[ReportScenario, ...] = field(default=())


class TestResults(ABC):
    """Query contract shared by every test framework report.

    Subclasses load their report format and hand the index to this class,
    which does the title matching. The index is never modified after
    `__init__`, so queries can run from several threads.
    """

    __test__ = False

    features: Tuple[ReportFeature, ...]

    def __init__(self, features: Sequence[ReportFeature]) -> None:
        self.features = tuple(features)

    @property
    @abstractmethod
    def supports_example_results(self) -> bool:
        ...

    @abstractmethod
    def get_example_result(self, scenario_outline: ScenarioOutline, example_values: Sequence[str]) -> TestResult:
        ...

    def find_feature(self, feature: Optional[Feature]) -> Optional[ReportFeature]:
        if feature is None:
            return None

        for report_feature in self.features:
            if report_feature.title == feature.name:
                return report_feature

        logger.debug(f'no results for feature "{feature.name}"')

        return None

    def get_feature_result(self, feature: Feature) -> TestResult:
        report_feature = self.find_feature(feature)

        if report_feature is None:
            return TestResult.INCONCLUSIVE

        return merge(report_scenario.result for report_scenario in report_feature.scenarios)

    def get_scenario_result(self, scenario: Scenario) -> TestResult:
        report_feature = self.find_feature(scenario.feature)

        if report_feature is None:
            return TestResult.INCONCLUSIVE

        for report_scenario in report_feature.scenarios:
            if report_scenario.title == scenario.name:
                return to_test_result(report_scenario.result)

        logger.debug(f'no results for scenario "{scenario.name}" in feature "{report_feature.title}"')

        return TestResult.INCONCLUSIVE

    def get_scenario_outline_result(self, scenario_outline: ScenarioOutline) -> TestResult:
        report_feature = self.find_feature(scenario_outline.feature)

        if report_feature is None:
            return TestResult.INCONCLUSIVE

        # frameworks that expand example rows title each run "<outline name>, <values>"
        prefix = f'{scenario_outline.name}{SCENARIO_OUTLINE_TITLE_SEPARATOR}'
        report_scenarios = [report_scenario for report_scenario in report_feature.scenarios if report_scenario.title.startswith(prefix)]

        if len(report_scenarios) < 1:
            logger.debug(f'no results for scenario outline "{scenario_outline.name}" in feature "{report_feature.title}"')
            return TestResult.INCONCLUSIVE

        return merge(report_scenario.result for report_scenario in report_scenarios)
