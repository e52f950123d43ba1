import logging

from typing import Sequence

import pytest

from _pytest.logging import LogCaptureFixture

from pickles_core.model import Feature, Scenario, ScenarioOutline
from pickles_core.results.base import ReportFeature, ReportScenario, TestResults
from pickles_core.results.lattice import TestResult


class DummyResults(TestResults):
    @property
    def supports_example_results(self) -> bool:
        return True

    def get_example_result(self, scenario_outline: ScenarioOutline, example_values: Sequence[str]) -> TestResult:
        return TestResult.PASSED


@pytest.fixture
def results() -> DummyResults:
    return DummyResults(
        [
            ReportFeature(
                'Eating',
                (
                    ReportScenario('Add two numbers', 'passed'),
                    ReportScenario('Read a recipe', 'failed'),
                    ReportScenario('Eating, 5, 3', 'passed'),
                    ReportScenario('Eating, 2, 6', 'failed'),
                    ReportScenario('Eating all, 1, 1', 'passed'),
                    ReportScenario('Sleeping, 8', 'passed'),
                    ReportScenario('Not run', None),
                ),
            ),
            ReportFeature('Sleeping', (ReportScenario('Sleeping, 8', 'passed'), ReportScenario('Sleeping, 9', 'Passed'))),
            ReportFeature('Eating', (ReportScenario('Add two numbers', 'failed'),)),
            ReportFeature('Nothing'),
        ]
    )


def test_abstract() -> None:
    with pytest.raises(TypeError):
        TestResults([])  # type: ignore[abstract]


def test___init__(results: DummyResults) -> None:
    assert isinstance(results.features, tuple)
    assert [feature.title for feature in results.features] == ['Eating', 'Sleeping', 'Eating', 'Nothing']


def test_get_feature_result(results: DummyResults) -> None:
    assert results.get_feature_result(Feature('Eating')) == TestResult.FAILED
    assert results.get_feature_result(Feature('Sleeping')) == TestResult.PASSED
    assert results.get_feature_result(Feature('Nothing')) == TestResult.INCONCLUSIVE
    assert results.get_feature_result(Feature('Drinking')) == TestResult.INCONCLUSIVE


def test_get_scenario_result(results: DummyResults, caplog: LogCaptureFixture) -> None:
    feature = Feature(
        'Eating',
        feature_elements=(
            Scenario('Add two numbers'),
            Scenario('Read a recipe'),
            Scenario('Not run'),
            Scenario('Missing'),
        ),
    )

    add, recipe, not_run, missing = feature.feature_elements
    assert isinstance(add, Scenario) and isinstance(recipe, Scenario) and isinstance(not_run, Scenario) and isinstance(missing, Scenario)

    # first matching feature wins
    assert results.get_scenario_result(add) == TestResult.PASSED
    assert results.get_scenario_result(recipe) == TestResult.FAILED
    assert results.get_scenario_result(not_run) == TestResult.INCONCLUSIVE

    with caplog.at_level(logging.DEBUG):
        assert results.get_scenario_result(missing) == TestResult.INCONCLUSIVE
    assert 'no results for scenario "Missing" in feature "Eating"' in caplog.messages

    # not bound to any feature
    assert results.get_scenario_result(Scenario('Add two numbers')) == TestResult.INCONCLUSIVE

    other = Feature('Drinking', feature_elements=(Scenario('Add two numbers'),))
    orphan = other.feature_elements[0]
    assert isinstance(orphan, Scenario)
    assert results.get_scenario_result(orphan) == TestResult.INCONCLUSIVE


def test_get_scenario_outline_result(results: DummyResults) -> None:
    feature = Feature(
        'Eating',
        feature_elements=(
            ScenarioOutline('Eating'),
            ScenarioOutline('Eating all'),
            ScenarioOutline('Add two numbers'),
            ScenarioOutline('Sleeping'),
        ),
    )

    eating, eating_all, add, sleeping = feature.feature_elements
    assert isinstance(eating, ScenarioOutline) and isinstance(eating_all, ScenarioOutline)
    assert isinstance(add, ScenarioOutline) and isinstance(sleeping, ScenarioOutline)

    assert results.get_scenario_outline_result(eating) == TestResult.FAILED
    assert results.get_scenario_outline_result(eating_all) == TestResult.PASSED
    # exact title is not an expanded example run
    assert results.get_scenario_outline_result(add) == TestResult.INCONCLUSIVE
    assert results.get_scenario_outline_result(sleeping) == TestResult.PASSED

    assert results.get_scenario_outline_result(ScenarioOutline('Eating')) == TestResult.INCONCLUSIVE

    other = Feature('Drinking', feature_elements=(ScenarioOutline('Eating'),))
    orphan = other.feature_elements[0]
    assert isinstance(orphan, ScenarioOutline)
    assert results.get_scenario_outline_result(orphan) == TestResult.INCONCLUSIVE
