from __future__ import annotations

import logging

from typing import List, Optional, Sequence, TextIO, Union
from io import StringIO
from pathlib import Path
from xml.etree import ElementTree

from pickles_core.constants import MARKER_RESULTS_BEGIN, MARKER_RESULTS_END
from pickles_core.errors import MalformedReportError, UnsupportedOperationError
from pickles_core.model import ScenarioOutline
from pickles_core.results.base import ReportFeature, ReportScenario, TestResults
from pickles_core.results.lattice import TestResult


logger = logging.getLogger(__name__)


def extract_results(content: str) -> str:
    """Get the results document that SpecRun embeds in its HTML report, inside a comment."""
    begin = content.find(MARKER_RESULTS_BEGIN)
    if begin < 0:
        raise MalformedReportError(f'could not find "{MARKER_RESULTS_BEGIN}" in results')

    content = content[begin + len(MARKER_RESULTS_BEGIN) :]

    end = content.find(MARKER_RESULTS_END)
    if end < 0:
        raise MalformedReportError(f'could not find "{MARKER_RESULTS_END}" in results')

    content = content[:end]

    return content.replace('&lt;', '<').replace('&gt;', '>').strip()


def _get_value(element: ElementTree.Element, name: str) -> Optional[str]:
    value = element.get(name)
    if value is not None:
        return value

    child = element.find(name)
    if child is not None:
        return (child.text or '').strip()

    return None


def to_report_scenario(element: ElementTree.Element) -> ReportScenario:
    return ReportScenario(title=_get_value(element, 'title') or '', result=_get_value(element, 'result'))


def to_report_feature(element: ElementTree.Element) -> ReportFeature:
    return ReportFeature(
        title=_get_value(element, 'title') or '',
        scenarios=tuple(to_report_scenario(scenario) for scenario in element.iter('scenario')),
    )


def parse_results(content: str) -> List[ReportFeature]:
    payload = extract_results(content)

    try:
        document = ElementTree.fromstring(payload)
    except ElementTree.ParseError as e:
        raise MalformedReportError(f'results are not well-formed: {str(e)}') from e

    return [to_report_feature(feature) for feature in document.iter('feature')]


class SpecRunResults(TestResults):
    """Results from the HTML report of SpecRun, which expands each example row of an outline into its own run."""

    source: str

    def __init__(self, results_file: Union[str, Path, TextIO]) -> None:
        try:
            if isinstance(results_file, (str, Path)):
                path = Path(results_file)
                self.source = path.as_posix()
                content = path.read_text(encoding='utf-8')
            else:
                self.source = getattr(results_file, 'name', '<stream>')
                content = results_file.read()
        except UnicodeDecodeError as e:
            raise MalformedReportError(f'results in {self.source} are not valid utf-8: {str(e)}') from e

        features = parse_results(content)

        logger.info(f'loaded results for {len(features)} features from {self.source}')

        super().__init__(features)

    @classmethod
    def from_string(cls, content: str) -> SpecRunResults:
        return cls(StringIO(content))

    @property
    def supports_example_results(self) -> bool:
        return False

    def get_example_result(self, scenario_outline: ScenarioOutline, example_values: Sequence[str]) -> TestResult:
        raise UnsupportedOperationError(f'{self.__class__.__name__} does not support results per example, check supports_example_results first')
