from __future__ import annotations

import logging

from typing import Dict, List, Optional
from argparse import Namespace as Arguments
from pathlib import Path

from behave.parser import ParserError
from colorama import init, Fore

from pickles_core.errors import PicklesError
from pickles_core.gherkin import parse_feature
from pickles_core.language import find_language
from pickles_core.mapper import Mapper
from pickles_core.model import Feature, FeatureElement, ScenarioOutline
from pickles_core.results import SpecRunResults, TestResult, TestResults


logger = logging.getLogger(__name__)

RC_FAILED = 1
RC_ERROR = 2


def _get_result_color(result: TestResult) -> str:
    if result == TestResult.PASSED:
        return Fore.GREEN
    elif result == TestResult.FAILED:
        return Fore.RED

    return Fore.YELLOW


def result_to_text(filename: str, kind: str, name: str, result: TestResult) -> str:
    color = _get_result_color(result)

    return '\t'.join(
        [
            filename,
            f'{color}{result.name.lower()}{Fore.RESET}',
            f'{kind}: {name}',
        ]
    )


def get_element_result(results: Optional[TestResults], element: FeatureElement) -> TestResult:
    if results is None:
        return TestResult.INCONCLUSIVE

    if isinstance(element, ScenarioOutline):
        return results.get_scenario_outline_result(element)

    return results.get_scenario_result(element)


def get_feature_result(results: Optional[TestResults], feature: Feature) -> TestResult:
    if results is None:
        return TestResult.INCONCLUSIVE

    return results.get_feature_result(feature)


def find_feature_files(paths: List[str]) -> List[Path]:
    files: List[Path] = []

    if paths == ['.']:
        return list(Path.cwd().rglob('*.feature'))

    for path in paths:
        file = Path(path)

        if file.is_dir():
            files.extend(list(file.rglob('*.feature')))
        else:
            files.append(file)

    return files


def cli(args: Arguments) -> int:
    # init colorama for ansi colors
    init()

    results: Optional[TestResults] = None

    if args.results is not None:
        try:
            results = SpecRunResults(args.results)
        except (OSError, PicklesError) as e:
            logger.error(f'unable to load results from {args.results}: {str(e)}')
            return RC_ERROR

    mappers: Dict[str, Mapper] = {}
    rc: int = 0

    for file in find_feature_files(args.files):
        filename = file.as_posix().replace(Path.cwd().as_posix(), '').lstrip('/\\')

        try:
            source = file.read_text(encoding='utf-8')
            language = find_language(source, args.language)

            mapper = mappers.get(language, None)
            if mapper is None:
                mapper = Mapper(language)
                mappers.update({language: mapper})

            raw_feature = parse_feature(source, language=language, filename=filename)
            if raw_feature is None:
                logger.warning(f'{filename} does not contain a feature')
                continue

            feature = mapper.map_feature(raw_feature)
        except (OSError, UnicodeDecodeError, ParserError, PicklesError) as e:
            logger.error(f'unable to process {filename}: {str(e)}')
            rc = RC_ERROR
            continue

        verdicts = [(feature.name, 'feature', get_feature_result(results, feature))]

        for element in feature.feature_elements:
            kind = 'scenario outline' if isinstance(element, ScenarioOutline) else 'scenario'
            verdicts.append((element.name, kind, get_element_result(results, element)))

        for name, kind, result in verdicts:
            print(result_to_text(filename, kind, name, result))

            if result == TestResult.FAILED and rc == 0:
                rc = RC_FAILED

    return rc
