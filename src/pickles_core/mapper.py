from __future__ import annotations

import logging

from typing import Iterable, Optional, Tuple, Union

from ordered_set import OrderedSet

from pickles_core import gherkin
from pickles_core.constants import DEFAULT_LANGUAGE
from pickles_core.errors import MalformedTableError, UnsupportedNodeKindError
from pickles_core.language import KeywordTable, get_keyword_table, resolve_keyword
from pickles_core.model import (
    Example,
    Feature,
    FeatureElement,
    Keyword,
    Scenario,
    ScenarioOutline,
    Step,
    Table,
    TableRow,
)


logger = logging.getLogger(__name__)


class Mapper:
    """Converts a raw parse tree into the domain model.

    The only state is the language and its keyword table, both fixed when the
    mapper is created. Every `map_*` method is a pure function of its input.
    """

    language: str
    keywords: KeywordTable

    def __init__(self, language: str = DEFAULT_LANGUAGE) -> None:
        self.language = language
        self.keywords = get_keyword_table(language)

    def map_keyword(self, text: str) -> Keyword:
        return resolve_keyword(self.keywords, text, language=self.language)

    def map_table_cell(self, cell: gherkin.TableCell) -> str:
        return cell.value

    def map_table_row(self, row: gherkin.TableRow) -> TableRow:
        return TableRow(tuple(self.map_table_cell(cell) for cell in row.cells))

    def map_table(self, rows: Union[gherkin.DataTable, Iterable[gherkin.TableRow]]) -> Table:
        if isinstance(rows, gherkin.DataTable):
            rows = rows.rows

        mapped_rows = [self.map_table_row(row) for row in rows]

        if len(mapped_rows) < 1:
            raise MalformedTableError('table must have at least a header row')

        header_row, *data_rows = mapped_rows

        return Table(header_row=header_row, data_rows=tuple(data_rows))

    def map_doc_string(self, doc_string: gherkin.DocString) -> str:
        return doc_string.content

    def map_tag(self, tag: gherkin.Tag) -> str:
        return tag.name

    def map_tags(self, tags: Iterable[gherkin.Tag]) -> Tuple[str, ...]:
        return tuple(OrderedSet(self.map_tag(tag) for tag in tags))

    def map_step(self, step: gherkin.Step) -> Step:
        doc_string_argument: Optional[str] = None
        table_argument: Optional[Table] = None

        if isinstance(step.argument, gherkin.DocString):
            doc_string_argument = self.map_doc_string(step.argument)
        elif isinstance(step.argument, gherkin.DataTable):
            table_argument = self.map_table(step.argument)
        elif step.argument is not None:
            raise UnsupportedNodeKindError(f'step argument of type {step.argument.__class__.__name__} is not supported')

        return Step(
            native_keyword=step.keyword,
            keyword=self.map_keyword(step.keyword),
            name=step.text,
            doc_string_argument=doc_string_argument,
            table_argument=table_argument,
        )

    def map_scenario(self, scenario: gherkin.Scenario) -> Scenario:
        return Scenario(
            name=scenario.name,
            description=scenario.description or '',
            steps=tuple(self.map_step(step) for step in scenario.steps),
            tags=self.map_tags(scenario.tags),
        )

    def map_background(self, background: gherkin.Background) -> Scenario:
        return Scenario(
            name=background.name,
            description=background.description or '',
            steps=tuple(self.map_step(step) for step in background.steps),
        )

    def map_example(self, examples: gherkin.Examples) -> Example:
        return Example(
            name=examples.name,
            description=examples.description or '',
            table_argument=self.map_table(examples.rows),
            tags=self.map_tags(examples.tags),
        )

    def map_scenario_outline(self, scenario_outline: gherkin.ScenarioOutline) -> ScenarioOutline:
        return ScenarioOutline(
            name=scenario_outline.name,
            description=scenario_outline.description or '',
            steps=tuple(self.map_step(step) for step in scenario_outline.steps),
            tags=self.map_tags(scenario_outline.tags),
            examples=tuple(self.map_example(examples) for examples in scenario_outline.examples),
        )

    def map_scenario_definition(self, definition: gherkin.ScenarioDefinition) -> FeatureElement:
        if isinstance(definition, gherkin.ScenarioOutline):
            return self.map_scenario_outline(definition)
        elif isinstance(definition, gherkin.Scenario):
            return self.map_scenario(definition)

        raise UnsupportedNodeKindError('only arguments of type Scenario and ScenarioOutline are supported')

    def map_feature(self, feature: gherkin.Feature) -> Feature:
        logger.debug(f'mapping feature "{feature.name}" with {len(feature.children)} scenario definitions')

        return Feature(
            name=feature.name,
            description=feature.description or '',
            feature_elements=tuple(self.map_scenario_definition(child) for child in feature.children),
            background=self.map_background(feature.background) if feature.background is not None else None,
            tags=self.map_tags(feature.tags),
            language=feature.language,
        )
