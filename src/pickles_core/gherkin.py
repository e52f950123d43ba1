"""Raw parse tree, as produced by the Gherkin parser.

The nodes are plain immutable values that mirror what the parser read from
the feature file, without any interpretation of keywords or table shape.
`parse_feature` is the only place that knows about behave's model.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Union, cast
from dataclasses import dataclass, field

from behave import model as behave_model
from behave.parser import parse_feature as behave_parse_feature

from pickles_core.errors import UnsupportedNodeKindError


@dataclass(frozen=True)
class TableCell:
    value: str


@dataclass(frozen=True)
class TableRow:
    cells: Tuple[TableCell, ...]


@dataclass(frozen=True)
class DataTable:
    rows: Tuple[TableRow, ...]


@dataclass(frozen=True)
class DocString:
    content: str
    content_type: Optional[str] = field(default=None)


@dataclass(frozen=True)
class Tag:
    name: str


StepArgument = Union[DocString, DataTable]


@dataclass(frozen=True)
class Step:
    keyword: str
    text: str
    argument: Optional[StepArgument] = field(default=None)


@dataclass(frozen=True)
class Background:
    keyword: str
    name: str
    description: Optional[str] = field(default=None)
    steps: Tuple[Step, ...] = field(default=())


@dataclass(frozen=True)
class Scenario:
    keyword: str
    name: str
    description: Optional[str] = field(default=None)
    steps: Tuple[Step, ...] = field(default=())
    tags: Tuple[Tag, ...] = field(default=())


@dataclass(frozen=True)
class Examples:
    keyword: str
    name: str
    description: Optional[str] = field(default=None)
    tags: Tuple[Tag, ...] = field(default=())
    rows: Tuple[TableRow, ...] = field(default=())


@dataclass(frozen=True)
class ScenarioOutline:
    keyword: str
    name: str
    description: Optional[str] = field(default=None)
    steps: Tuple[Step, ...] = field(default=())
    tags: Tuple[Tag, ...] = field(default=())
    examples: Tuple[Examples, ...] = field(default=())


ScenarioDefinition = Union[Scenario, ScenarioOutline]


@dataclass(frozen=True)
class Feature:
    keyword: str
    name: str
    description: Optional[str] = field(default=None)
    language: Optional[str] = field(default=None)
    tags: Tuple[Tag, ...] = field(default=())
    background: Optional[Background] = field(default=None)
    children: Tuple[ScenarioDefinition, ...] = field(default=())


def _description(lines: Optional[Sequence[str]]) -> Optional[str]:
    if not lines:
        return None

    return '\n'.join(lines)


def _tags(tags: Optional[Sequence[str]]) -> Tuple[Tag, ...]:
    return tuple(Tag(str(tag)) for tag in tags or [])


def _row(cells: Sequence[str]) -> TableRow:
    return TableRow(tuple(TableCell(str(cell)) for cell in cells))


def _rows(table: Optional[behave_model.Table]) -> Tuple[TableRow, ...]:
    if table is None:
        return ()

    # behave keeps the header apart from the body, the raw tree does not
    return (_row(table.headings), *[_row(row.cells) for row in table.rows])


def _step(step: behave_model.Step) -> Step:
    argument: Optional[StepArgument] = None

    if step.text is not None:
        argument = DocString(str(step.text), getattr(step.text, 'content_type', None) or None)
    elif step.table is not None:
        argument = DataTable(_rows(step.table))

    return Step(keyword=step.keyword, text=step.name, argument=argument)


def _steps(steps: Optional[Sequence[behave_model.Step]]) -> Tuple[Step, ...]:
    return tuple(_step(step) for step in steps or [])


def _background(background: behave_model.Background) -> Background:
    return Background(
        keyword=background.keyword,
        name=background.name or '',
        description=_description(getattr(background, 'description', None)),
        steps=_steps(background.steps),
    )


def _examples(examples: behave_model.Examples) -> Examples:
    return Examples(
        keyword=examples.keyword,
        name=examples.name or '',
        description=_description(getattr(examples, 'description', None)),
        tags=_tags(getattr(examples, 'tags', None)),
        rows=_rows(examples.table),
    )


def _scenario_definition(scenario: behave_model.Scenario) -> ScenarioDefinition:
    if isinstance(scenario, behave_model.ScenarioOutline):
        outline = cast(behave_model.ScenarioOutline, scenario)
        return ScenarioOutline(
            keyword=outline.keyword,
            name=outline.name,
            description=_description(outline.description),
            steps=_steps(outline.steps),
            tags=_tags(outline.tags),
            examples=tuple(_examples(examples) for examples in outline.examples or []),
        )

    return Scenario(
        keyword=scenario.keyword,
        name=scenario.name,
        description=_description(scenario.description),
        steps=_steps(scenario.steps),
        tags=_tags(scenario.tags),
    )


def _scenarios(feature: behave_model.Feature) -> List[behave_model.Scenario]:
    # scenarios grouped under a rule are flattened into the feature, rules come after plain scenarios
    scenarios = list(feature.scenarios or [])

    for rule in getattr(feature, 'rules', None) or []:
        # behave adds an empty background to every rule when the feature has one
        if rule.background is not None and rule.background.steps:
            raise UnsupportedNodeKindError(f'background in rule "{rule.name}" is not supported')

        scenarios.extend(rule.scenarios or [])

    return scenarios


def from_behave(feature: behave_model.Feature) -> Feature:
    return Feature(
        keyword=feature.keyword,
        name=feature.name,
        description=_description(feature.description),
        language=feature.language,
        tags=_tags(feature.tags),
        background=_background(feature.background) if feature.background is not None else None,
        children=tuple(_scenario_definition(scenario) for scenario in _scenarios(feature)),
    )


def parse_feature(source: str, *, language: Optional[str] = None, filename: Optional[str] = None) -> Optional[Feature]:
    """Parse Gherkin `source` into a raw `Feature`.

    Returns `None` when the source does not contain a feature. Syntax errors
    are raised as `behave.parser.ParserError`.
    """
    feature = behave_parse_feature(source, language=language, filename=filename)

    if feature is None:
        return None

    return from_behave(feature)
