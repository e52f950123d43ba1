from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple, TypeVar, Union
from dataclasses import dataclass, field, replace


class Keyword(Enum):
    GIVEN = 'given'
    WHEN = 'when'
    THEN = 'then'
    AND = 'and'
    BUT = 'but'
    FEATURE = 'feature'
    BACKGROUND = 'background'
    SCENARIO = 'scenario'
    SCENARIO_OUTLINE = 'scenario_outline'
    EXAMPLES = 'examples'


@dataclass(frozen=True)
class TableRow:
    cells: Tuple[str, ...]


@dataclass(frozen=True)
class Table:
    header_row: TableRow
    data_rows: Tuple[TableRow, ...] = field(default=())


@dataclass(frozen=True)
class Step:
    native_keyword: str
    keyword: Keyword
    name: str
    doc_string_argument: Optional[str] = field(default=None)
    table_argument: Optional[Table] = field(default=None)


@dataclass(frozen=True)
class Example:
    name: str
    description: str
    table_argument: Table
    tags: Tuple[str, ...] = field(default=())


@dataclass(frozen=True)
class Scenario:
    name: str
    description: str = field(default='')
    steps: Tuple[Step, ...] = field(default=())
    tags: Tuple[str, ...] = field(default=())
    feature: Optional[Feature] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class ScenarioOutline:
    name: str
    description: str = field(default='')
    steps: Tuple[Step, ...] = field(default=())
    tags: Tuple[str, ...] = field(default=())
    examples: Tuple[Example, ...] = field(default=())
    feature: Optional[Feature] = field(default=None, compare=False, repr=False)


FeatureElement = Union[Scenario, ScenarioOutline]

E = TypeVar('E', Scenario, ScenarioOutline)


@dataclass(frozen=True)
class Feature:
    name: str
    description: str = field(default='')
    feature_elements: Tuple[FeatureElement, ...] = field(default=())
    background: Optional[Scenario] = field(default=None)
    tags: Tuple[str, ...] = field(default=())
    language: Optional[str] = field(default=None)

    def __post_init__(self) -> None:
        # elements are created before the feature that owns them, the back-reference is bound once here.
        # an element already bound to another feature keeps that binding, this feature gets a copy
        object.__setattr__(self, 'feature_elements', tuple(self._bind(element) for element in self.feature_elements))

        if self.background is not None:
            object.__setattr__(self, 'background', self._bind(self.background))

    def _bind(self, element: E) -> E:
        if element.feature is not None and element.feature is not self:
            element = replace(element)

        object.__setattr__(element, 'feature', self)

        return element
