"""Core data models used across resolver, accessor, service, and CLI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import cached_property

from cssctl.core.property_names import camel_case


class FilterKind(Enum):
    NONE = "none"
    BY_ID = "id"
    BY_HREF = "href"


@dataclass(frozen=True)
class FilterSpec:
    kind: FilterKind = FilterKind.NONE
    value: str = ""


@dataclass(frozen=True)
class ParsedSelector:
    filter: FilterSpec
    selector_text: str


@dataclass(frozen=True)
class OwnerNode:
    id: str = ""
    href: str = ""


@dataclass(frozen=True)
class PropertyName:
    name: str


@dataclass(frozen=True)
class PropertyNames:
    names: tuple[str, ...]


@dataclass(frozen=True)
class PropertyValues:
    values: dict[str, str | None]


PropertySpec = PropertyName | PropertyNames | PropertyValues


@dataclass(frozen=True)
class EngineProfile:
    id: str
    name: str
    properties: tuple[str, ...]

    @cached_property
    def style_names(self) -> frozenset[str]:
        return frozenset(camel_case(prop) for prop in self.properties)


@dataclass(frozen=True)
class RuleMatch:
    sheet: str
    selector_text: str
    css_text: str


@dataclass(frozen=True)
class PropertyReport:
    selector: str
    values: dict[str, str | None]
    rule_count: int


@dataclass(frozen=True)
class ApplyResult:
    selector: str
    values: dict[str, str]
    rule_count: int
    sheets: dict[str, str]
