"""Get/set protocol over a resolved, ordered set of style rules."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from cssctl.core.model import PropertyName, PropertyNames, PropertySpec, PropertyValues
from cssctl.core.property_names import PropertyNameResolver
from cssctl.host.base import StyleRule

LOGGER = logging.getLogger(__name__)


def property_spec(name: Any) -> PropertySpec | None:
    """Convert a raw property argument into its tagged form.

    Accepts a single name, a list or tuple of names, or a mapping of names to
    values. Anything else yields ``None``.
    """
    if isinstance(name, (PropertyName, PropertyNames, PropertyValues)):
        return name
    if isinstance(name, str):
        return PropertyName(name)
    if isinstance(name, (list, tuple)):
        return PropertyNames(tuple(name))
    if isinstance(name, Mapping):
        return PropertyValues(dict(name))
    return None


class RuleSet:
    """Ordered snapshot of style rules with get/set access to their properties.

    Reads return the first non-empty value in rule order. Writes go to the first
    rule that already defines the property, or to the first rule when none does.
    """

    def __init__(self, rules: list[StyleRule], names: PropertyNameResolver) -> None:
        self._rules = list(rules)
        self._names = names

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[StyleRule]:
        return iter(list(self._rules))

    def __repr__(self) -> str:
        selectors = ", ".join(rule.selector_text for rule in self._rules)
        return f"RuleSet([{selectors}])"

    def rules(self) -> list[StyleRule]:
        return list(self._rules)

    def css(self, name: Any = None, value: str | None = None) -> Any:
        spec = property_spec(name)
        if isinstance(spec, PropertyName):
            return self._css_name(spec.name, value)
        if isinstance(spec, PropertyNames):
            return self._css_names(spec.names, value)
        if isinstance(spec, PropertyValues):
            return self._css_values(spec.values)
        return self

    style = css

    def get(self, name: str) -> str | None:
        return self._css_name(name, None)

    def set(self, name: str, value: str) -> RuleSet:
        return self._css_name(name, value)

    def get_many(self, names: list[str] | tuple[str, ...]) -> dict[str, str | None]:
        return self._css_names(tuple(names), None)

    def set_many(self, names: list[str] | tuple[str, ...], value: str) -> RuleSet:
        return self._css_names(tuple(names), value)

    def update(self, values: Mapping[str, str]) -> RuleSet:
        return self._css_values(dict(values))

    def _css_name(self, name: str, value: str | None) -> Any:
        style_name = self._names.resolve(name)
        if not style_name:
            return self

        for rule in self._rules:
            if rule.style[style_name] != "":
                if value is None:
                    return rule.style[style_name]
                rule.style[style_name] = value
                return self

        if value is None:
            return None
        if not self._rules:
            LOGGER.debug("No rules to receive %s=%r", style_name, value)
            return self
        self._rules[0].style[style_name] = value
        return self

    def _css_names(self, names: tuple[str, ...], value: str | None) -> Any:
        styles: dict[str, str | None] = {}
        for name in names:
            result = self._css_name(name, value)
            styles[name] = None if result is self else result
        if value is not None:
            return self
        return styles

    def _css_values(self, values: dict[str, str | None]) -> RuleSet:
        for name, value in values.items():
            self._css_name(name, value)
        return self
