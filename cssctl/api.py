"""Stable public API for building tooling on top of cssctl.

This module is the supported integration surface for third-party callers.
Avoid importing from private/internal modules unless intentionally depending on
non-stable internals.
"""

from __future__ import annotations

import weakref
from typing import Any

from cssctl.core.accessor import RuleSet, property_spec
from cssctl.core.errors import (
    CssctlError,
    ProfileLoadError,
    ProfileResolutionError,
    ProfileValidationError,
    PropertyValueError,
    StyleSheetLoadError,
)
from cssctl.core.model import (
    EngineProfile,
    FilterKind,
    FilterSpec,
    OwnerNode,
    ParsedSelector,
    PropertyName,
    PropertyNames,
    PropertyValues,
)
from cssctl.core.property_names import VENDOR_PREFIXES, PropertyNameResolver, camel_case
from cssctl.core.resolver import RuleResolver, SelectorInput
from cssctl.core.selector import matches_filter, parse_selector
from cssctl.host.base import StyleRule, StyleSheetHost
from cssctl.host.document import Document

__all__ = [
    "CssctlError",
    "ProfileLoadError",
    "ProfileResolutionError",
    "ProfileValidationError",
    "PropertyValueError",
    "StyleSheetLoadError",
    "EngineProfile",
    "FilterKind",
    "FilterSpec",
    "OwnerNode",
    "ParsedSelector",
    "PropertyName",
    "PropertyNames",
    "PropertyValues",
    "VENDOR_PREFIXES",
    "Document",
    "PropertyNameResolver",
    "RuleResolver",
    "RuleSet",
    "StyleRule",
    "StyleSheetHost",
    "StyleSheets",
    "camel_case",
    "matches_filter",
    "parse_selector",
    "property_spec",
    "stylesheet",
]

_NAME_RESOLVERS: weakref.WeakKeyDictionary[StyleSheetHost, PropertyNameResolver] = weakref.WeakKeyDictionary()


def _shared_names(host: StyleSheetHost) -> PropertyNameResolver:
    resolver = _NAME_RESOLVERS.get(host)
    if resolver is None:
        resolver = PropertyNameResolver(host.reference_style)
        _NAME_RESOLVERS[host] = resolver
    return resolver


class StyleSheets:
    """Selector and property access bound to one stylesheet host.

    Instances created for the same host share a property name cache unless an
    explicit ``names`` resolver is passed.
    """

    camel_case = staticmethod(camel_case)

    def __init__(self, host: StyleSheetHost, *, names: PropertyNameResolver | None = None) -> None:
        self.host = host
        self.names = names or _shared_names(host)
        self._resolver = RuleResolver(host)

    def css_rules(self, selector: str) -> list[StyleRule]:
        """Return the style rules matching one ``filter{selector}`` string."""
        return self._resolver.css_rules(selector)

    def css_style_name(self, name: str) -> str:
        return self.names.resolve(name)

    def select(self, selector: SelectorInput) -> RuleSet:
        return RuleSet(self._resolver.resolve(selector), self.names)

    def __call__(self, selector: SelectorInput, name: Any = None, value: str | None = None) -> Any:
        return self.select(selector).css(name, value)


def stylesheet(
    selector: SelectorInput,
    name: Any = None,
    value: str | None = None,
    *,
    document: StyleSheetHost,
) -> Any:
    """Select rules and optionally read or write properties in one call.

    Without ``name`` the selected :class:`RuleSet` is returned. With a single
    name and no value the property value is returned, with a list of names a
    name/value dict, and any write returns the RuleSet for chaining.
    """
    return StyleSheets(document)(selector, name, value)
