"""Selector string parsing and stylesheet filtering."""

from __future__ import annotations

from collections.abc import Callable

from cssctl.core.model import FilterKind, FilterSpec, ParsedSelector
from cssctl.host.base import StyleSheet


def _filter_spec(text: str) -> FilterSpec:
    if not text:
        return FilterSpec()
    if text.startswith("#"):
        return FilterSpec(kind=FilterKind.BY_ID, value=text)
    return FilterSpec(kind=FilterKind.BY_HREF, value=text)


def parse_selector(text: str) -> ParsedSelector:
    """Split ``filter{selector}`` into its stylesheet filter and selector text.

    Without an opening brace the whole (trimmed) text is the selector. Braces
    inside the selector text are not supported.
    """
    parts = text.split("{")
    if len(parts) == 1:
        return ParsedSelector(filter=FilterSpec(), selector_text=text.strip())
    return ParsedSelector(
        filter=_filter_spec(parts[0].strip()),
        selector_text=parts[1].split("}")[0].strip(),
    )


def matches_filter(
    spec: FilterSpec,
    sheet: StyleSheet,
    resolve_href: Callable[[str], str],
) -> bool:
    if spec.kind is FilterKind.NONE:
        return True
    if spec.kind is FilterKind.BY_ID:
        return bool(sheet.owner_id) and "#" + sheet.owner_id == spec.value
    return (sheet.owner_href or "") == resolve_href(spec.value)
