"""Selector-to-rule resolution across a host's active stylesheets."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cssctl.core.selector import matches_filter, parse_selector
from cssctl.host.base import StyleRule, StyleSheetHost

LOGGER = logging.getLogger(__name__)

SelectorInput = str | StyleRule | Sequence[str | StyleRule] | None


class RuleResolver:
    def __init__(self, host: StyleSheetHost) -> None:
        self.host = host

    def resolve(self, selector: SelectorInput) -> list[StyleRule]:
        """Return the style rules matched by ``selector``.

        Sheets are visited most recently registered first and the host's
        staging sheet is skipped. Unmatched input yields an empty list.
        """
        if isinstance(selector, str):
            return self.css_rules(selector)
        if isinstance(selector, StyleRule):
            return [selector]
        if isinstance(selector, Sequence):
            rules: list[StyleRule] = []
            for item in selector:
                if isinstance(item, str):
                    rules.extend(self.css_rules(item))
                elif isinstance(item, StyleRule):
                    rules.append(item)
            return rules
        return []

    def css_rules(self, selector: str) -> list[StyleRule]:
        if not selector:
            return []

        parsed = parse_selector(selector)
        staging = self.host.staging_sheet
        rules: list[StyleRule] = []
        for sheet in reversed(self.host.style_sheets):
            if sheet is staging:
                continue
            if not matches_filter(parsed.filter, sheet, self.host.resolve_href):
                continue
            rules.extend(rule for rule in sheet.style_rules() if rule.selector_text == parsed.selector_text)

        LOGGER.debug("Selector %r matched %d rule(s)", selector, len(rules))
        return rules
