"""Service layer used by the CLI and other frontends."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from pathlib import Path

from cssctl.core.accessor import RuleSet
from cssctl.core.errors import ProfileResolutionError
from cssctl.core.model import ApplyResult, EngineProfile, PropertyReport, RuleMatch
from cssctl.core.profile_loader import load_profiles
from cssctl.core.property_names import PropertyNameResolver
from cssctl.core.resolver import RuleResolver
from cssctl.host.document import Document, HostStyleSheet

DEFAULT_PROFILE = "standard"


class StyleSheetService:
    def __init__(
        self,
        profile_id: str | None = None,
        *,
        base_url: str | None = None,
    ) -> None:
        loaded = load_profiles()
        self.profiles = loaded.profiles
        self.load_warnings = loaded.warnings
        self.profile = self._select_profile(profile_id or os.environ.get("CSSCTL_PROFILE") or DEFAULT_PROFILE)
        self.document = Document(
            base_url or Path.cwd().as_uri() + "/",
            profile=self.profile,
        )
        self.names = PropertyNameResolver(self.document.reference_style)
        self.resolver = RuleResolver(self.document)

    def _select_profile(self, profile_id: str) -> EngineProfile:
        profile = self.profiles.get(profile_id)
        if profile is None:
            available = ", ".join(sorted(self.profiles))
            raise ProfileResolutionError(f"Unknown profile '{profile_id}'. Available: {available}")
        return profile

    def list_profiles(self) -> list[EngineProfile]:
        return sorted(self.profiles.values(), key=lambda p: p.id)

    def load(self, paths: Iterable[Path]) -> list[HostStyleSheet]:
        return [self.document.load_stylesheet(path) for path in paths]

    def style_names(self, names: Iterable[str]) -> dict[str, str]:
        return {name: self.names.resolve(name) for name in names}

    def select(self, selector: str) -> RuleSet:
        return RuleSet(self.resolver.resolve(selector), self.names)

    def rules(self, selector: str) -> list[RuleMatch]:
        owners = {rule: sheet.label for sheet in self._caller_sheets() for rule in sheet.style_rules()}
        return [
            RuleMatch(
                sheet=owners.get(rule, "<external>"),
                selector_text=rule.selector_text,
                css_text=rule.css_text,
            )
            for rule in self.resolver.resolve(selector)
        ]

    def get(self, selector: str, names: Iterable[str]) -> PropertyReport:
        rule_set = self.select(selector)
        values = rule_set.get_many(tuple(names))
        return PropertyReport(selector=selector, values=values, rule_count=len(rule_set))

    def set(self, selector: str, values: Mapping[str, str]) -> ApplyResult:
        rule_set = self.select(selector)
        sheets = self._caller_sheets()
        before = [sheet.css_text for sheet in sheets]
        rule_set.update(values)
        changed = {
            sheet.label: sheet.css_text
            for sheet, original in zip(sheets, before)
            if sheet.css_text != original
        }
        return ApplyResult(selector=selector, values=dict(values), rule_count=len(rule_set), sheets=changed)

    def _caller_sheets(self) -> list[HostStyleSheet]:
        staging = self.document.staging_sheet
        return [sheet for sheet in self.document.style_sheets if sheet is not staging]
