"""In-process stylesheet host backed by cssutils."""

from __future__ import annotations

import functools
import logging
import xml.dom
from collections.abc import Container, Iterator
from pathlib import Path
from urllib.parse import quote, urljoin, urlsplit, urlunsplit

import cssutils
from cssutils import css

from cssctl.core.errors import StyleSheetLoadError
from cssctl.core.model import EngineProfile, OwnerNode
from cssctl.core.property_names import css_property_name

LOGGER = logging.getLogger(__name__)

_PATH_SAFE = "/%:@!$&'()*+,;=~"


@functools.cache
def _parser() -> cssutils.CSSParser:
    cssutils.log.setLevel(logging.CRITICAL)
    return cssutils.CSSParser(raiseExceptions=False, validate=False)


def _remove_dot_segments(path: str) -> str:
    segments = path.split("/")
    output: list[str] = []
    for segment in segments:
        if segment == ".":
            continue
        if segment == "..":
            if len(output) > 1 or (output and output[0] != ""):
                output.pop()
            continue
        output.append(segment)
    if segments[-1] in (".", ".."):
        output.append("")
    return "/".join(output)


def normalize_href(base_url: str, href: str) -> str:
    """Resolve ``href`` against ``base_url`` the way a link's href is normalized.

    Dot segments are removed, the path is percent-quoted, and scheme and host
    are lowercased, so relative, absolute and pre-quoted forms of one URL
    compare equal.
    """
    parts = urlsplit(urljoin(base_url, href))
    return urlunsplit(
        (
            parts.scheme.lower(),
            parts.netloc.lower(),
            quote(_remove_dot_segments(parts.path), safe=_PATH_SAFE),
            parts.query,
            parts.fragment,
        )
    )


class CSSStyleAdapter:
    """Expose a cssutils declaration under camelCased style names."""

    def __init__(self, declaration: css.CSSStyleDeclaration) -> None:
        self._declaration = declaration

    def __getitem__(self, name: str) -> str:
        return self._declaration.getPropertyValue(css_property_name(name))

    def __setitem__(self, name: str, value: str) -> None:
        prop = css_property_name(name)
        try:
            self._declaration.setProperty(prop, value)
        except xml.dom.DOMException as exc:
            LOGGER.debug("Host ignored %s: %r (%s)", prop, value, exc)


class CSSRuleHandle:
    """Live handle on one cssutils style rule."""

    def __init__(self, rule: css.CSSStyleRule) -> None:
        self._rule = rule
        self.style = CSSStyleAdapter(rule.style)

    @property
    def selector_text(self) -> str:
        return self._rule.selectorText

    @property
    def css_text(self) -> str:
        return self._rule.cssText

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CSSRuleHandle) and other._rule is self._rule

    def __hash__(self) -> int:
        return id(self._rule)

    def __repr__(self) -> str:
        return f"CSSRuleHandle({self.selector_text!r})"


class HostStyleSheet:
    def __init__(self, sheet: css.CSSStyleSheet, owner: OwnerNode) -> None:
        self.sheet = sheet
        self.owner = owner

    @property
    def owner_id(self) -> str:
        return self.owner.id

    @property
    def owner_href(self) -> str:
        return self.owner.href

    @property
    def label(self) -> str:
        if self.owner.id:
            return f"#{self.owner.id}"
        return self.owner.href or "<inline>"

    @property
    def css_text(self) -> str:
        return self.sheet.cssText.decode("utf-8")

    def style_rules(self) -> Iterator[CSSRuleHandle]:
        for rule in self.sheet.cssRules:
            if rule.type == rule.STYLE_RULE:
                yield CSSRuleHandle(rule)


class Document:
    """Ordered collection of stylesheets sharing one base URL.

    The document owns an internal staging sheet, registered before any caller
    sheet, which selector resolution never visits.
    """

    def __init__(
        self,
        base_url: str = "about:blank",
        *,
        profile: EngineProfile | None = None,
        reference_style: Container[str] | None = None,
    ) -> None:
        self.base_url = base_url
        if reference_style is None:
            reference_style = profile.style_names if profile else frozenset()
        self._reference_style = reference_style
        self._staging = HostStyleSheet(css.CSSStyleSheet(), OwnerNode())
        self._sheets: list[HostStyleSheet] = [self._staging]

    @property
    def style_sheets(self) -> list[HostStyleSheet]:
        return list(self._sheets)

    @property
    def staging_sheet(self) -> HostStyleSheet:
        return self._staging

    @property
    def reference_style(self) -> Container[str]:
        return self._reference_style

    def resolve_href(self, href: str) -> str:
        return normalize_href(self.base_url, href)

    def add_stylesheet(self, css_text: str, *, id: str = "", href: str = "") -> HostStyleSheet:
        owner = OwnerNode(id=id, href=self.resolve_href(href) if href else "")
        parsed = _parser().parseString(css_text, href=owner.href or None)
        sheet = HostStyleSheet(parsed, owner)
        self._sheets.append(sheet)
        LOGGER.debug("Registered stylesheet %s with %d rule(s)", sheet.label, len(parsed.cssRules))
        return sheet

    def load_stylesheet(self, path: Path, *, id: str | None = None) -> HostStyleSheet:
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StyleSheetLoadError(f"Could not read stylesheet {path}: {exc}") from exc
        return self.add_stylesheet(
            content,
            id=path.stem if id is None else id,
            href=path.resolve().as_uri(),
        )
