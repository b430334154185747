"""Host document interfaces."""

from __future__ import annotations

from collections.abc import Container, Iterable, Sequence
from typing import Protocol, runtime_checkable


class StyleDeclaration(Protocol):
    def __getitem__(self, name: str) -> str:
        """Return the value of a style property, or an empty string when unset."""

    def __setitem__(self, name: str, value: str) -> None:
        """Assign a style property in place."""


@runtime_checkable
class StyleRule(Protocol):
    @property
    def selector_text(self) -> str: ...

    @property
    def style(self) -> StyleDeclaration: ...


class StyleSheet(Protocol):
    @property
    def owner_id(self) -> str: ...

    @property
    def owner_href(self) -> str: ...

    def style_rules(self) -> Iterable[StyleRule]:
        """Yield the sheet's style rules in their defined order."""


class StyleSheetHost(Protocol):
    @property
    def style_sheets(self) -> Sequence[StyleSheet]:
        """Active stylesheets in registration order."""

    @property
    def staging_sheet(self) -> StyleSheet | None: ...

    @property
    def reference_style(self) -> Container[str]:
        """Style names supported by the host, used for vendor-prefix probing."""

    def resolve_href(self, href: str) -> str:
        """Resolve ``href`` against the document base URL."""
