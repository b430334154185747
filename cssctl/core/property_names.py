"""Style property name normalization and vendor-prefix resolution."""

from __future__ import annotations

import logging
import re
from collections.abc import Container, MutableMapping

VENDOR_PREFIXES: tuple[str, ...] = ("Webkit", "O", "Moz", "ms")

_MS_PREFIX_RE = re.compile(r"^-ms-")
_DASH_ALPHA_RE = re.compile(r"-([\da-z])")
_UPPER_RE = re.compile(r"[A-Z]")
LOGGER = logging.getLogger(__name__)


def camel_case(name: str) -> str:
    """Convert a hyphenated CSS property name to its style object form.

    ``background-color`` becomes ``backgroundColor``, ``-webkit-transform``
    becomes ``WebkitTransform`` and ``-ms-transform`` becomes ``msTransform``.
    Names that are already camelCased pass through unchanged.
    """
    return _DASH_ALPHA_RE.sub(lambda m: m.group(1).upper(), _MS_PREFIX_RE.sub("ms-", name))


def css_property_name(style_name: str, prefixes: tuple[str, ...] = VENDOR_PREFIXES) -> str:
    """Inverse of :func:`camel_case` for names produced by the resolver."""
    if not style_name or "-" in style_name:
        return style_name
    for prefix in prefixes:
        rest = style_name[len(prefix):]
        if style_name.startswith(prefix) and rest[:1].isupper():
            return f"-{prefix.lower()}-{_hyphenate(rest[0].lower() + rest[1:])}"
    return _hyphenate(style_name)


def _hyphenate(name: str) -> str:
    return _UPPER_RE.sub(lambda m: "-" + m.group(0).lower(), name)


class PropertyNameResolver:
    """Resolve hyphenated property names against a reference style object.

    Results are memoized per original name. A name that matches nothing is
    cached to its camelCased form, so the reference style is probed at most
    once per distinct input.
    """

    def __init__(
        self,
        reference_style: Container[str],
        *,
        prefixes: tuple[str, ...] = VENDOR_PREFIXES,
        cache: MutableMapping[str, str] | None = None,
    ) -> None:
        self.reference_style = reference_style
        self.prefixes = prefixes
        self.cache: MutableMapping[str, str] = {} if cache is None else cache
        self.probe_count = 0

    def resolve(self, name: str) -> str:
        if not name:
            return name
        cached = self.cache.get(name)
        if cached is not None:
            return cached

        self.probe_count += 1
        style_name = camel_case(name)
        if style_name not in self.reference_style:
            style_name = self._vendor_name(style_name)
        self.cache[name] = style_name
        LOGGER.debug("Resolved property %r to %r", name, style_name)
        return style_name

    def _vendor_name(self, style_name: str) -> str:
        title_name = style_name[0].upper() + style_name[1:]
        for prefix in self.prefixes:
            candidate = prefix + title_name
            if candidate in self.reference_style:
                return candidate
        return style_name

    def clear(self) -> None:
        self.cache.clear()
        self.probe_count = 0
