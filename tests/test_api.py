from __future__ import annotations

import gc

from cssctl.api import Document, EngineProfile, PropertyNameResolver, StyleSheets, _NAME_RESOLVERS, stylesheet


def _document() -> Document:
    profile = EngineProfile(id="gecko", name="Gecko", properties=("color", "-moz-user-select"))
    doc = Document(profile=profile)
    doc.add_stylesheet(".btn { -moz-user-select: none; }", id="base")
    doc.add_stylesheet(".btn { color: red; }", id="theme")
    return doc


def test_instances_share_name_cache_per_host() -> None:
    doc = _document()
    first = StyleSheets(doc)
    second = StyleSheets(doc)

    assert first.names is second.names
    assert first.css_style_name("user-select") == "MozUserSelect"
    probes = second.names.probe_count
    assert second.css_style_name("user-select") == "MozUserSelect"
    assert second.names.probe_count == probes


def test_explicit_resolver_isolates_cache() -> None:
    doc = _document()
    isolated = PropertyNameResolver(doc.reference_style, cache={})
    sheets = StyleSheets(doc, names=isolated)

    assert sheets.names is not StyleSheets(doc).names
    assert sheets.css_style_name("color") == "color"
    assert isolated.cache == {"color": "color"}


def test_css_rules_and_camel_case() -> None:
    sheets = StyleSheets(_document())
    assert [r.selector_text for r in sheets.css_rules("#base{.btn}")] == [".btn"]
    assert sheets.css_rules("") == []
    assert StyleSheets.camel_case("-moz-user-select") == "MozUserSelect"


def test_call_shortcut_chains() -> None:
    doc = _document()
    sheets = StyleSheets(doc)

    assert sheets(".btn", ["color", "user-select"]) == {"color": "red", "user-select": "none"}
    sheets(".btn", "user-select", "text").css("color", "green")
    assert stylesheet("#base{.btn}", "user-select", document=doc) == "text"
    assert stylesheet("#theme{.btn}", "color", document=doc) == "green"


def test_name_cache_released_with_host() -> None:
    profile = EngineProfile(id="gecko", name="Gecko", properties=("color", "-moz-user-select"))
    gc.collect()
    before = len(_NAME_RESOLVERS)

    for _ in range(50):
        doc = Document(profile=profile)
        StyleSheets(doc).css_style_name("user-select")
    del doc
    gc.collect()

    assert len(_NAME_RESOLVERS) <= before
    assert profile.style_names is profile.style_names
