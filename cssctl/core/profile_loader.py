"""Engine profile discovery and validation.

A profile lists the CSS property names an engine supports. Packaged profiles
ship in ``cssctl.profiles``; user profiles in the XDG config and data
directories are read afterwards and replace packaged ones with the same id.
"""

from __future__ import annotations

import functools
import json
import logging
import os
import re
from dataclasses import dataclass
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validators

from cssctl.core.errors import ProfileLoadError, ProfileValidationError
from cssctl.core.model import EngineProfile
from cssctl.core.property_names import VENDOR_PREFIXES, camel_case

_VENDOR_RE = re.compile(r"^-([a-z]+)-")
_VENDOR_TAGS = frozenset(prefix.lower() for prefix in VENDOR_PREFIXES)
_PROFILE_SUFFIXES = (".yml", ".yaml")
LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedProfiles:
    profiles: dict[str, EngineProfile]
    warnings: tuple[str, ...]


@functools.cache
def _schema_validator() -> Any:
    schema = json.loads(
        resources.files("cssctl.schemas").joinpath("profile.schema.json").read_text(encoding="utf-8")
    )
    validator_cls = validators.validator_for(schema)
    validator_cls.check_schema(schema)
    return validator_cls(schema)


def _profile_sources() -> list[tuple[str, Path | Traversable]]:
    packaged = resources.files("cssctl.profiles").iterdir()
    sources: list[tuple[str, Path | Traversable]] = [
        ("packaged", item)
        for item in sorted(packaged, key=lambda p: p.name)
        if item.name.endswith(_PROFILE_SUFFIXES)
    ]

    xdg_config = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    xdg_data = Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local/share"))
    for directory in (xdg_config / "cssctl/profiles", xdg_data / "cssctl/profiles"):
        if directory.is_dir():
            sources.extend(("user", p) for p in sorted(directory.iterdir()) if p.suffix in _PROFILE_SUFFIXES)
    return sources


def _check_properties(properties: tuple[str, ...], source: Path | Traversable) -> None:
    """Reject unknown vendor prefixes and names that share a style name."""
    seen: dict[str, str] = {}
    for prop in properties:
        vendor = _VENDOR_RE.match(prop)
        if vendor and vendor.group(1) not in _VENDOR_TAGS:
            known = ", ".join(f"-{tag}-" for tag in sorted(_VENDOR_TAGS))
            raise ProfileValidationError(
                f"Property '{prop}' in {source} uses unknown vendor prefix '-{vendor.group(1)}-'. Known: {known}"
            )
        style_name = camel_case(prop)
        if style_name in seen:
            raise ProfileValidationError(
                f"Properties '{seen[style_name]}' and '{prop}' in {source} both resolve to '{style_name}'"
            )
        seen[style_name] = prop


def _parse_profile(source: Path | Traversable) -> EngineProfile:
    try:
        content = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise ProfileLoadError(f"Could not read profile file {source}: {exc}") from exc

    try:
        doc = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ProfileValidationError(f"Invalid YAML in {source}: {exc}") from exc
    if not isinstance(doc, dict):
        raise ProfileValidationError(f"Profile file {source} must contain a mapping at root")

    try:
        _schema_validator().validate(doc)
    except ValidationError as exc:
        path = ".".join(str(p) for p in exc.path)
        where = f" ({path})" if path else ""
        raise ProfileValidationError(f"Schema validation failed for {source}{where}: {exc.message}") from exc

    properties = tuple(doc["properties"])
    _check_properties(properties, source)
    return EngineProfile(id=doc["id"], name=doc["name"], properties=properties)


def load_profiles() -> LoadedProfiles:
    profiles: dict[str, EngineProfile] = {}
    origins: dict[str, str] = {}
    warnings: list[str] = []

    for origin, source in _profile_sources():
        profile = _parse_profile(source)
        previous = origins.get(profile.id)
        if previous is not None:
            warning = f"{origin.capitalize()} profile '{profile.id}' overrides {previous} profile"
            LOGGER.warning(warning)
            warnings.append(warning)
        profiles[profile.id] = profile
        origins[profile.id] = origin

    return LoadedProfiles(profiles=profiles, warnings=tuple(warnings))
