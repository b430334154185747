from __future__ import annotations

from pathlib import Path

import pytest

from cssctl.core.errors import ProfileValidationError
from cssctl.core.profile_loader import load_profiles


@pytest.fixture(autouse=True)
def _isolated_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "cfg"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))


def _write_profile(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_load_packaged_profiles() -> None:
    loaded = load_profiles()
    assert {"standard", "webkit", "gecko"} <= set(loaded.profiles)
    assert loaded.warnings == ()

    webkit = loaded.profiles["webkit"]
    assert "-webkit-transform" in webkit.properties
    assert "WebkitTransform" in webkit.style_names
    assert "transform" in loaded.profiles["standard"].style_names


def test_user_profile_is_added(tmp_path: Path) -> None:
    _write_profile(
        tmp_path / "data" / "cssctl" / "profiles" / "trident.yaml",
        """
id: trident
name: Trident
properties:
  - color
  - -ms-transform
""",
    )

    loaded = load_profiles()
    assert loaded.profiles["trident"].style_names == frozenset({"color", "msTransform"})


def test_user_profile_override_warns(tmp_path: Path) -> None:
    _write_profile(
        tmp_path / "cfg" / "cssctl" / "profiles" / "webkit.yml",
        """
id: webkit
name: Custom WebKit
properties: [color]
""",
    )

    loaded = load_profiles()
    assert loaded.profiles["webkit"].name == "Custom WebKit"
    assert loaded.warnings == ("User profile 'webkit' overrides packaged profile",)


def test_missing_required_keys_rejected(tmp_path: Path) -> None:
    _write_profile(
        tmp_path / "cfg" / "cssctl" / "profiles" / "missing.yaml",
        """
id: missing
name: Missing
""",
    )

    with pytest.raises(ProfileValidationError, match="properties"):
        load_profiles()


def test_invalid_property_name_rejected(tmp_path: Path) -> None:
    _write_profile(
        tmp_path / "cfg" / "cssctl" / "profiles" / "bad.yaml",
        """
id: bad
name: Bad
properties: [backgroundColor]
""",
    )

    with pytest.raises(ProfileValidationError, match="properties.0"):
        load_profiles()


def test_unknown_vendor_prefix_rejected(tmp_path: Path) -> None:
    _write_profile(
        tmp_path / "cfg" / "cssctl" / "profiles" / "khtml.yaml",
        """
id: khtml
name: KHTML
properties: [color, -khtml-user-select]
""",
    )

    with pytest.raises(ProfileValidationError, match="unknown vendor prefix '-khtml-'"):
        load_profiles()


def test_known_vendor_prefixes_accepted(tmp_path: Path) -> None:
    _write_profile(
        tmp_path / "cfg" / "cssctl" / "profiles" / "mixed.yaml",
        """
id: mixed
name: Mixed
properties: [-webkit-transform, -moz-appearance, -o-transition, -ms-filter]
""",
    )

    style_names = load_profiles().profiles["mixed"].style_names
    assert style_names == frozenset({"WebkitTransform", "MozAppearance", "OTransition", "msFilter"})


def test_style_name_collision_rejected(tmp_path: Path) -> None:
    _write_profile(
        tmp_path / "cfg" / "cssctl" / "profiles" / "clash.yaml",
        """
id: clash
name: Clash
properties: [-ms-transform, ms-transform]
""",
    )

    with pytest.raises(ProfileValidationError, match="both resolve to 'msTransform'"):
        load_profiles()


def test_user_profile_in_data_dir_overrides_config_dir(tmp_path: Path) -> None:
    _write_profile(
        tmp_path / "cfg" / "cssctl" / "profiles" / "local.yaml",
        "id: local\nname: From Config\nproperties: [color]\n",
    )
    _write_profile(
        tmp_path / "data" / "cssctl" / "profiles" / "local.yaml",
        "id: local\nname: From Data\nproperties: [color]\n",
    )

    loaded = load_profiles()
    assert loaded.profiles["local"].name == "From Data"
    assert loaded.warnings == ("User profile 'local' overrides user profile",)


def test_style_names_computed_once() -> None:
    standard = load_profiles().profiles["standard"]
    assert standard.style_names is standard.style_names


def test_non_mapping_root_rejected(tmp_path: Path) -> None:
    _write_profile(tmp_path / "cfg" / "cssctl" / "profiles" / "list.yaml", "- color\n")

    with pytest.raises(ProfileValidationError, match="mapping at root"):
        load_profiles()


def test_non_yaml_files_are_ignored(tmp_path: Path) -> None:
    _write_profile(tmp_path / "cfg" / "cssctl" / "profiles" / "notes.txt", "not a profile")
    assert "notes" not in load_profiles().profiles
