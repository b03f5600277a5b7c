from pathlib import Path

from pydantic import ValidationError
import pytest

from fontindex.exceptions import ProfileError
from fontindex.platform import Os
from fontindex.profile import FallbackProfile, load_profile, profile_for
from fontindex.types import Cjk, GenericFamily, Script


def test_builtin_profiles_per_platform() -> None:
    windows = profile_for(Os.WINDOWS)
    assert windows.generic[GenericFamily.SANS_SERIF] == ["arial"]
    assert windows.scripts[Script.LATIN] == ["times new roman"]

    macos = profile_for("darwin")
    assert macos.cjk[Cjk.SIMPLIFIED] == ["pingfang sc"]
    assert macos.scripts[Script.BENGALI] == []

    android = profile_for("android")
    assert android.scripts == profile_for("unix").scripts
    assert android.generic[GenericFamily.SANS_SERIF] == ["roboto"]
    assert profile_for("other").generic == profile_for("unix").generic


def test_builtin_profiles_never_set_the_none_slot() -> None:
    for platform in Os:
        assert Cjk.NONE not in profile_for(platform).cjk


def test_profile_coerces_keys_and_single_names() -> None:
    profile = FallbackProfile(
        cjk={"japanese": "Noto Sans CJK JP"},
        scripts={"Cyrl": ["PT Sans"], "greek": None},
        generic={"sans-serif": ["Inter"]},
    )
    assert profile.cjk == {Cjk.JAPANESE: ["Noto Sans CJK JP"]}
    assert profile.scripts == {Script.CYRILLIC: ["PT Sans"], Script.GREEK: []}
    assert profile.generic == {GenericFamily.SANS_SERIF: ["Inter"]}


def test_profile_rejects_invalid_entries() -> None:
    with pytest.raises(ValidationError):
        FallbackProfile(cjk={"none": ["Anything"]})
    with pytest.raises(ValidationError):
        FallbackProfile(scripts={"klingon": ["pIqaD"]})
    with pytest.raises(ValidationError):
        FallbackProfile(colors={"red": ["x"]})
    with pytest.raises(ValidationError):
        FallbackProfile(scripts=["latin"])


def test_merge_replaces_entries() -> None:
    base = profile_for("unix")
    merged = base.merge(FallbackProfile(scripts={"latin": ["Inter"]}))
    assert merged.scripts[Script.LATIN] == ["Inter"]
    assert merged.scripts[Script.ARABIC] == base.scripts[Script.ARABIC]
    assert merged.generic == base.generic


def test_load_profile_extends_platform(tmp_path: Path) -> None:
    path = tmp_path / "fonts.yml"
    path.write_text(
        "extends: windows\n"
        "scripts:\n"
        "  latin: [Segoe UI, Arial]\n"
        "generic:\n"
        "  emoji: Noto Color Emoji\n",
        encoding="utf-8",
    )
    profile = load_profile(path)
    assert profile.scripts[Script.LATIN] == ["Segoe UI", "Arial"]
    assert profile.scripts[Script.ARABIC] == ["tahoma", "segoe ui"]
    assert profile.generic[GenericFamily.EMOJI] == ["Noto Color Emoji"]
    assert profile.generic[GenericFamily.SERIF] == ["times new roman"]


def test_load_profile_without_base(tmp_path: Path) -> None:
    path = tmp_path / "fonts.yml"
    path.write_text("extends: none\ncjk:\n  korean: [Nanum Gothic]\n", encoding="utf-8")
    profile = load_profile(path)
    assert profile.cjk == {Cjk.KOREAN: ["Nanum Gothic"]}
    assert profile.scripts == {}


def test_empty_profile_file_uses_current_platform(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("FONTINDEX_PLATFORM", "macos")
    path = tmp_path / "fonts.yml"
    path.write_text("", encoding="utf-8")
    assert load_profile(path) == profile_for(Os.MACOS)


@pytest.mark.parametrize(
    "content",
    [
        "scripts: [unbalanced\n",
        "- just\n- a list\n",
        "extends: beos\n",
        "scripts:\n  klingon: [pIqaD]\n",
    ],
)
def test_load_profile_reports_errors(tmp_path: Path, content: str) -> None:
    path = tmp_path / "fonts.yml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ProfileError):
        load_profile(path)


def test_load_profile_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ProfileError):
        load_profile(tmp_path / "missing.yml")
