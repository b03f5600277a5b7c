from pathlib import Path
import subprocess

import pytest

from fontindex import enumerator
from fontindex.attributes import Attributes, Style
from fontindex.enumerator import (
    FontRecord,
    discover_system_fonts,
    enumerate_directories,
    enumerate_fontconfig,
    family_from_stem,
    parse_fc_list,
    system_font_dirs,
)
from fontindex.platform import Os


FC_OUTPUT = """\
/usr/share/fonts/dejavu/DejaVuSans.ttf|0|DejaVu Sans|Book|80|100|0
/usr/share/fonts/dejavu/DejaVuSans-BoldOblique.ttf|0|DejaVu Sans|Bold Oblique,Oblique|200|100|110
/usr/share/fonts/noto/NotoSansCJK-Regular.ttc|2|Noto Sans CJK JP,Noto Sans CJK JP Regular|Regular|80|100|0
/usr/share/fonts/inter/Inter.ttf|65536|Inter|Thin|0|100|0
/usr/share/fonts/broken.ttf|0||Regular|80|100|0
garbage line without separators
"""


def test_parse_fc_list() -> None:
    records = parse_fc_list(FC_OUTPUT)
    assert [record.family for record in records] == [
        "DejaVu Sans",
        "DejaVu Sans",
        "Noto Sans CJK JP",
    ]
    regular, bold_oblique, cjk = records
    assert regular.attributes == Attributes()
    assert bold_oblique.attributes == Attributes(weight=700, style=Style.OBLIQUE)
    assert cjk.index == 2
    assert cjk.source == Path("/usr/share/fonts/noto/NotoSansCJK-Regular.ttc")


def test_parse_fc_list_uses_style_when_weight_is_missing() -> None:
    records = parse_fc_list("/fonts/Demo-Bold.otf|0|Demo|Bold Italic|||\n")
    assert records[0].attributes == Attributes(weight=700, style=Style.ITALIC)


def test_enumerate_fontconfig_runs_fc_list(monkeypatch) -> None:
    monkeypatch.delenv(enumerator.SKIP_FONTCONFIG_ENV, raising=False)
    monkeypatch.setattr(enumerator.shutil, "which", lambda name: "/usr/bin/fc-list")
    calls: list[list[str]] = []

    def fake_run(cmd, **kwargs):
        calls.append(cmd)
        assert kwargs["check"] is True
        return subprocess.CompletedProcess(cmd, 0, stdout=FC_OUTPUT, stderr="")

    monkeypatch.setattr(enumerator.subprocess, "run", fake_run)
    records = enumerate_fontconfig()
    assert len(records) == 3
    assert calls[0][:2] == ["fc-list", "-f"]


def test_enumerate_fontconfig_failures_yield_no_records(monkeypatch) -> None:
    monkeypatch.delenv(enumerator.SKIP_FONTCONFIG_ENV, raising=False)
    monkeypatch.setattr(enumerator.shutil, "which", lambda name: "/usr/bin/fc-list")

    def failing_run(cmd, **kwargs):
        raise subprocess.CalledProcessError(1, cmd)

    monkeypatch.setattr(enumerator.subprocess, "run", failing_run)
    assert enumerate_fontconfig() == []


def test_enumerate_fontconfig_can_be_disabled(monkeypatch) -> None:
    monkeypatch.setattr(enumerator.shutil, "which", lambda name: pytest.fail("probed fc-list"))
    assert enumerate_fontconfig() == []


@pytest.mark.parametrize(
    ("stem", "family"),
    [
        ("Roboto-BoldItalic", "Roboto"),
        ("DejaVuSansMono-Oblique", "DejaVuSansMono"),
        ("Source_Sans_Pro-SemiBold", "Source Sans Pro"),
        ("Inter", "Inter"),
        ("Regular", "Regular"),
    ],
)
def test_family_from_stem(stem: str, family: str) -> None:
    assert family_from_stem(stem) == family


def test_enumerate_directories(tmp_path: Path) -> None:
    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / "Lato-Regular.ttf").write_bytes(b"a")
    (nested / "Lato-BoldItalic.otf").write_bytes(b"b")
    (nested / "README.md").write_text("not a font", encoding="utf-8")

    records = enumerate_directories([tmp_path, tmp_path / "missing", nested])
    assert len(records) == 2
    assert {record.family for record in records} == {"Lato"}
    bold = next(record for record in records if record.source.suffix == ".otf")
    assert bold.attributes == Attributes(weight=700, style=Style.ITALIC)


def test_system_font_dirs(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("WINDIR", str(tmp_path))
    monkeypatch.delenv("LOCALAPPDATA", raising=False)
    assert system_font_dirs(Os.WINDOWS) == [tmp_path / "Fonts"]
    assert Path("/System/Library/Fonts") in system_font_dirs(Os.MACOS)
    assert Path("/usr/share/fonts") in system_font_dirs(Os.UNIX)
    assert system_font_dirs(Os.ANDROID)[0] == Path("/system/fonts")


def test_discover_prefers_explicit_directories(monkeypatch, tmp_path: Path) -> None:
    (tmp_path / "Demo-Regular.ttf").write_bytes(b"a")
    monkeypatch.setattr(
        enumerator, "enumerate_fontconfig", lambda **kwargs: pytest.fail("used fontconfig")
    )
    records = discover_system_fonts(Os.UNIX, font_dirs=[tmp_path])
    assert [record.family for record in records] == ["Demo"]


def test_discover_uses_fontconfig_on_unix(monkeypatch) -> None:
    fake = [FontRecord(family="Demo", attributes=Attributes(), source=Path("/fonts/demo.ttf"))]
    monkeypatch.setattr(enumerator, "enumerate_fontconfig", lambda **kwargs: fake)
    assert discover_system_fonts(Os.UNIX) == fake


def test_discover_falls_back_to_platform_dirs(monkeypatch, tmp_path: Path) -> None:
    (tmp_path / "Demo-Regular.ttf").write_bytes(b"a")
    monkeypatch.setattr(enumerator, "enumerate_fontconfig", lambda **kwargs: [])
    monkeypatch.setattr(enumerator, "system_font_dirs", lambda platform: [tmp_path])
    records = discover_system_fonts(Os.UNIX)
    assert [record.family for record in records] == ["Demo"]
