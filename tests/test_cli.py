import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from fontindex.ui.cli import app


@pytest.fixture
def font_dir(tmp_path: Path) -> Path:
    fonts = tmp_path / "fonts"
    fonts.mkdir()
    for name in ("Lato-Regular.ttf", "Lato-Bold.ttf", "Arimo-Regular.ttf", "Mona-Regular.otf"):
        (fonts / name).write_bytes(b"font")
    return fonts


@pytest.fixture
def profile_path(tmp_path: Path) -> Path:
    path = tmp_path / "profile.yml"
    path.write_text(
        "extends: none\n"
        "cjk:\n"
        "  japanese: [Mona]\n"
        "scripts:\n"
        "  latin: [Missing, Lato, Arimo]\n"
        "generic:\n"
        "  sans-serif: [Arimo, Lato]\n"
        "  emoji: [Noto Color Emoji]\n",
        encoding="utf-8",
    )
    return path


def _invoke(*args: str):
    runner = CliRunner()
    return runner.invoke(app, list(args))


def _global(font_dir: Path, profile_path: Path) -> list[str]:
    return ["--platform", "unix", "--font-dir", str(font_dir), "--profile", str(profile_path)]


def test_families_lists_indexed_fonts(font_dir: Path, profile_path: Path) -> None:
    result = _invoke(*_global(font_dir, profile_path), "families")
    assert result.exit_code == 0, result.output
    assert "Indexed Families" in result.output
    for name in ("Lato", "Arimo", "Mona"):
        assert name in result.output


def test_families_json(font_dir: Path, profile_path: Path) -> None:
    result = _invoke(*_global(font_dir, profile_path), "families", "--json")
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    faces = {entry["name"]: entry["faces"] for entry in payload}
    assert faces == {"Arimo": 1, "Lato": 2, "Mona": 1}


def test_fallbacks_for_latin(font_dir: Path, profile_path: Path) -> None:
    result = _invoke(*_global(font_dir, profile_path), "fallbacks", "latin")
    assert result.exit_code == 0, result.output
    assert "Latn" in result.output
    assert result.output.index("Lato") < result.output.index("Arimo")
    assert "Missing" not in result.output


def test_fallbacks_for_han_by_language(font_dir: Path, profile_path: Path) -> None:
    result = _invoke(*_global(font_dir, profile_path), "fallbacks", "Hani", "--lang", "ja")
    assert result.exit_code == 0, result.output
    assert "japanese" in result.output
    assert "Mona" in result.output

    traditional = _invoke(*_global(font_dir, profile_path), "fallbacks", "han")
    assert traditional.exit_code == 0, traditional.output
    assert "No installed fallback" in traditional.output


def test_fallbacks_rejects_conflicting_variants(font_dir: Path, profile_path: Path) -> None:
    result = _invoke(
        *_global(font_dir, profile_path), "fallbacks", "han", "--cjk", "korean", "--lang", "ja"
    )
    assert result.exit_code == 2


def test_fallbacks_unknown_script(font_dir: Path, profile_path: Path) -> None:
    result = _invoke(*_global(font_dir, profile_path), "fallbacks", "klingon")
    assert result.exit_code == 1
    assert "Unknown script" in result.output


def test_generic_table(font_dir: Path, profile_path: Path) -> None:
    result = _invoke(*_global(font_dir, profile_path), "generic")
    assert result.exit_code == 0, result.output
    sans_line = next(line for line in result.output.splitlines() if "sans-serif" in line)
    assert "Arimo" in sans_line
    emoji_line = next(line for line in result.output.splitlines() if " emoji " in line)
    assert "-" in emoji_line


def test_query_best_face(font_dir: Path, profile_path: Path) -> None:
    result = _invoke(*_global(font_dir, profile_path), "query", "lato", "--weight", "800")
    assert result.exit_code == 0, result.output
    assert "Best match for lato" in result.output
    assert "weight=700" in result.output


def test_query_generic_family(font_dir: Path, profile_path: Path) -> None:
    result = _invoke(*_global(font_dir, profile_path), "query", "sans-serif")
    assert result.exit_code == 0, result.output
    assert "Arimo" in result.output


def test_query_prefers_installed_family_over_generic_name(
    font_dir: Path, profile_path: Path
) -> None:
    (font_dir / "Emoji-Regular.ttf").write_bytes(b"font")
    result = _invoke(*_global(font_dir, profile_path), "query", "emoji")
    assert result.exit_code == 0, result.output
    assert "Best match for emoji" in result.output
    assert "Emoji" in result.output


def test_query_missing_family(font_dir: Path, profile_path: Path) -> None:
    result = _invoke(*_global(font_dir, profile_path), "query", "Helvetica")
    assert result.exit_code == 1
    assert "No face found" in result.output


def test_query_rejects_invalid_style(font_dir: Path, profile_path: Path) -> None:
    result = _invoke(*_global(font_dir, profile_path), "query", "Lato", "--style", "wavy")
    assert result.exit_code == 2


def test_invalid_profile_reports_error(font_dir: Path, tmp_path: Path) -> None:
    broken = tmp_path / "broken.yml"
    broken.write_text("scripts:\n  klingon: [pIqaD]\n", encoding="utf-8")
    result = _invoke("--font-dir", str(font_dir), "--profile", str(broken), "families")
    assert result.exit_code == 1
    assert "Invalid fallback profile" in result.output


def test_platform_defaults_apply_without_profile(tmp_path: Path) -> None:
    fonts = tmp_path / "fonts"
    fonts.mkdir()
    (fonts / "Arial.ttf").write_bytes(b"font")
    result = _invoke("--platform", "windows", "--font-dir", str(fonts), "generic")
    assert result.exit_code == 0, result.output
    sans_line = next(line for line in result.output.splitlines() if "sans-serif" in line)
    assert "Arial" in sans_line


def test_help_lists_commands() -> None:
    result = _invoke("--help")
    assert result.exit_code == 0
    for command in ("families", "fallbacks", "generic", "query"):
        assert command in result.output
