"""Tests for the JSON theme walker and file processing."""

import json
import sys

import pytest

from hexshift.core.errors import ThemeDocumentError
from hexshift.logic.run.resolver import ThemeJob
from hexshift.logic.theme import engine as theme_engine
from hexshift.logic.theme.engine import load_theme, process_theme_file
from hexshift.logic.theme.walker import map_strings, rename_theme
from hexshift.logic.transform.engine import ColorTransformer, transform_hex

from .conftest import THEME_JSON


def _hex(value: str) -> str:
    return transform_hex(value, True, report=False)


# ---------------------------------------------------------------------------
# Walker
# ---------------------------------------------------------------------------


class TestMapStrings:
    def test_visits_every_string_value_in_order(self) -> None:
        seen = []
        map_strings(json.loads(THEME_JSON), lambda value: seen.append(value))
        assert seen == [
            "Retro Block", "someone", "/themes/retro-block.xml", "#121111", "#A9915B",
            "bg", "#A6A6A6", "#5c798a", "#625B51", "#FF2828", "plain",
        ]

    def test_keys_and_non_strings_kept(self) -> None:
        node = {"abc": 3, "fed": [True, None, 1.5], "nested": {"add": "cab"}}
        result = map_strings(node, lambda value: "X")
        assert result == {"abc": 3, "fed": [True, None, 1.5], "nested": {"add": "X"}}

    def test_input_not_mutated(self) -> None:
        theme = json.loads(THEME_JSON)
        result = map_strings(theme, lambda value: value.upper())
        assert theme["colors"]["bg"] == "#121111"
        assert result["icons"]["ColorPalette"]["Actions.Grey"] == "#625B51"
        assert result["author"] == "SOMEONE"


class TestRenameTheme:
    def test_rewrites_name_and_scheme_reference(self) -> None:
        theme = rename_theme(json.loads(THEME_JSON), "Retro Block - high", "retro-block-high.xml")
        assert theme["name"] == "Retro Block - high"
        assert theme["editorScheme"] == "/themes/retro-block-high.xml"

    def test_absent_fields_stay_absent(self) -> None:
        assert rename_theme({"dark": True}, "X - high", "x-high.xml") == {"dark": True}

    def test_bare_scheme_reference(self) -> None:
        theme = rename_theme({"editorScheme": "retro-block.xml"}, "X", "retro-block-high.xml")
        assert theme["editorScheme"] == "retro-block-high.xml"


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


class TestThemeFile:
    def _job(self, themes_dir, **kwargs) -> ThemeJob:
        return ThemeJob(
            scheme_path=themes_dir / "retro-block.xml",
            theme_path=themes_dir / "retro-block.theme.json",
            **kwargs,
        )

    def test_writes_renamed_and_recolored_copy(self, themes_dir) -> None:
        transformer = ColorTransformer(report=False)
        output = process_theme_file(self._job(themes_dir), transformer)

        assert output == themes_dir / "retro-block-high.theme.json"
        theme = json.loads(output.read_text(encoding="utf-8"))
        assert theme["name"] == "Retro Block - high"
        assert theme["editorScheme"] == "/themes/retro-block-high.xml"
        assert theme["dark"] is True
        assert theme["colors"] == {"bg": _hex("#121111"), "accent": _hex("#A9915B")}
        assert theme["ui"]["*"]["background"] == "bg"
        assert theme["ui"]["Button"]["arc"] == 3
        assert theme["swatches"] == [_hex("#FF2828"), "plain"]
        assert list(theme) == list(json.loads(THEME_JSON))
        assert transformer.seen == 6

    def test_input_untouched(self, themes_dir) -> None:
        before = (themes_dir / "retro-block.theme.json").read_bytes()
        process_theme_file(self._job(themes_dir), ColorTransformer(report=False))
        assert (themes_dir / "retro-block.theme.json").read_bytes() == before

    def test_name_falls_back_to_file_stem(self, themes_dir) -> None:
        (themes_dir / "retro-block.theme.json").write_text('{"name": 7, "c": "#000000"}', encoding="utf-8")
        output = process_theme_file(self._job(themes_dir, suffix="x"), ColorTransformer(report=False))
        assert json.loads(output.read_text(encoding="utf-8"))["name"] == "retro-block - x"

    @pytest.mark.parametrize(
        "content, message",
        [
            (THEME_JSON[:40], "invalid JSON"),
            ("[\"#121111\"]", "expected an object"),
            ("\"#121111\"", "expected an object"),
        ],
    )
    def test_bad_theme_aborts_without_output(self, themes_dir, content: str, message: str) -> None:
        (themes_dir / "retro-block.theme.json").write_text(content, encoding="utf-8")
        job = self._job(themes_dir)
        with pytest.raises(ThemeDocumentError, match=message):
            process_theme_file(job, ColorTransformer(report=False))
        assert not job.theme_output.exists()

    def test_non_utf8_theme(self, themes_dir) -> None:
        (themes_dir / "retro-block.theme.json").write_bytes(b'{"name": "\xff\xfe"}')
        job = self._job(themes_dir)
        with pytest.raises(ThemeDocumentError, match="not UTF-8"):
            process_theme_file(job, ColorTransformer(report=False))
        assert not job.theme_output.exists()

    def test_deeply_nested_theme(self, themes_dir) -> None:
        (themes_dir / "retro-block.theme.json").write_text(
            '{"colors": ' + "[" * 100000 + "]" * 100000 + "}", encoding="utf-8"
        )
        job = self._job(themes_dir)
        with pytest.raises(ThemeDocumentError, match="nested too deeply"):
            process_theme_file(job, ColorTransformer(report=False))
        assert not job.theme_output.exists()

    def test_nesting_too_deep_to_recolor(self, monkeypatch, themes_dir) -> None:
        deep = []
        for _ in range(sys.getrecursionlimit() * 2):
            deep = [deep]
        monkeypatch.setattr(theme_engine, "load_theme", lambda path: {"colors": deep})
        job = self._job(themes_dir)
        with pytest.raises(ThemeDocumentError, match="nested too deeply"):
            process_theme_file(job, ColorTransformer(report=False))
        assert not job.theme_output.exists()

    def test_missing_theme(self, tmp_path) -> None:
        with pytest.raises(ThemeDocumentError, match="cannot read theme"):
            load_theme(tmp_path / "nope.theme.json")
