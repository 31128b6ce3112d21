from __future__ import annotations

from pathlib import Path

import pytest

from markdown_pro.config import EditorSettings


def test_settings_defaults_from_empty_environment() -> None:
    settings = EditorSettings.from_env({})

    assert settings.history_limit == 100
    assert settings.dark is False
    assert settings.show_preview is True


def test_settings_read_prefixed_variables(tmp_path: Path) -> None:
    settings = EditorSettings.from_env(
        {
            "MARKDOWN_PRO_HISTORY_LIMIT": "25",
            "MARKDOWN_PRO_EXPORT_DIR": str(tmp_path),
            "MARKDOWN_PRO_DARK": "yes",
            "MARKDOWN_PRO_PREVIEW": "0",
        }
    )

    assert settings.history_limit == 25
    assert settings.export_dir == tmp_path
    assert settings.dark is True
    assert settings.show_preview is False


@pytest.mark.parametrize("raw", ["abc", "0", "-4"])
def test_invalid_history_limit_falls_back(raw: str) -> None:
    settings = EditorSettings.from_env({"MARKDOWN_PRO_HISTORY_LIMIT": raw})

    assert settings.history_limit == 100


def test_settings_reject_non_positive_limit() -> None:
    with pytest.raises(ValueError):
        EditorSettings(history_limit=0)


def test_cli_render_prints_html(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    pytest.importorskip("textual")
    from markdown_pro.adapters.textual.app import main

    source = tmp_path / "notes.md"
    source.write_text("# Hello\n\n**bold**\n", encoding="utf-8")

    main(["--render", str(source)])

    out = capsys.readouterr().out
    assert "<h1>Hello</h1>" in out
    assert "<strong>bold</strong>" in out


def test_cli_settings_override_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    pytest.importorskip("textual")
    from markdown_pro.adapters.textual.app import _parse_args, _settings_from_args

    monkeypatch.setenv("MARKDOWN_PRO_DARK", "1")
    args = _parse_args(["--no-preview", "--history-limit", "7"])

    settings = _settings_from_args(args)

    assert settings.dark is True
    assert settings.show_preview is False
    assert settings.history_limit == 7


def test_cli_log_preset_reconfigures_logging(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    pytest.importorskip("textual")
    from markdown_pro.adapters.textual.app import main
    from markdown_pro.runtime import telemetry

    source = tmp_path / "notes.md"
    source.write_text("text\n", encoding="utf-8")

    try:
        main(["--log-preset", "development", "--render", str(source)])
        assert telemetry.active_settings().level == "DEBUG"
    finally:
        telemetry.configure()

    assert "<p>text</p>" in capsys.readouterr().out
