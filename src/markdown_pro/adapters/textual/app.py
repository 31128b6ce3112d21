"""Textual application hosting the Markdown editor, plus the CLI entry point."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Dict, Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the app is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Horizontal, Vertical, VerticalScroll
    from textual.screen import ModalScreen
    from textual.widgets import Footer, Header, Input, Label, Markdown, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use markdown_pro.adapters.textual.app"
    ) from exc

from markdown_pro.buffer import BufferMirror, HistoryState
from markdown_pro.config import EditorSettings
from markdown_pro.engine import PROMPTS, ParameterKind
from markdown_pro.export import build_export, write_export
from markdown_pro.keymaps import shortcut_legend
from markdown_pro.preview import create_parser, render
from markdown_pro.runtime import telemetry
from markdown_pro.session import EditorSession

from .controller import (
    Answers,
    TextAreaSurface,
    TextualEditorAdapter,
    TextualUIHooks,
)


class ShortcutTextArea(TextArea):
    """``TextArea`` that offers every key to the shortcut table first."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.adapter: TextualEditorAdapter | None = None

    async def on_key(self, event: events.Key) -> None:
        if self.adapter is None:
            return
        result = self.adapter.handle_textual_key(event.key, text=event.character)
        if result.consumed:
            event.prevent_default()
            event.stop()


class PromptScreen(ModalScreen[Optional[str]]):
    """Single-line question; Escape dismisses with ``None``."""

    DEFAULT_CSS = """
    PromptScreen {
        align: center middle;
    }

    #prompt-box {
        width: 60;
        height: auto;
        border: round $accent;
        padding: 1 2;
        background: $surface;
    }
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, message: str, default: Optional[str] = None) -> None:
        super().__init__()
        self._message = message
        self._default = default or ""

    def compose(self) -> ComposeResult:
        with Vertical(id="prompt-box"):
            yield Label(self._message)
            yield Input(value=self._default, id="prompt-input")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.dismiss(event.value)

    def action_cancel(self) -> None:
        self.dismiss(None)


class MarkdownProApp(App[None], inherit_bindings=False):
    """Editor + live preview with Markdown shortcuts."""

    TITLE = "Markdown Pro Editor"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    #shortcuts {
        height: auto;
        padding: 0 1;
        color: $text-muted;
    }

    #panes {
        height: 1fr;
    }

    #editor {
        width: 1fr;
        border: round $accent;
    }

    #preview-pane {
        width: 1fr;
        border: round $secondary;
        padding: 0 1;
    }

    #status-line {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }
    """

    # App defaults (ctrl+q quit, ctrl+p palette) would shadow editor shortcuts.
    BINDINGS = [
        Binding("f2", "toggle_preview", "Preview"),
        Binding("f3", "toggle_dark", "Dark Mode"),
        Binding("f4", "export", "Download README.md"),
        Binding("f10", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        settings: Optional[EditorSettings] = None,
        initial_text: str = "",
    ) -> None:
        super().__init__()
        self.settings = settings or EditorSettings()
        self._initial_text = initial_text
        self.session: EditorSession | None = None
        self.adapter: TextualEditorAdapter | None = None
        self._editor: ShortcutTextArea | None = None
        self._preview: Markdown | None = None
        self._status: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("", id="shortcuts")
        with Horizontal(id="panes"):
            self._editor = ShortcutTextArea(
                self._initial_text, id="editor", soft_wrap=True
            )
            yield self._editor
            with VerticalScroll(id="preview-pane"):
                self._preview = Markdown(
                    self._initial_text, id="preview", parser_factory=create_parser
                )
                yield self._preview
        self._status = Static("", id="status-line")
        yield self._status
        yield Footer()

    def on_mount(self) -> None:
        assert self._editor is not None
        surface = TextAreaSurface(self._editor)
        self.session = EditorSession(
            surface,
            history=HistoryState(self.settings.history_limit),
            scheduler=surface,
        )
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            collect_parameters=self._collect_parameters,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)
        self._editor.adapter = self.adapter
        legend = "  ".join(shortcut_legend(self.session.keymap_registry))
        self.query_one("#shortcuts", Static).update(legend)
        self._apply_theme()
        self.query_one("#preview-pane").display = self.settings.show_preview
        self._editor.focus()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if self._preview is not None and self.settings.show_preview:
            self._preview.update(event.text_area.text)

    def action_toggle_preview(self) -> None:
        self.settings.show_preview = not self.settings.show_preview
        pane = self.query_one("#preview-pane")
        pane.display = self.settings.show_preview
        if self.settings.show_preview and self._preview and self._editor:
            self._preview.update(self._editor.text)

    def action_toggle_dark(self) -> None:
        self.settings.dark = not self.settings.dark
        self._apply_theme()

    def action_export(self) -> None:
        if self._editor is None:
            return
        path = write_export(build_export(self._editor.text), self.settings.export_dir)
        self._update_status(f"saved {path}")
        self.notify(f"Saved {path}")

    def _apply_theme(self) -> None:
        self.theme = "textual-dark" if self.settings.dark else "textual-light"

    def _collect_parameters(
        self,
        kinds: Tuple[ParameterKind, ...],
        done: Callable[[Answers], None],
    ) -> None:
        answers: Dict[ParameterKind, str] = {}

        def ask(index: int) -> None:
            if index == len(kinds):
                done(answers)
                return
            kind = kinds[index]
            message, default = PROMPTS[kind]

            def answered(value: Optional[str]) -> None:
                if value is None:
                    done(None)
                    return
                answers[kind] = value
                ask(index + 1)

            self.push_screen(PromptScreen(message, default), answered)

        ask(0)

    def _update_buffer(self, mirror: BufferMirror) -> None:
        depth = mirror.attributes.get("undo_depth", "0")
        self.sub_title = f"{len(mirror.text)} chars | undo {depth}"

    def _update_status(self, status: str) -> None:
        if self._status is not None:
            self._status.update(status)

    def _log_line(self, line: str) -> None:
        telemetry.record_event("ui.log", level="debug", data={"line": line})


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="markdown-pro", description="Terminal Markdown editor with shortcuts."
    )
    parser.add_argument("file", nargs="?", help="Markdown file to start from")
    parser.add_argument("--dark", action="store_true", default=None, help="Start in dark mode")
    parser.add_argument(
        "--no-preview",
        dest="preview",
        action="store_false",
        default=None,
        help="Start with the preview hidden",
    )
    parser.add_argument(
        "--export-dir",
        type=Path,
        help="Directory README.md is written to (default: current directory)",
    )
    parser.add_argument(
        "--history-limit",
        type=int,
        help="Maximum undo depth (default: 100)",
    )
    parser.add_argument(
        "--log-preset",
        choices=sorted(telemetry.PRESETS),
        help="Logging preset applied on top of MARKDOWN_PRO_LOG_* settings",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Print the HTML preview of FILE (or stdin) and exit",
    )
    return parser.parse_args(argv)


def _settings_from_args(args: argparse.Namespace) -> EditorSettings:
    settings = EditorSettings.from_env()
    if args.dark is not None:
        settings.dark = args.dark
    if args.preview is not None:
        settings.show_preview = args.preview
    if args.export_dir is not None:
        settings.export_dir = args.export_dir
    if args.history_limit is not None:
        if args.history_limit < 1:
            raise SystemExit("--history-limit must be at least 1")
        settings.history_limit = args.history_limit
    return settings


def _read_source(path: Optional[str]) -> str:
    if path is None:
        return ""
    source = Path(path)
    if not source.exists():
        return ""
    return source.read_text(encoding="utf-8")


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    if args.render:
        text = _read_source(args.file) if args.file else sys.stdin.read()
        sys.stdout.write(render(text))
        return
    app = MarkdownProApp(
        settings=_settings_from_args(args), initial_text=_read_source(args.file)
    )
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
