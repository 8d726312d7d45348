"""Editor launching for the projects registry."""

import shutil
import subprocess
import sys

from rich.markup import escape

from devos.errors import EditorLaunchFailure
from devos.errors_catalog import actionable_error


class EditorLauncher:
    """Opens a file in VS Code, falling back to the platform's default opener."""

    PRIMARY_EDITOR = "code"

    def __init__(self, logger, console, subprocess_module=subprocess, platform: str = sys.platform):
        self.logger = logger
        self.console = console
        self.subprocess = subprocess_module
        self.platform = platform

    def fallback_editor(self) -> str:
        if self.platform == "win32":
            return "notepad"
        if self.platform == "darwin":
            return "open"
        return "xdg-open"

    def open(self, path) -> str:
        try:
            self._launch(self.PRIMARY_EDITOR, path)
            return self.PRIMARY_EDITOR
        except EditorLaunchFailure as exc:
            self.logger.debug("Primary editor failed: %s", exc.__cause__)

        fallback = self.fallback_editor()
        self.console.print(
            f"[yellow]⚠️  VS Code not found. Opening in default editor ({escape(fallback)})...[/yellow]"
        )
        self._launch(fallback, path)
        return fallback

    def _launch(self, editor: str, path):
        # shutil.which resolves wrappers such as code.cmd on Windows.
        executable = shutil.which(editor) or editor
        self.logger.debug("Launching editor: %s %s", executable, path)
        try:
            self.subprocess.Popen([executable, str(path)])
        except OSError as exc:
            raise EditorLaunchFailure(actionable_error("editor_unavailable", path=str(path))) from exc
