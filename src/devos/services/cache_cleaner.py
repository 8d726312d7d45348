"""Asset cache cleaning step for the run command.

Only reports what would be cleaned: no database connection is opened.
"""

import time
from typing import Sequence

from rich.markup import escape

from devos.models import ProjectConfig

UNKNOWN_DATABASE = "UNKNOWN"


def find_database_name(args: Sequence[str]) -> str:
    """Return the value following the first ``-d`` flag."""
    args = list(args)
    if "-d" not in args:
        return UNKNOWN_DATABASE

    index = args.index("-d")
    if index + 1 >= len(args):
        return UNKNOWN_DATABASE
    return args[index + 1]


class CacheCleaner:
    """Simulates dropping the compiled js/css attachments of a project database."""

    def __init__(self, logger, console, delay_seconds: float = 0.5):
        self.logger = logger
        self.console = console
        self.delay_seconds = delay_seconds

    def clean(self, project: ProjectConfig) -> str:
        self.console.print("[yellow]🧹 CLEANING CACHE selected...[/yellow]")
        db_name = find_database_name(project.args)
        self.logger.debug("Cache cleaning requested for database %s", db_name)

        self.console.print(
            f"⚡ Connecting to DB \\[{escape(db_name)}] -> DELETE ir_attachment (assets)..."
        )
        time.sleep(self.delay_seconds)
        self.console.print("[green]✅ CACHE NUKED.[/green]")
        return db_name
